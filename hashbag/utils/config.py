import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

R = TypeVar("R")


def get_config(
    argv: Optional[List[str]],
    config_cls: Callable[..., R],
    defaults: Optional[Dict[str, Any]] = None,
) -> R:
    """
    Build a read-only `OmegaConf` config for one of the `hashbag` commands.

    Args:
        argv: Either a list of command line arguments to parse, or `None`. If `None`, this argument
            is set from `sys.argv`. Apart from `--config` all arguments must be `key=value` pairs.
        config_cls: Dataclass specifying the config structure (the class itself, not an instance).
            Its docstring is shown as the description in `--help`.
        defaults: Optional values which take the lowest priority, below any YAML file.

    Returns:
        Config object, which will pass as an instance of `config_cls`. Values are merged in order
        of increasing priority: dataclass defaults, `defaults`, YAML files given via `--config`
        (later files overriding earlier ones), and finally `key=value` command line overrides.

    Raises:
        ValueError: if an argument is neither `--config` nor a `key=value` pair.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        description=getattr(config_cls, "__doc__", None),
        epilog="Remaining arguments are `key=value` overrides of the config fields.",
        allow_abbrev=False,  # prevent prefix matching issues
    )
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file. "
        "Argument can be repeated multiple times, with later configs overwriting previous ones.",
    )
    args, config_changes = parser.parse_known_args(argv)

    # `OmegaConf.from_cli` would silently turn a stray word into a key with a `None` value
    malformed = [arg for arg in config_changes if "=" not in arg or arg.startswith(("-", "="))]
    if malformed:
        raise ValueError(f"Expected arguments of the form key=value, got: {', '.join(malformed)}")

    conf_layers: List[Union[DictConfig, ListConfig]] = []
    if defaults:
        conf_layers.append(OmegaConf.create(defaults))

    conf_layers.extend(OmegaConf.load(path) for path in args.config)
    conf_layers.append(OmegaConf.from_cli(config_changes))

    schema = OmegaConf.structured(config_cls)
    config = OmegaConf.merge(schema, *conf_layers)
    OmegaConf.set_readonly(config, True)
    return cast(R, config)


def get_error_message_for_missing_value(name: str, possible_values: List[str]) -> str:
    return f"{name} should be set to one of [{', '.join(possible_values)}]"
