"""Helpers shared by the `hashbag` commands."""

import datetime
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import yaml
from omegaconf import OmegaConf
from tqdm import tqdm

from hashbag.interface.bag import Bag

logger = logging.getLogger(__name__)


@dataclass
class InputConfig:
    strip_whitespace: bool = True  # Whether to strip leading and trailing whitespace of each line
    skip_empty_lines: bool = True  # Whether to drop lines which are empty (after stripping)


@dataclass
class OutputConfig:
    results_dir: str = "."  # Directory to save the results in
    append_timestamp_to_dir: bool = False  # Whether to append the current time to directory name


def read_lines(path: Union[str, Path], config: InputConfig) -> List[str]:
    """Read a file holding one element per line."""
    lines: List[str] = []
    with open(path, "rt") as f_input:
        for line in tqdm(f_input, desc=f"Reading {path}", unit=" lines"):
            line = line.strip() if config.strip_whitespace else line.rstrip("\n")
            if config.skip_empty_lines and not line:
                continue
            lines.append(line)

    if not lines:
        logger.warning(f"No elements were read from {path}")

    return lines


def load_bag(path: Union[str, Path], config: InputConfig) -> Bag[str]:
    bag = Bag.from_list(read_lines(path, config))
    logger.info(f"Loaded {len(bag)} elements from {path}")
    return bag


def prepare_results_dir(config: OutputConfig, name: str) -> Path:
    """Create the output directory and save the config used for this run into it."""
    results_dir = Path(config.results_dir)
    if config.append_timestamp_to_dir:
        timestamp = datetime.datetime.now().isoformat(timespec="seconds")
        results_dir = results_dir / f"{name}_{timestamp}"

    results_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Outputs will be saved under {results_dir}")

    with open(results_dir / "config.yml", "wt") as f_config:
        # `config` may be a plain dataclass or an already merged `DictConfig`
        config_dict = OmegaConf.to_container(OmegaConf.structured(config), resolve=True)
        yaml.safe_dump(config_dict, f_config)

    return results_dir
