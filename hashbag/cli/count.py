"""Script for counting how many times each line occurs in a file.

Example invocation:
    python ./hashbag/cli/count.py \
        input_file=[INPUT_FILE_PATH] \
        results_dir=[RESULTS_DIR] \
        top_k=10
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from pprint import pformat
from typing import Dict, List, Optional

from omegaconf import MISSING

from hashbag.cli.common import InputConfig, OutputConfig, load_bag, prepare_results_dir
from hashbag.utils.config import get_config as cli_get_config
from hashbag.utils.misc import asdict_extended, count_table

logger = logging.getLogger(__name__)


@dataclass
class CountConfig(InputConfig, OutputConfig):
    """Config for counting the elements of a single file."""

    input_file: str = MISSING  # File with one element per line
    top_k: int = 0  # Number of most common elements to save (all if not positive)


@dataclass
class CountResults:
    size: int
    num_distinct: int
    counts: Dict[str, int]  # Most common first, truncated to `top_k` if it is positive


def run_from_config(config: CountConfig) -> Path:
    print("Running count with the following config:")
    print(config)

    bag = load_bag(config.input_file, config)

    # Most common elements first, ties broken alphabetically so that the output is deterministic
    counts = sorted(count_table(bag).items(), key=lambda item: (-item[1], item[0]))
    if config.top_k > 0:
        counts = counts[: config.top_k]

    results = CountResults(
        size=len(bag), num_distinct=sum(1 for _ in bag.distinct()), counts=dict(counts)
    )
    logger.info(pformat({"size": results.size, "num_distinct": results.num_distinct}))

    results_dir = prepare_results_dir(config, name="count")
    with open(results_dir / "counts.json", "wt") as f_results:
        f_results.write(json.dumps(asdict_extended(results), indent=2))

    return results_dir


def main(argv: Optional[List[str]] = None) -> Path:
    config: CountConfig = cli_get_config(argv=argv, config_cls=CountConfig)
    return run_from_config(config)


if __name__ == "__main__":
    main()
