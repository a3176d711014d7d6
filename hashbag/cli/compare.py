"""Script for checking whether two files hold the same lines, ignoring their order.

Example invocation:
    python ./hashbag/cli/compare.py \
        left_file=[LEFT_FILE_PATH] \
        right_file=[RIGHT_FILE_PATH] \
        results_dir=[RESULTS_DIR]
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from omegaconf import MISSING

from hashbag.cli.common import InputConfig, OutputConfig, load_bag, prepare_results_dir
from hashbag.interface.bag import Bag
from hashbag.utils.config import get_config as cli_get_config
from hashbag.utils.misc import asdict_extended

logger = logging.getLogger(__name__)


@dataclass
class CompareConfig(InputConfig, OutputConfig):
    """Config for comparing two files as multi-sets of lines."""

    left_file: str = MISSING
    right_file: str = MISSING


@dataclass
class ComparisonResults:
    equal: bool
    left_size: int
    right_size: int
    differences: Dict[str, Dict[str, int]]  # Only elements whose counts differ


def get_differences(left: Bag[str], right: Bag[str]) -> Dict[str, Dict[str, int]]:
    """Counts of every element which occurs a different number of times in the two bags."""
    differences: Dict[str, Dict[str, int]] = {}
    for element in left.append(right).distinct():
        left_count, right_count = left.count(element), right.count(element)
        if left_count != right_count:
            differences[element] = {"left": left_count, "right": right_count}

    return differences


def run_from_config(config: CompareConfig) -> Path:
    print("Running compare with the following config:")
    print(config)

    left = load_bag(config.left_file, config)
    right = load_bag(config.right_file, config)

    equal = left == right
    differences = get_differences(left, right)

    if equal:
        logger.info("Inputs hold the same elements with the same counts")
    else:
        logger.info(f"Inputs differ on {len(differences)} distinct elements")

    results = ComparisonResults(
        equal=equal, left_size=len(left), right_size=len(right), differences=differences
    )

    results_dir = prepare_results_dir(config, name="compare")
    with open(results_dir / "comparison.json", "wt") as f_results:
        f_results.write(json.dumps(asdict_extended(results), indent=2))

    return results_dir


def main(argv: Optional[List[str]] = None) -> Path:
    config: CompareConfig = cli_get_config(argv=argv, config_cls=CompareConfig)
    return run_from_config(config)


if __name__ == "__main__":
    main()
