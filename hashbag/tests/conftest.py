from __future__ import annotations

import pytest

from hashbag.interface.bag import BUCKET_COUNT, Bag
from hashbag.utils.testing import Colliding


@pytest.fixture
def xxy_bag() -> Bag[str]:
    """Returns the bag {x, x, y} built by repeated `add`."""
    return Bag.empty().add("x").add("x").add("y")


@pytest.fixture
def colliding_elements() -> list[Colliding]:
    """Returns distinct elements which all land in bucket 0 (including hashes which wrap around)."""
    hash_values = [0, BUCKET_COUNT, -BUCKET_COUNT, 0]
    return [Colliding(name, hash_value) for name, hash_value in zip("abcd", hash_values)]
