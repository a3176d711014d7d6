"""Property-based tests for `Bag`, checked over arbitrary lists of integers."""

from collections import Counter
from typing import List

from hypothesis import given
from hypothesis import strategies as st

from hashbag.interface.bag import Bag

int_lists = st.lists(st.integers())
MISSING_CANDIDATE = 10_000_000


@given(int_lists)
def test_round_trip(values: List[int]) -> None:
    bag = Bag.from_list(values)
    assert Bag.from_list(bag.to_list()).is_equal(bag)


@given(int_lists)
def test_size(values: List[int]) -> None:
    bag = Bag.from_list(values)
    assert bag.size == len(values)
    assert bag.size == len(bag.to_list())


@given(int_lists)
def test_count(values: List[int]) -> None:
    bag = Bag.from_list(values)
    for x in values:
        assert bag.count(x) == values.count(x)

    if MISSING_CANDIDATE not in values:
        assert bag.count(MISSING_CANDIDATE) == 0
        assert not bag.is_member(MISSING_CANDIDATE)


@given(int_lists, int_lists, int_lists)
def test_monoid_laws(values_a: List[int], values_b: List[int], values_c: List[int]) -> None:
    a, b, c = Bag(values_a), Bag(values_b), Bag(values_c)
    e = Bag.empty()

    assert e.append(a).is_equal(a)
    assert a.append(e).is_equal(a)
    assert a.append(b).append(c).is_equal(a.append(b.append(c)))


@given(int_lists, int_lists)
def test_append_adds_counts(values_a: List[int], values_b: List[int]) -> None:
    a, b = Bag(values_a), Bag(values_b)
    combined = a.append(b)

    assert combined.is_equal(b.append(a))
    for x in set(values_a + values_b):
        assert combined.count(x) == a.count(x) + b.count(x)


@given(st.lists(st.integers(min_value=-5, max_value=5)), st.randoms())
def test_equality_ignores_order(values: List[int], random) -> None:
    shuffled = list(values)
    random.shuffle(shuffled)

    bag = Bag(values)
    assert bag.is_equal(Bag(shuffled))
    assert hash(bag) == hash(Bag(shuffled))

    # One extra or one missing occurrence breaks equality.
    assert not bag.is_equal(Bag(shuffled).add(0))
    if values:
        assert not bag.is_equal(Bag(shuffled).remove(values[0]))


@given(int_lists, st.integers())
def test_remove_of_absent_element(values: List[int], x: int) -> None:
    bag = Bag(v for v in values if v != x)
    removed = bag.remove(x)

    assert removed.is_equal(bag)
    assert removed.size == bag.size


@given(int_lists)
def test_iteration_matches_counter(values: List[int]) -> None:
    bag = Bag(values)
    assert Counter(bag) == Counter(values)
    assert dict(bag.items()) == dict(Counter(values))


@given(int_lists)
def test_folds_are_mirrored(values: List[int]) -> None:
    bag = Bag(values)
    order = bag.to_list()

    assert bag.foldl(lambda x, acc: acc + [x], []) == order
    assert bag.foldr(lambda x, acc: acc + [x], []) == order[::-1]


@given(int_lists)
def test_map_and_filter_match_lists(values: List[int]) -> None:
    bag = Bag(values)

    assert bag.map(lambda x: x // 3).is_equal(Bag([x // 3 for x in values]))
    assert bag.filter(lambda x: x > 0).is_equal(Bag([x for x in values if x > 0]))
