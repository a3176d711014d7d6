from __future__ import annotations

from collections.abc import Collection, Hashable
from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

ElementT = TypeVar("ElementT", bound=Hashable)
OtherElementT = TypeVar("OtherElementT", bound=Hashable)
AccT = TypeVar("AccT")

BUCKET_COUNT = 16

# A bucket is an association list of (element, count) pairs; every count is at least 1.
Bucket = Tuple[Tuple[ElementT, int], ...]

_EMPTY_BUCKETS: Tuple[Bucket, ...] = tuple(() for _ in range(BUCKET_COUNT))


def bucket_index(element: Hashable) -> int:
    """Index of the bucket holding `element` (always in `[0, BUCKET_COUNT)`)."""
    return hash(element) % BUCKET_COUNT


def _bucket_add(bucket: Bucket, element) -> Bucket:
    for idx, (existing, count) in enumerate(bucket):
        if existing == element:
            return bucket[:idx] + ((existing, count + 1),) + bucket[idx + 1 :]
    return bucket + ((element, 1),)


def _bucket_remove(bucket: Bucket, element) -> Optional[Bucket]:
    """Returns the bucket with one occurrence of `element` removed, or `None` if it is absent."""
    for idx, (existing, count) in enumerate(bucket):
        if existing == element:
            if count > 1:
                return bucket[:idx] + ((existing, count - 1),) + bucket[idx + 1 :]
            return bucket[:idx] + bucket[idx + 1 :]
    return None


def _bucket_count(bucket: Bucket, element) -> int:
    for existing, count in bucket:
        if existing == element:
            return count
    return 0


class Bag(Collection, Generic[ElementT]):
    """Class representing a persistent multi-set (i.e. set where elements are allowed to repeat).

    Elements are spread over a fixed number of buckets chosen by `hash(element) % BUCKET_COUNT`,
    and each bucket is an association list of `(element, count)` pairs kept in the order in which
    distinct elements were first inserted. A bag is never modified after construction: `add`,
    `remove` and friends return a new bag which shares all untouched buckets with the old one.

    Iteration order (also used by `to_list`, `foldl` and `foldr`) visits buckets in index order,
    and within each bucket yields every element `count` times in a row. This order is not sorted
    and not insertion order; since `str` hashes are salted per process it is only stable within a
    single process. Equality and hashing do not depend on it.
    """

    __slots__ = ("_size", "_buckets")

    _size: int
    _buckets: Tuple[Bucket, ...]

    def __init__(self, values: Iterable[ElementT] = ()) -> None:
        bag = Bag.empty().extend(values)
        object.__setattr__(self, "_size", bag._size)
        object.__setattr__(self, "_buckets", bag._buckets)

    @classmethod
    def _from_buckets(cls, size: int, buckets: Tuple[Bucket, ...]) -> Bag:
        bag = object.__new__(cls)
        object.__setattr__(bag, "_size", size)
        object.__setattr__(bag, "_buckets", buckets)
        return bag

    @classmethod
    def empty(cls) -> Bag:
        """The empty bag, which is the identity element for `append`."""
        return cls._from_buckets(0, _EMPTY_BUCKETS)

    mempty = empty

    @classmethod
    def from_list(cls, values: Iterable[ElementT]) -> Bag[ElementT]:
        return cls.empty().extend(values)

    new = from_list

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self).from_list, (self.to_list(),))

    def add(self, element: ElementT) -> Bag[ElementT]:
        idx = bucket_index(element)
        buckets = self._buckets
        new_buckets = buckets[:idx] + (_bucket_add(buckets[idx], element),) + buckets[idx + 1 :]
        return self._from_buckets(self._size + 1, new_buckets)

    def extend(self, values: Iterable[ElementT]) -> Bag[ElementT]:
        """Adds every element of `values` in turn (equivalent to repeated `add`)."""
        bag = self
        for value in values:
            bag = bag.add(value)
        return bag

    def remove(self, element: ElementT) -> Bag[ElementT]:
        """Removes a single occurrence of `element`; removing an absent element is a no-op."""
        idx = bucket_index(element)
        new_bucket = _bucket_remove(self._buckets[idx], element)
        if new_bucket is None:
            return self

        buckets = self._buckets
        return self._from_buckets(
            self._size - 1, buckets[:idx] + (new_bucket,) + buckets[idx + 1 :]
        )

    def count(self, element: ElementT) -> int:
        return _bucket_count(self._buckets[bucket_index(element)], element)

    def is_member(self, element: ElementT) -> bool:
        return self.count(element) > 0

    @property
    def size(self) -> int:
        """Total number of occurrences (distinct elements are counted with multiplicity)."""
        return self._size

    def items(self) -> Iterator[Tuple[ElementT, int]]:
        """Yields `(element, count)` pairs, one per distinct element, in iteration order."""
        for bucket in self._buckets:
            yield from bucket

    def distinct(self) -> Iterator[ElementT]:
        for element, _ in self.items():
            yield element

    def to_list(self) -> list[ElementT]:
        return list(self)

    def map(self, fn: Callable[[ElementT], OtherElementT]) -> Bag[OtherElementT]:
        """Applies `fn` to every occurrence; counts of elements with equal images are summed."""
        return Bag.from_list(fn(element) for element in self)

    def filter(self, predicate: Callable[[ElementT], bool]) -> Bag[ElementT]:
        """Keeps the occurrences for which `predicate` holds (it is called once per occurrence)."""
        return Bag.from_list(element for element in self if predicate(element))

    def foldl(self, fn: Callable[[ElementT, AccT], AccT], initial: AccT) -> AccT:
        """Folds `fn(element, acc)` over the occurrences from first to last."""
        acc = initial
        for element in self:
            acc = fn(element, acc)
        return acc

    def foldr(self, fn: Callable[[ElementT, AccT], AccT], initial: AccT) -> AccT:
        """Folds `fn(element, acc)` over the occurrences from last to first.

        For a bag iterating as `[a, b, c]` the result is `fn(a, fn(b, fn(c, initial)))`.
        """
        acc = initial
        for bucket in reversed(self._buckets):
            for element, count in reversed(bucket):
                for _ in range(count):
                    acc = fn(element, acc)
        return acc

    def append(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """Multi-set sum: the count of every element is the sum of its counts in both bags."""
        return other.foldl(lambda element, bag: bag.add(element), self)

    def is_equal(self, other: Bag) -> bool:
        """Whether both bags hold the same elements with the same counts.

        Once the sizes are known to match it is enough to check the distinct elements of `self`:
        if all their counts agree they already account for every occurrence in `other`.
        """
        if self._size != other._size:
            return False

        # Every distinct element lives in exactly one bucket, so no element is checked twice.
        for element, count in self.items():
            if other.count(element) != count:
                return False
        return True

    def __iter__(self) -> Iterator[ElementT]:
        for element, count in self.items():
            for _ in range(count):
                yield element

    def __contains__(self, element) -> bool:
        return self.is_member(element)

    def __eq__(self, other) -> bool:
        if isinstance(other, Bag):
            return self.is_equal(other)
        else:
            return False

    def __add__(self, other):
        if not isinstance(other, Bag):
            return NotImplemented
        return self.append(other)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __hash__(self) -> int:
        return hash(frozenset(self.items()))
