"""Integer sets whose storage switches between a small array and a hash set."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TextIO


class SetImpl(ABC):
    """Storage strategy for a set of integers."""

    @abstractmethod
    def add(self, element: int) -> None:
        """Store ``element`` if it is not already present."""

    @abstractmethod
    def remove(self, element: int) -> None:
        """Drop ``element`` if it is present."""

    @abstractmethod
    def __contains__(self, element: object) -> bool:
        """Whether ``element`` is stored."""

    @abstractmethod
    def to_list(self) -> list[int]:
        """The stored elements."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored elements."""

    @abstractmethod
    def clone(self) -> SetImpl:
        """An independent copy of this storage."""

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())


class ArraySet(SetImpl):
    """Insertion-ordered storage with a fixed capacity; extra elements are ignored."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._data: list[int] = []

    def add(self, element: int) -> None:
        if len(self._data) < self.max_size and element not in self:
            self._data.append(element)

    def remove(self, element: int) -> None:
        if element in self._data:
            self._data.remove(element)

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def to_list(self) -> list[int]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def clone(self) -> ArraySet:
        copy = ArraySet(self.max_size)
        copy._data = list(self._data)
        return copy


class HashSet(SetImpl):
    """Unbounded hashed storage."""

    def __init__(self) -> None:
        self._data: set[int] = set()

    def add(self, element: int) -> None:
        self._data.add(element)

    def remove(self, element: int) -> None:
        self._data.discard(element)

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def to_list(self) -> list[int]:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def clone(self) -> HashSet:
        copy = HashSet()
        copy._data = set(self._data)
        return copy


class AdaptiveSet:
    """A set that moves to hashed storage above ``threshold`` elements and back below half of it."""

    def __init__(self, impl: SetImpl, threshold: int, output: TextIO | None = None) -> None:
        self._impl = impl
        self.threshold = threshold
        self._output = output

    @property
    def impl(self) -> SetImpl:
        """The storage currently in use."""
        return self._impl

    def _announce(self, text: str) -> None:
        print(text, file=self._output if self._output is not None else sys.stdout)

    def _rebalance(self) -> None:
        size = len(self._impl)
        if size > self.threshold:
            self._announce("Switching to HashSet implementation")
            replacement: SetImpl = HashSet()
        elif size < self.threshold // 2 and isinstance(self._impl, HashSet):
            self._announce("Switching back to ArraySet implementation")
            replacement = ArraySet(self.threshold)
        else:
            return
        for element in self._impl.to_list():
            replacement.add(element)
        self._impl = replacement

    def add(self, element: int) -> None:
        """Add ``element``, switching storage if the size calls for it."""
        if element not in self._impl:
            self._impl.add(element)
            self._rebalance()

    def remove(self, element: int) -> None:
        """Remove ``element``, switching storage if the size calls for it."""
        self._impl.remove(element)
        self._rebalance()

    def __contains__(self, element: object) -> bool:
        return element in self._impl

    def __len__(self) -> int:
        return len(self._impl)

    def __iter__(self) -> Iterator[int]:
        return iter(self._impl.to_list())

    def to_list(self) -> list[int]:
        """The elements of the set."""
        return self._impl.to_list()

    def unite(self, other: AdaptiveSet) -> AdaptiveSet:
        """A new set holding the elements of both sets, within storage capacity."""
        result = AdaptiveSet(self._impl.clone(), self.threshold, self._output)
        for element in other.to_list():
            result.add(element)
        for element in self.to_list():
            result.add(element)
        return result

    def intersect(self, other: AdaptiveSet) -> AdaptiveSet:
        """A new set built on a copy of this set's storage, adding elements also in ``other``."""
        result = AdaptiveSet(self._impl.clone(), self.threshold, self._output)
        for element in self.to_list():
            if element in other:
                result.add(element)
        return result


def main(argv: list[str] | None = None) -> int:
    """Demonstrate adding, removing, union and intersection."""
    threshold = 5
    my_set = AdaptiveSet(ArraySet(threshold), threshold)

    for element in (1, 2, 3, 4):
        my_set.add(element)
    print(f"Set size: {len(my_set)}")

    my_set.add(5)
    print(f"Set size: {len(my_set)}")

    my_set.remove(1)
    my_set.remove(2)
    print(f"Set size: {len(my_set)}")

    other_set = AdaptiveSet(ArraySet(threshold), threshold)
    for element in (3, 4, 5, 6, 7):
        other_set.add(element)

    union_set = my_set.unite(other_set)
    print(f"Union Set size: {len(union_set)}")

    intersect_set = my_set.intersect(other_set)
    print(f"Intersection Set size: {len(intersect_set)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())