"""Mixins deriving comparisons from ``<`` and counting live instances."""

from __future__ import annotations

import copy
import sys
from typing import Any


class LessThanComparable:
    """Derives ``>``, ``<=``, ``>=``, ``==`` and ``!=`` from ``__lt__``."""

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return other < self

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not other < self

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not self < other

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return not self < other and not other < self

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, LessThanComparable):
            return NotImplemented
        return self < other or other < self

    __hash__ = None  # type: ignore[assignment]


class Counted:
    """Keeps a per-class count of live instances."""

    _count = 0

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._count = 0

    def __init__(self) -> None:
        type(self)._count += 1
        self._counted = True

    def __copy__(self) -> Counted:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        Counted.__init__(clone)
        return clone

    def __deepcopy__(self, memo: dict) -> Counted:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        clone.__dict__.update(copy.deepcopy(self.__dict__, memo))
        Counted.__init__(clone)
        return clone

    def __del__(self) -> None:
        if self.__dict__.get("_counted"):
            type(self)._count -= 1

    @classmethod
    def count(cls) -> int:
        """Number of live instances of this class."""
        return cls._count


class Number(LessThanComparable, Counted):
    """An integer wrapper ordered by its value."""

    def __init__(self, value: int) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._value < other._value

    def __repr__(self) -> str:
        return f"Number({self._value!r})"


def main(argv: list[str] | None = None) -> int:
    """Check the derived comparisons and report the live instance count."""
    one = Number(1)
    two = Number(2)
    three = Number(3)
    four = Number(4)
    assert one >= one
    assert three <= four
    assert two == two
    assert three > two
    assert one < two
    print(f"Count: {Number.count()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())