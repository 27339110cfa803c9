"""An immutable ordered list of types with lookup helpers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

NOT_FOUND = -1


class TypeList:
    """An ordered, immutable sequence of types."""

    __slots__ = ("_types",)

    def __init__(self, *args: Any) -> None:
        self._types: tuple[Any, ...] = tuple(args)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, tp: object) -> bool:
        return tp in self._types

    def __iter__(self) -> Iterator[Any]:
        return iter(self._types)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeList):
            return NotImplemented
        return self._types == other._types

    def __hash__(self) -> int:
        return hash(self._types)

    def __repr__(self) -> str:
        names = ", ".join(getattr(t, "__name__", repr(t)) for t in self._types)
        return f"TypeList({names})"

    def index_of(self, tp: Any) -> int:
        """Position of the first occurrence of ``tp``, or ``NOT_FOUND``."""
        try:
            return self._types.index(tp)
        except ValueError:
            return NOT_FOUND

    def append(self, tp: Any) -> TypeList:
        """A new list with ``tp`` added at the end."""
        return TypeList(*self._types, tp)

    def prepend(self, tp: Any) -> TypeList:
        """A new list with ``tp`` added at the front."""
        return TypeList(tp, *self._types)

    def type_at(self, index: int) -> Any:
        """The type at ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self._types):
            raise IndexError(f"type index {index} out of range for {len(self._types)} types")
        return self._types[index]


def size(*args: Any) -> int:
    """Number of types given."""
    return len(args)