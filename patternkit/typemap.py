"""A container holding at most one value per type from a fixed set of types."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

from patternkit.typelist import TypeList


class TypeMap:
    """Maps each of a fixed list of types to at most one value."""

    def __init__(self, *args: type) -> None:
        self._keys = TypeList(*args)
        self._values: dict[type, Any] = {}

    def _check(self, key: type) -> None:
        if key not in self._keys:
            raise ValueError("Type not in TypeList")

    def add_value(self, key: type, value: Any) -> None:
        """Store ``value`` for ``key``, replacing any earlier value."""
        self._check(key)
        self._values[key] = value

    def get_value(self, key: type) -> Any:
        """The value stored for ``key``."""
        self._check(key)
        try:
            return self._values[key]
        except KeyError:
            raise KeyError("Value not found for this type") from None

    def contains(self, key: type) -> bool:
        """Whether a value is stored for ``key``."""
        return key in self._values

    def remove_value(self, key: type) -> None:
        """Drop the value for ``key`` if one is stored."""
        self._values.pop(key, None)

    @property
    def value_count(self) -> int:
        """Number of stored values."""
        return len(self._values)


@dataclass
class DataA:
    value: str


@dataclass
class DataB:
    value: int


def main(argv: list[str] | None = None) -> int:
    """Demonstrate storing, reading and removing values."""
    out = sys.stdout
    type_map = TypeMap(int, DataA, float, DataB)

    type_map.add_value(int, 42)
    type_map.add_value(float, 3.14)
    type_map.add_value(DataA, DataA("Hello, TypeMap!"))
    type_map.add_value(DataB, DataB(10))

    print(f"Value for int: {type_map.get_value(int)}", file=out)
    print(f"Value for double: {type_map.get_value(float):g}", file=out)
    print(f"Value for DataA: {type_map.get_value(DataA).value}", file=out)
    print(f"Value for DataB: {type_map.get_value(DataB).value}", file=out)

    print(f"Contains int? {'Yes' if type_map.contains(int) else 'No'}", file=out)

    type_map.remove_value(float)
    print(f"Size of values after removal: {type_map.value_count}", file=out)

    try:
        print(f"Value for double after removal: {type_map.get_value(float):g}", file=out)
    except KeyError as exc:
        print(f"Caught exception: {exc.args[0]}", file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())