"""Route checkpoints and builders that turn a list of them into a result."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class CheckPointType(enum.Enum):
    """Whether a checkpoint must be visited or may be skipped with a penalty."""

    MANDATORY = "mandatory"
    OPTIONAL = "optional"


class CheckPoint:
    """A named point on the route, given by its coordinates."""

    def __init__(
        self,
        name: str,
        latitude: float,
        longitude: float,
        kind: CheckPointType = CheckPointType.MANDATORY,
    ) -> None:
        self.name = name
        self.latitude = latitude
        self.longitude = longitude
        self.kind = kind

    @property
    def penalty(self) -> float:
        """Penalty for skipping the checkpoint; mandatory ones carry none."""
        return 0.0

    def __str__(self) -> str:
        return f"Name: {self.name}, Latitude: {self.latitude:g}, Longitude: {self.longitude:g}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, {self.latitude!r}, "
            f"{self.longitude!r}, {self.kind})"
        )


class OptionalCheckPoint(CheckPoint):
    """A checkpoint that may be skipped at the cost of a penalty."""

    def __init__(self, name: str, latitude: float, longitude: float, penalty: float) -> None:
        super().__init__(name, latitude, longitude, CheckPointType.OPTIONAL)
        self._penalty = penalty

    @property
    def penalty(self) -> float:
        return self._penalty

    def __str__(self) -> str:
        return f"{super().__str__()}, Penalty: {self._penalty:g}"


class CheckPointListBuilder(ABC):
    """Consumes checkpoints one at a time to build some result."""

    @abstractmethod
    def add_check_point(self, check_point: CheckPoint) -> None:
        """Take the next checkpoint into account."""

    @abstractmethod
    def reset(self) -> None:
        """Discard everything built so far."""


class TextListBuilder(CheckPointListBuilder):
    """Builds a numbered text listing of the checkpoints."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def reset(self) -> None:
        self._lines = []

    def add_check_point(self, check_point: CheckPoint) -> None:
        number = len(self._lines) + 1
        if check_point.kind is CheckPointType.OPTIONAL:
            tail = f"Penalty: {check_point.penalty:f}"
        else:
            tail = "Не зачёт СУ"
        self._lines.append(
            f"{number}. {check_point.name}, "
            f"Latitude: {check_point.latitude:f}, "
            f"Longitude: {check_point.longitude:f}, "
            f"{tail}\n"
        )

    @property
    def text_list(self) -> str:
        """The listing built so far."""
        return "".join(self._lines)


class PenaltyCalculatorBuilder(CheckPointListBuilder):
    """Sums the penalties of the optional checkpoints."""

    def __init__(self) -> None:
        self._total = 0.0

    def reset(self) -> None:
        self._total = 0.0

    def add_check_point(self, check_point: CheckPoint) -> None:
        if check_point.kind is CheckPointType.OPTIONAL:
            self._total += check_point.penalty

    @property
    def total_penalty(self) -> float:
        """The sum of penalties seen so far."""
        return self._total


@dataclass
class CheckPointListDirector:
    """Holds the builder that checkpoint lists are handed to."""

    builder: CheckPointListBuilder | None = None