"""A process-wide log that keeps only the most recent entries."""

from __future__ import annotations

import enum
import sys
from collections import deque
from datetime import datetime
from typing import TextIO


class LogLevel(enum.Enum):
    """Importance of a log entry."""

    NORMAL = enum.auto()
    WARNING = enum.auto()
    ERROR = enum.auto()


class Log:
    """Single shared log holding the last ``MAX_ENTRIES`` messages."""

    MAX_ENTRIES = 10
    _instance: Log | None = None

    def __new__(cls) -> Log:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._entries = deque(maxlen=cls.MAX_ENTRIES)
            cls._instance = instance
        return cls._instance

    def __copy__(self) -> Log:
        return self

    def __deepcopy__(self, memo: dict) -> Log:
        # The log is shared, so a deep copy resolves to the same instance;
        # record it so other references in the copied structure agree.
        memo[id(self)] = self
        return self

    @classmethod
    def instance(cls) -> Log:
        """The shared log."""
        return cls()

    def message(self, level: LogLevel, text: str) -> None:
        """Record ``text`` with the current local time."""
        stamp = datetime.now().strftime("%d/%m/%Y %H:%M:%S")
        self._entries.append((level, f"{stamp}: {text}"))

    @property
    def entries(self) -> list[tuple[LogLevel, str]]:
        """The kept entries, oldest first, as (level, timestamped text)."""
        return list(self._entries)

    def lines(self) -> list[str]:
        """The kept entries formatted for output."""
        return [f"{level.name}: {text}" for level, text in self._entries]

    def print(self, file: TextIO | None = None) -> None:
        """Write the kept entries, one per line."""
        out = sys.stdout if file is None else file
        for line in self.lines():
            print(line, file=out)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()