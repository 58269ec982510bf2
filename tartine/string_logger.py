"""String loggers that filter messages by severity."""

from __future__ import annotations

import abc
import enum
import sys
from typing import Optional, TextIO


class Level(enum.IntEnum):
    """Message severity, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


class StringLogger(abc.ABC):
    """Destination for log messages."""

    @abc.abstractmethod
    def log(self, level: Level, message: str) -> None:
        """Record ``message`` at ``level``."""

    @abc.abstractmethod
    def is_enabled_for(self, level: Level) -> bool:
        """Whether messages at ``level`` would be recorded."""


class StringToStreamLogger(StringLogger):
    """Write each enabled message as a line on a text stream (stderr by default)."""

    def __init__(self, level: Level, out: Optional[TextIO] = None) -> None:
        self.level = Level(level)
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stderr

    def log(self, level: Level, message: str) -> None:
        if self.is_enabled_for(level):
            self.out.write(message + "\n")
            self.out.flush()

    def is_enabled_for(self, level: Level) -> bool:
        return Level(level) >= self.level