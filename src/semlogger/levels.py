"""
Severity levels for semantic log payloads
"""

from dataclasses import dataclass
from typing import Dict


_NAMES: Dict[int, str] = {
    0: "TRACE",
    1: "DEBUG",
    2: "INFO",
    3: "WARN",
    4: "ERROR",
    5: "FATAL",
}

_ALIASES: Dict[str, int] = {
    "WARNING": 3,
    "CRITICAL": 5,
}

_LOGURU_NAMES: Dict[int, str] = {
    0: "TRACE",
    1: "DEBUG",
    2: "INFO",
    3: "WARNING",
    4: "ERROR",
    5: "CRITICAL",
}

CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class LogLevel:
    """
    Ordered log level.

    Levels are plain ordinals so that integer ordering matches severity
    ordering. Ordinals outside 0..5 are custom levels: they compare like
    any other level and render as ``CUSTOM``.
    """

    ordinal: int

    @property
    def is_custom(self) -> bool:
        return self.ordinal not in _NAMES

    @property
    def display_name(self) -> str:
        return _NAMES.get(self.ordinal, CUSTOM)

    def less_severe_than(self, other: "LogLevel") -> bool:
        """Whether this level is less severe than ``other``"""
        return self.ordinal < other.ordinal

    def to_loguru(self) -> str:
        """Loguru level name used when writing through loguru sinks"""
        if self.ordinal < 0:
            return _LOGURU_NAMES[0]
        if self.ordinal > 5:
            return _LOGURU_NAMES[5]
        return _LOGURU_NAMES[self.ordinal]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        for ordinal, level_name in _NAMES.items():
            if level_name == normalized:
                return cls(ordinal)
        if normalized in _ALIASES:
            return cls(_ALIASES[normalized])
        raise ValueError(f"Unknown log level: {name!r}")

    def __lt__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.less_severe_than(other)

    def __le__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return other.less_severe_than(self)

    def __ge__(self, other: "LogLevel") -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal >= other.ordinal

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        if self.is_custom:
            return f"LogLevel({self.ordinal})"
        return f"LogLevel.{self.display_name}"


TRACE = LogLevel(0)
DEBUG = LogLevel(1)
INFO = LogLevel(2)
WARN = LogLevel(3)
ERROR = LogLevel(4)
FATAL = LogLevel(5)

LOG_LEVELS = (TRACE, DEBUG, INFO, WARN, ERROR, FATAL)
