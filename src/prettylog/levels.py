from __future__ import annotations

import logging
from enum import IntEnum


class Level(IntEnum):
    """
    Severity of a log event.

    Values line up with the stdlib `logging` numbers so events coming from a
    `LogRecord` keep their ordering; VERBOSE sits below DEBUG and WTF takes
    the place of CRITICAL.
    """

    VERBOSE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    WTF = logging.CRITICAL

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """
        Map a stdlib level number onto the highest `Level` not above it.

        Anything below DEBUG (including custom TRACE-style levels) is VERBOSE.
        """
        n = int(levelno)
        out = cls.VERBOSE
        for lvl in cls:
            if lvl <= n:
                out = lvl
        return out


def level_name(level: Level) -> str:
    return Level(level).name


__all__ = ["Level", "level_name"]
