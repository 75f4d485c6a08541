"""
Exceptions raised by prettylog.

Ignore-list mistakes (blank prefixes, removing an unknown prefix) are not
errors; they are silent no-ops. Only construction-time configuration and
message stringification can fail.
"""

from __future__ import annotations


class PrettyLogError(Exception):
    """Base class for all prettylog errors."""


class ConfigError(PrettyLogError, ValueError):
    """Invalid printer configuration (bad widths, counts, or env values)."""


class MessageFormatError(PrettyLogError, TypeError):
    """A structured log message could not be rendered as indented JSON."""

    def __init__(self, message_type: type, reason: str) -> None:
        self.message_type = message_type
        self.reason = reason
        super().__init__(
            f"Cannot format log message of type {message_type.__name__}: {reason}"
        )


__all__ = ["PrettyLogError", "ConfigError", "MessageFormatError"]
