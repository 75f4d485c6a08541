from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable

from .levels import Level
from .printer import LogEvent, PrettyPrinter


class PrettyLogFormatter(logging.Formatter):
    """
    Render stdlib log records as bordered pretty-printer blocks.

    Example (colours off, no emojis):
      ┌──────────────────────────────
      │ edge | INFO
      ├┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄
      │ run_edge: candidates=123
      └──────────────────────────────

    When the wrapped printer has no name of its own, the (compacted) logger
    name is used as the header line.
    """

    def __init__(
        self,
        printer: PrettyPrinter | None = None,
        *,
        show_logger_name: bool = True,
        hide_prefix: str = "",
        **printer_kwargs: Any,
    ) -> None:
        super().__init__()
        self.printer = PrettyPrinter(**printer_kwargs) if printer is None else printer
        self._show_logger_name = bool(show_logger_name)
        self._hide_prefix = str(hide_prefix or "")
        self._named: dict[str, PrettyPrinter] = {}

    def _display_logger_name(self, name: str) -> str:
        """
        Produce a compact logger name for headers.

        With hide_prefix="myapp.":
          "myapp.edge" -> "edge"
          "other.mod"  -> "other.mod"
        """
        n = "" if name is None else str(name)
        prefix = self._hide_prefix
        if prefix and n.startswith(prefix):
            return n[len(prefix) :]
        return n

    def printer_for(self, record: logging.LogRecord) -> PrettyPrinter:
        if self.printer.name or not self._show_logger_name:
            return self.printer
        name = self._display_logger_name(record.name)
        if not name or name == "root":
            return self.printer
        cached = self._named.get(name)
        if cached is None:
            # Ignore-list changes made on `self.printer` later are not seen by
            # already cached copies; call `reset()` after reconfiguring.
            cached = self.printer.copy(with_name=name)
            self._named[name] = cached
        return cached

    def reset(self) -> None:
        self._named.clear()

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        # Keep logging's semantics for %-formatting, lazy args, etc.
        message = record.getMessage()

        error: Any = None
        stack: Any = None
        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            stack = record.exc_info[2] if record.exc_info[2] is not None else ""

        return LogEvent(
            level=Level.from_logging(record.levelno),
            message=message,
            error=error,
            stack_trace=stack,
            time=datetime.fromtimestamp(record.created),
        )

    def format(self, record: logging.LogRecord) -> str:
        event = self.to_event(record)
        lines = self.printer_for(record).log(event)
        return "\n".join(lines)


def configure_logging(
    *,
    level: int = logging.INFO,
    handlers: Iterable[logging.Handler] | None = None,
    **printer_kwargs: Any,
) -> None:
    """
    Configure root logging with the pretty-printer formatter.

    Intended for CLIs (safe to call multiple times).
    """
    if handlers is None:
        h = logging.StreamHandler()
        h.setFormatter(PrettyLogFormatter(**printer_kwargs))
        handlers = [h]

    # `force=True` removes any existing root handlers first, so our formatter
    # is used even if another library already configured the root logger.
    logging.basicConfig(level=level, handlers=list(handlers), force=True)


__all__ = ["PrettyLogFormatter", "configure_logging"]
