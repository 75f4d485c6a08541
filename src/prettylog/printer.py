"""
The pretty printer: one log event in, a bordered block of lines out.

  from prettylog import Level, LogEvent, PrettyPrinter

  printer = PrettyPrinter(name="api", print_time=True)
  printer.ignore_package("myapp/vendor")
  for line in printer.log(LogEvent(Level.INFO, {"user": 42, "action": "login"})):
      print(line)

The printer performs no I/O; writing the lines is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Hashable

from .config import PrinterConfig
from .errors import ConfigError
from .ignore_list import IgnoreListStore
from .layout import LayoutAssembler, stringify_message
from .levels import Level
from .stack_filter import FrameFilterEngine
from .stack_trace import current_stack_text, stack_text_of

_LOG = logging.getLogger(__name__)

# current_stack_text, PrettyPrinter._capture_stack and PrettyPrinter.log.
_OWN_FRAMES = 3

_START_TIME: datetime | None = None


@dataclass(frozen=True)
class LogEvent:
    """
    A single log call.

    `stack_trace` may be frame text, a traceback, or an exception; when it is
    None the printer captures the current call stack instead.
    """

    level: Level
    message: Any
    error: Any = None
    stack_trace: Any = None
    time: datetime | None = None


class PrettyPrinter:
    def __init__(
        self,
        name: str | None = None,
        *,
        method_count: int | None = None,
        error_method_count: int | None = None,
        line_length: int | None = None,
        colors: bool | None = None,
        print_emojis: bool | None = None,
        print_time: bool | None = None,
        config: PrinterConfig | None = None,
    ) -> None:
        global _START_TIME

        base = PrinterConfig() if config is None else config
        self.name = (name or "").strip()
        self.method_count = int(base.method_count if method_count is None else method_count)
        self.error_method_count = int(
            base.error_method_count if error_method_count is None else error_method_count
        )
        self.line_length = int(base.line_length if line_length is None else line_length)
        self.colors = bool(base.colors if colors is None else colors)
        self.print_emojis = bool(base.print_emojis if print_emojis is None else print_emojis)
        self.print_time = bool(base.print_time if print_time is None else print_time)
        if self.method_count < 0 or self.error_method_count < 0:
            raise ConfigError("method counts must be >= 0")

        if _START_TIME is None:
            _START_TIME = datetime.now()

        self._ignored = IgnoreListStore()
        self._filter = FrameFilterEngine(self._ignored)
        self._layout = LayoutAssembler(
            line_length=self.line_length,
            colors=self.colors,
            print_emojis=self.print_emojis,
            name=self.name,
        )

    @classmethod
    def from_config(cls, config: PrinterConfig, name: str | None = None) -> "PrettyPrinter":
        return cls(name, config=config)

    @property
    def config(self) -> PrinterConfig:
        return PrinterConfig(
            method_count=self.method_count,
            error_method_count=self.error_method_count,
            line_length=self.line_length,
            colors=self.colors,
            print_emojis=self.print_emojis,
            print_time=self.print_time,
        )

    @property
    def top_border(self) -> str:
        return self._layout.top_border

    @property
    def middle_border(self) -> str:
        return self._layout.middle_border

    @property
    def bottom_border(self) -> str:
        return self._layout.bottom_border

    def copy(self, with_name: str | None = None) -> "PrettyPrinter":
        """
        A new printer with the same settings and an independent copy of the
        ignore list. An empty `with_name` keeps the current name.
        """
        name = with_name if with_name and with_name.strip() else self.name
        cp = PrettyPrinter(name, config=self.config)
        _LOG.debug("copying printer %r as %r", self.name, name)
        cp._ignored = self._ignored.clone()
        cp._filter = FrameFilterEngine(cp._ignored)
        return cp

    # -- logging ------------------------------------------------------------

    def log(self, event: LogEvent) -> list[str]:
        message = stringify_message(event.message)

        stack: str | None = None
        raw = stack_text_of(event.stack_trace)
        if raw is None:
            if self.method_count > 0:
                stack = self.format_stack_trace(
                    self._capture_stack(), self.method_count, event.level, _OWN_FRAMES
                )
        elif self.error_method_count > 0:
            stack = self.format_stack_trace(raw, self.error_method_count, event.level)

        error = None if event.error is None else str(event.error)
        time = self.get_time(event.time) if self.print_time else None

        return self._layout.render(event.level, message, time, error, stack)

    def _capture_stack(self) -> str:
        return current_stack_text()

    def format_stack_trace(
        self,
        stack_trace: str,
        method_count: int,
        level: Level | None = None,
        offset: int = 0,
    ) -> str | None:
        return self._filter.filter(stack_trace, method_count, level, offset)

    def get_time(self, now: datetime | None = None) -> str:
        """
        "HH:MM:SS.mmm (+elapsed)", elapsed measured from the first printer created.

        The start time is local wall-clock time; it is made aware before being
        compared with an aware `now`. Times before the start get a "-" sign.
        """
        now = datetime.now() if now is None else now
        start = _START_TIME or now
        if now.tzinfo is not None and start.tzinfo is None:
            start = start.astimezone()
        elapsed = now - start
        sign = "+" if elapsed >= timedelta(0) else "-"
        ms = now.microsecond // 1000
        return f"{now:%H:%M:%S}.{ms:03d} ({sign}{abs(elapsed)})"

    def stringify_message(self, message: Any) -> str:
        return stringify_message(message)

    # -- ignore list --------------------------------------------------------

    @property
    def ignore_list(self) -> IgnoreListStore:
        return self._ignored

    @property
    def ignored_packages(self) -> list[str]:
        return sorted(self._ignored.list_all())

    def clear_ignored_packages(self) -> None:
        self._ignored.clear()

    def ignore_package(self, package: str, level: Hashable | None = None) -> None:
        """
        Drop frames whose origin starts with `package + "/"`.

        With `level`, only for events of that level.
        """
        if level is None:
            self._ignored.add_global(package)
        else:
            self._ignored.add_for_level(package, level)

    def do_not_ignore_package(self, package: str, level: Hashable | None = None) -> bool:
        """
        Undo `ignore_package`.

        With `level`, only that level's entry is removed; without, the package
        is removed globally and from every level.
        """
        if level is not None:
            return self._ignored.remove_for_level(package, level)
        return self._ignored.remove_everywhere(package)

    def __repr__(self) -> str:
        return (
            f"PrettyPrinter(name={self.name!r}, method_count={self.method_count}, "
            f"error_method_count={self.error_method_count}, line_length={self.line_length}, "
            f"colors={self.colors}, print_emojis={self.print_emojis}, "
            f"print_time={self.print_time})"
        )


__all__ = ["LogEvent", "PrettyPrinter"]
