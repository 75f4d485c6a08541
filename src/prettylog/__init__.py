"""
prettylog: bordered, colourised, multi-line rendering of log events.

Primary entrypoints:
- `prettylog.PrettyPrinter` (one event in, list of lines out)
- `prettylog.configure_logging` (use it as the stdlib logging formatter)
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AnsiColor",
    "ConfigError",
    "FrameFilterEngine",
    "IgnoreListStore",
    "LayoutAssembler",
    "Level",
    "LogEvent",
    "MessageFormatError",
    "PrettyLogError",
    "PrettyLogFormatter",
    "PrettyPrinter",
    "PrinterConfig",
    "configure_logging",
    "current_stack_text",
    "stringify_message",
]

# Submodules are imported lazily so `python -m prettylog.cli` does not find
# the module in sys.modules before running it.
_EXPORTS: dict[str, tuple[str, str]] = {
    "AnsiColor": ("prettylog.ansi", "AnsiColor"),
    "ConfigError": ("prettylog.errors", "ConfigError"),
    "MessageFormatError": ("prettylog.errors", "MessageFormatError"),
    "PrettyLogError": ("prettylog.errors", "PrettyLogError"),
    "FrameFilterEngine": ("prettylog.stack_filter", "FrameFilterEngine"),
    "IgnoreListStore": ("prettylog.ignore_list", "IgnoreListStore"),
    "LayoutAssembler": ("prettylog.layout", "LayoutAssembler"),
    "stringify_message": ("prettylog.layout", "stringify_message"),
    "Level": ("prettylog.levels", "Level"),
    "LogEvent": ("prettylog.printer", "LogEvent"),
    "PrettyPrinter": ("prettylog.printer", "PrettyPrinter"),
    "PrinterConfig": ("prettylog.config", "PrinterConfig"),
    "PrettyLogFormatter": ("prettylog.logging_utils", "PrettyLogFormatter"),
    "configure_logging": ("prettylog.logging_utils", "configure_logging"),
    "current_stack_text": ("prettylog.stack_trace", "current_stack_text"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover
    target = _EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    mod_name, attr_name = target
    mod = import_module(mod_name)
    return getattr(mod, attr_name)


def __dir__() -> list[str]:  # pragma: no cover
    return sorted(set(globals().keys()) | set(__all__))
