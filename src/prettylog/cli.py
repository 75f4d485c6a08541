from __future__ import annotations

"""
Command-line preview of the pretty printer.

  python3 -m prettylog.cli --demo
  python3 -m prettylog.cli --level warning --message "disk almost full" --name disk
  PRETTYLOG_COLORS=0 python3 -m prettylog.cli --demo --time
"""

# Allow `python3 src/prettylog/cli.py` as well as `python3 -m prettylog.cli`.
if __name__ == "__main__" and (__package__ is None or __package__ == ""):
    import os
    import sys

    _src = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if _src not in sys.path:
        sys.path.insert(0, _src)
    __package__ = "prettylog"

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence, TextIO

from .config import PrinterConfig
from .logging_utils import configure_logging
from .errors import PrettyLogError
from .levels import Level
from .printer import LogEvent, PrettyPrinter

_LOG = logging.getLogger("prettylog.cli" if __name__ == "__main__" else __name__)


def _parse_level(value: str) -> Level:
    v = str(value or "").strip().upper()
    if v in ("FATAL", "CRITICAL"):
        v = "WTF"
    try:
        return Level[v]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"unknown level {value!r} (choose from {', '.join(lvl.name.lower() for lvl in Level)})"
        ) from None


def _demo_events() -> list[LogEvent]:
    # Frame text as it would arrive from another process; the `python:` frame
    # is dropped by the built-in rules.
    trace = "\n".join(
        [
            "#0      Service.handle (package:myapp/service.py:42)",
            "#1      Router.dispatch (package:myapp/router.py:17)",
            "#2      run (python:asyncio/runners.py:44)",
            "#3      main (package:myapp/__main__.py:9)",
        ]
    )
    return [
        LogEvent(Level.VERBOSE, "verbose details"),
        LogEvent(Level.DEBUG, "debug message"),
        LogEvent(Level.INFO, {"event": "startup", "workers": 4, "features": ["a", "b"]}),
        LogEvent(Level.WARNING, "cache miss rate above 40%\nconsider a larger cache"),
        LogEvent(Level.ERROR, "lookup failed", error=KeyError("missing"), stack_trace=trace),
        LogEvent(Level.WTF, "this should never happen", error="invariant broken"),
    ]


def _print_event(printer: PrettyPrinter, event: LogEvent, out: TextIO) -> None:
    for line in printer.log(event):
        out.write(line + "\n")


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    """
    CLI entrypoint. Returns a process exit code.
    """
    p = argparse.ArgumentParser(
        prog="prettylog.cli",
        description="Render log events as bordered pretty-printer blocks.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        help="Level for prettylog's own diagnostics (stderr).",
    )
    p.add_argument("--demo", action="store_true", help="Print one sample event per level.")
    p.add_argument("--name", default="", help="Header name printed above each event.")
    p.add_argument("--level", type=_parse_level, default=Level.INFO)
    p.add_argument("--message", default="hello from prettylog")
    p.add_argument("--error", default=None, help="Optional error text.")
    p.add_argument("--no-color", action="store_true")
    p.add_argument("--no-emoji", action="store_true")
    p.add_argument("--time", action="store_true", help="Show the event time.")
    p.add_argument("--line-length", type=int, default=None)
    p.add_argument("--method-count", type=int, default=None)
    p.add_argument("--error-method-count", type=int, default=None)
    p.add_argument(
        "--ignore",
        nargs="*",
        default=[],
        metavar="PKG",
        help="Origin prefixes to drop from printed stack traces.",
    )
    args = p.parse_args(list(argv) if argv is not None else None)

    configure_logging(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    stream = sys.stdout if out is None else out

    try:
        cfg = PrinterConfig.from_env()
        changes: dict[str, object] = {}
        if args.no_color:
            changes["colors"] = False
        if args.no_emoji:
            changes["print_emojis"] = False
        if args.time:
            changes["print_time"] = True
        if args.line_length is not None:
            changes["line_length"] = args.line_length
        if args.method_count is not None:
            changes["method_count"] = args.method_count
        if args.error_method_count is not None:
            changes["error_method_count"] = args.error_method_count
        if changes:
            cfg = replace(cfg, **changes)
    except PrettyLogError as e:
        _LOG.error("invalid configuration: %s", e)
        return 2

    printer = PrettyPrinter.from_config(cfg, name=args.name)
    for pkg in args.ignore:
        printer.ignore_package(pkg)
    _LOG.debug("printer=%r ignored=%s", printer, printer.ignored_packages)

    events = (
        _demo_events()
        if args.demo
        else [LogEvent(args.level, args.message, error=args.error)]
    )
    for event in events:
        _print_event(printer, event, stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
