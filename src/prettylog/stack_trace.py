"""
Render Python call stacks as frame text the stack filter understands.

Each frame becomes one line in the "device" shape:

  #0      Service.handle (package:myapp/service.py:42)
  #1      dispatch (python:asyncio/events.py:88)

Application modules use the `package:` scheme; standard-library modules use
`python:` so they are dropped by the filter's built-in rules. Frames are
listed innermost first.
"""

from __future__ import annotations

import sys
import traceback
from types import FrameType, TracebackType
from typing import Iterable, Iterator

_STDLIB_MODULES: frozenset[str] = frozenset(getattr(sys, "stdlib_module_names", ()))


def frame_origin(module_name: str | None) -> str:
    """
    Map a dotted module name to a scheme-qualified origin path.

      "myapp.service" -> "package:myapp/service.py"
      "json.decoder"  -> "python:json/decoder.py"
    """
    name = str(module_name or "__main__")
    path = name.replace(".", "/") + ".py"
    top = name.split(".", 1)[0]
    if top in _STDLIB_MODULES or top in sys.builtin_module_names:
        return f"python:{path}"
    return f"package:{path}"


def _qualname(frame: FrameType) -> str:
    code = frame.f_code
    return getattr(code, "co_qualname", code.co_name)


def format_frame(index: int, frame: FrameType, lineno: int) -> str:
    module = frame.f_globals.get("__name__")
    return f"#{index:<6} {_qualname(frame)} ({frame_origin(module)}:{lineno})"


def format_frames(frames: Iterable[tuple[FrameType, int]]) -> str:
    return "\n".join(format_frame(i, f, ln) for i, (f, ln) in enumerate(frames))


def current_stack_text() -> str:
    """
    The live call stack, innermost first.

    The first line is this function's own frame, so callers know exactly how
    many leading lines belong to them.
    """
    return format_frames(traceback.walk_stack(sys._getframe()))



def _walk_tb_innermost_first(tb: TracebackType) -> Iterator[tuple[FrameType, int]]:
    return reversed(list(traceback.walk_tb(tb)))


def format_traceback(tb: TracebackType | None) -> str:
    """
    Render a traceback innermost (raising) frame first.

    Returns an empty string for None.
    """
    if tb is None:
        return ""
    return format_frames(_walk_tb_innermost_first(tb))


def stack_text_of(trace: object) -> str | None:
    """
    Normalise whatever an event carries as its stack trace into frame text.

    Accepts None, frame text, a traceback object, or an exception (its
    `__traceback__` is used).
    """
    if trace is None:
        return None
    if isinstance(trace, str):
        return trace
    if isinstance(trace, TracebackType):
        return format_traceback(trace)
    if isinstance(trace, BaseException):
        return format_traceback(trace.__traceback__)
    return str(trace)


__all__ = [
    "current_stack_text",
    "format_frame",
    "format_frames",
    "format_traceback",
    "frame_origin",
    "stack_text_of",
]
