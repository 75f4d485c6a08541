"""
Stack-trace filtering.

Raw trace text is one frame per line. Each line is matched (prefix match)
against three frame shapes, in this order, and only the first shape that
matches decides whether the line is dropped:

  device   #1      Logger.log (package:logger/src/logger.dart:115:29)
  bundled  packages/logger/src/printers/pretty_printer.dart 91:37
  bare     package:myapp/service.py:12 in handle

The captured origin is dropped when it belongs to this library, to the
runtime's own library, or to a prefix registered in the ignore list.
Lines matching no shape are always kept.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Hashable, Sequence

from .ignore_list import IgnoreListStore

_LOG = logging.getLogger(__name__)

DEVICE_FRAME_RE: Final = re.compile(r"#[0-9]+\s+.+ \((?:package:)?([^\s]+)\)")
BUNDLED_FRAME_RE: Final = re.compile(r"^(?:packages|sdk)/([^\s]+)")
BARE_FRAME_RE: Final = re.compile(r"^(?:package:)?(python:[^\s]+|[^\s]+)")

# Order matters: a line is only ever tested against the first shape it matches.
FRAME_SHAPES: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("device", DEVICE_FRAME_RE),
    ("bundled", BUNDLED_FRAME_RE),
    ("bare", BARE_FRAME_RE),
)

# Always dropped: this library, the bundled runtime library, and scheme-qualified
# core-library frames.
INTERNAL_ORIGIN_PREFIXES: Final[tuple[str, ...]] = ("prettylog/", "stdlib/", "python:")

_FRAME_NUMBER_RE: Final = re.compile(r"^#\d+\s+")


def extract_origin(line: str) -> tuple[str, str] | None:
    """
    Return `(shape, origin)` for the first frame shape matching `line`, else None.
    """
    for shape, pattern in FRAME_SHAPES:
        m = pattern.match(line)
        if m is not None:
            return shape, m.group(1)
    return None


def is_internal_origin(origin: str) -> bool:
    return origin.startswith(INTERNAL_ORIGIN_PREFIXES)


def origin_is_ignored(origin: str | None, prefixes: Sequence[str]) -> bool:
    if not origin:
        return False
    if is_internal_origin(origin):
        return True
    return any(origin.startswith(f"{p}/") for p in prefixes)


def render_frame(index: int, line: str) -> str:
    return f"#{index}   {_FRAME_NUMBER_RE.sub('', line, count=1)}"


class FrameFilterEngine:
    """
    Drop ignored frames from a raw trace, renumber survivors, cap their count.
    """

    def __init__(self, ignore_list: IgnoreListStore | None = None) -> None:
        self.ignore_list = IgnoreListStore() if ignore_list is None else ignore_list

    def is_discarded(self, line: str, level: Hashable | None = None) -> bool:
        return self._discard(line, self.ignore_list.snapshot(level))

    def filter(
        self,
        raw_trace: str,
        max_frames: int,
        level: Hashable | None = None,
        skip_frames: int = 0,
    ) -> str | None:
        """
        Filter `raw_trace` down to at most `max_frames` renumbered frames.

        The first `skip_frames` raw lines are skipped unconditionally. Returns
        None when no frame survives (as opposed to an empty string).
        """
        limit = int(max_frames)
        if limit <= 0:
            return None
        prefixes = self.ignore_list.snapshot(level)
        lines = str(raw_trace).split("\n")

        formatted: list[str] = []
        dropped = 0
        for raw in lines[max(int(skip_frames), 0) :]:
            line = raw.strip()
            if not line:
                continue
            if self._discard(line, prefixes):
                dropped += 1
                continue
            formatted.append(render_frame(len(formatted), line))
            if len(formatted) == limit:
                break

        _LOG.debug(
            "stack filter: kept=%d dropped=%d cap=%d level=%s",
            len(formatted),
            dropped,
            limit,
            level,
        )
        if not formatted:
            return None
        return "\n".join(formatted)

    @staticmethod
    def _discard(line: str, prefixes: Sequence[str]) -> bool:
        hit = extract_origin(line)
        if hit is None:
            return False
        _, origin = hit
        return origin_is_ignored(origin, prefixes)


__all__ = [
    "FrameFilterEngine",
    "FRAME_SHAPES",
    "INTERNAL_ORIGIN_PREFIXES",
    "extract_origin",
    "is_internal_origin",
    "origin_is_ignored",
    "render_frame",
]
