"""
Turn a log event's parts into a bordered, optionally coloured block of lines.

  ┌──────────────────────────
  │ name | INFO | 12:00:00.000 (+0:00:01.5)     header (optional)
  ├┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄
  │ Error info                                  error (optional)
  ├┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄
  │ #0   Method stack history                   stack (optional)
  ├┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄
  │ Log message                                 message
  └──────────────────────────

Each optional section contributes its lines followed by a middle border;
the assembler folds the present sections between the top and bottom borders.
"""

from __future__ import annotations

import json
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Final, Sequence

from .ansi import AnsiColor
from .errors import ConfigError, MessageFormatError
from .levels import Level, level_name

TOP_LEFT_CORNER: Final = "┌"
BOTTOM_LEFT_CORNER: Final = "└"
MIDDLE_CORNER: Final = "├"
VERTICAL_LINE: Final = "│"
DOUBLE_DIVIDER: Final = "─"
SINGLE_DIVIDER: Final = "┄"

LEVEL_COLORS: Final[dict[Level, AnsiColor]] = {
    Level.VERBOSE: AnsiColor.foreground(AnsiColor.grey(0.5)),
    Level.DEBUG: AnsiColor.none(),
    Level.INFO: AnsiColor.foreground(12),
    Level.WARNING: AnsiColor.foreground(208),
    Level.ERROR: AnsiColor.foreground(196),
    Level.WTF: AnsiColor.foreground(199),
}

LEVEL_EMOJIS: Final[dict[Level, str]] = {
    Level.VERBOSE: "",
    Level.DEBUG: "🐛 ",
    Level.INFO: "💡 ",
    Level.WARNING: "⚠️ ",
    Level.ERROR: "⛔ ",
    Level.WTF: "👾 ",
}


# ---------------------------------------------------------------------------
# Message stringification
# ---------------------------------------------------------------------------


_TEXT_TYPES = (str, bytes, bytearray)


def is_structured(message: Any) -> bool:
    """Mappings and non-text collections are rendered as indented JSON."""
    if isinstance(message, _TEXT_TYPES):
        return False
    return isinstance(message, Collection)


def _json_ready(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, Mapping):
        return dict(value)
    return list(value)


def _json_default(value: Any) -> Any:
    if is_structured(value):
        return _json_ready(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_structured(message: Any) -> str:
    try:
        payload = _json_ready(message)
        return json.dumps(payload, indent=2, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as e:
        raise MessageFormatError(type(message), str(e)) from e


def render_scalar(message: Any) -> str:
    return str(message)


def stringify_message(message: Any) -> str:
    if is_structured(message):
        return render_structured(message)
    return render_scalar(message)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Section:
    """Lines contributed by one part of the block, plus whether a border follows."""

    lines: tuple[str, ...]
    separated: bool = True


SectionProducer = Callable[["_RenderState"], "Section | None"]


@dataclass
class _RenderState:
    level: Level
    message: str
    time: str | None
    error: str | None
    stack: str | None
    header: str
    color: AnsiColor
    error_color: AnsiColor
    emoji: str
    time_shown: bool = False


class LayoutAssembler:
    """
    Build the final list of lines for one event.

    Borders are computed once from `line_length`. With `colors=False` every
    line is plain text; with `print_emojis=False` no emoji is prefixed to the
    message lines.
    """

    def __init__(
        self,
        *,
        line_length: int = 120,
        colors: bool = True,
        print_emojis: bool = True,
        name: str = "",
    ) -> None:
        if int(line_length) < 2:
            raise ConfigError(f"line_length must be >= 2 (got {line_length!r})")
        self.line_length = int(line_length)
        self.colors = bool(colors)
        self.print_emojis = bool(print_emojis)
        self.name = (name or "").strip()

        double_line = DOUBLE_DIVIDER * (self.line_length - 1)
        single_line = SINGLE_DIVIDER * (self.line_length - 1)
        self.top_border = f"{TOP_LEFT_CORNER}{double_line}"
        self.middle_border = f"{MIDDLE_CORNER}{single_line}"
        self.bottom_border = f"{BOTTOM_LEFT_CORNER}{double_line}"

        self.sections: tuple[SectionProducer, ...] = (
            self._header_section,
            self._error_section,
            self._stack_section,
            self._time_section,
        )

    # -- palettes -----------------------------------------------------------

    def level_color(self, level: Level) -> AnsiColor:
        if not self.colors:
            return AnsiColor.none()
        return LEVEL_COLORS.get(Level(level), AnsiColor.none())

    def error_color(self, level: Level) -> AnsiColor:
        if not self.colors:
            return AnsiColor.none()
        if Level(level) == Level.WTF:
            return LEVEL_COLORS[Level.WTF].to_bg()
        return LEVEL_COLORS[Level.ERROR].to_bg()

    def emoji(self, level: Level) -> str:
        if not self.print_emojis:
            return ""
        return LEVEL_EMOJIS.get(Level(level), "")

    # -- sections -----------------------------------------------------------

    def _header_section(self, st: _RenderState) -> Section | None:
        if not st.header:
            return None
        line = f"{st.header} {VERTICAL_LINE} {level_name(st.level)}"
        if st.time is not None:
            line += f" {VERTICAL_LINE} {st.time}"
            st.time_shown = True
        return Section((st.color(f"{VERTICAL_LINE} {line}"),))

    def _error_section(self, st: _RenderState) -> Section | None:
        if st.error is None:
            return None
        ec = st.error_color
        return Section(
            tuple(
                st.color(f"{VERTICAL_LINE} ")
                + ec.reset_foreground
                + ec(line)
                + ec.reset_background
                for line in st.error.split("\n")
            )
        )

    def _stack_section(self, st: _RenderState) -> Section | None:
        if st.stack is None:
            return None
        return Section(
            tuple(st.color(f"{VERTICAL_LINE} {line}") for line in st.stack.split("\n"))
        )

    def _time_section(self, st: _RenderState) -> Section | None:
        if st.time is None or st.time_shown:
            return None
        return Section((st.color(f"{VERTICAL_LINE} {st.time}"),))

    def _message_section(self, st: _RenderState) -> Section:
        return Section(
            tuple(
                st.color(f"{VERTICAL_LINE} {st.emoji}{line}")
                for line in st.message.split("\n")
            ),
            separated=False,
        )

    # -- assembly -----------------------------------------------------------

    def render(
        self,
        level: Level,
        message: Any,
        time: str | None = None,
        error: str | None = None,
        stack: str | None = None,
        header: str | None = None,
    ) -> list[str]:
        """
        Render one event.

        `message` may be any value; mappings and collections become indented
        JSON. `stack` is already-filtered frame text (None means no stack block).
        `header` overrides the assembler's own name for this call.
        """
        lvl = Level(level)
        color = self.level_color(lvl)
        st = _RenderState(
            level=lvl,
            message=message if isinstance(message, str) else stringify_message(message),
            time=time,
            error=error,
            stack=stack,
            header=self.name if header is None else str(header).strip(),
            color=color,
            error_color=self.error_color(lvl),
            emoji=self.emoji(lvl),
        )

        sections: list[Section] = []
        for producer in (*self.sections, self._message_section):
            section = producer(st)
            if section is not None:
                sections.append(section)
        return self.render_sections(sections, lvl)

    def render_sections(self, sections: Sequence[Section], level: Level) -> list[str]:
        """Fold arbitrary sections between this assembler's borders."""
        color = self.level_color(Level(level))
        out = [color(self.top_border)]
        for section in sections:
            out.extend(section.lines)
            if section.separated:
                out.append(color(self.middle_border))
        out.append(color(self.bottom_border))
        return out


__all__ = [
    "LayoutAssembler",
    "Section",
    "LEVEL_COLORS",
    "LEVEL_EMOJIS",
    "TOP_LEFT_CORNER",
    "BOTTOM_LEFT_CORNER",
    "MIDDLE_CORNER",
    "VERTICAL_LINE",
    "DOUBLE_DIVIDER",
    "SINGLE_DIVIDER",
    "is_structured",
    "render_structured",
    "render_scalar",
    "stringify_message",
]
