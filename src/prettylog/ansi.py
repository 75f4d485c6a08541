from __future__ import annotations

from dataclasses import dataclass

ESC = "\x1b["
RESET = f"{ESC}0m"
RESET_FG = f"{ESC}39m"
RESET_BG = f"{ESC}49m"


@dataclass(frozen=True)
class AnsiColor:
    """
    An xterm-256 colour applied as foreground or background.

    Calling an instance wraps text in the escape sequence plus a full reset.
    An instance with neither `fg` nor `bg` is a pass-through, which is also
    what `AnsiColor.none()` returns when colours are disabled.
    """

    fg: int | None = None
    bg: int | None = None

    @classmethod
    def none(cls) -> "AnsiColor":
        return cls()

    @classmethod
    def foreground(cls, code: int) -> "AnsiColor":
        return cls(fg=int(code))

    @classmethod
    def background(cls, code: int) -> "AnsiColor":
        return cls(bg=int(code))

    @staticmethod
    def grey(level: float) -> int:
        """
        xterm-256 grey ramp: 0.0 -> 232 (near black), 1.0 -> 255 (near white).
        """
        clamped = min(max(float(level), 0.0), 1.0)
        return 232 + int(round(clamped * 23))

    @property
    def enabled(self) -> bool:
        return self.fg is not None or self.bg is not None

    def to_fg(self) -> "AnsiColor":
        return AnsiColor(fg=self.bg)

    def to_bg(self) -> "AnsiColor":
        return AnsiColor(bg=self.fg)

    @property
    def reset_foreground(self) -> str:
        return RESET_FG if self.enabled else ""

    @property
    def reset_background(self) -> str:
        return RESET_BG if self.enabled else ""

    def __str__(self) -> str:
        if self.fg is not None:
            return f"{ESC}38;5;{self.fg}m"
        if self.bg is not None:
            return f"{ESC}48;5;{self.bg}m"
        return ""

    def __call__(self, text: str) -> str:
        if not self.enabled:
            return text
        return f"{self}{text}{RESET}"


__all__ = ["AnsiColor", "ESC", "RESET", "RESET_FG", "RESET_BG"]
