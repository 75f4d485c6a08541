from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from .errors import ConfigError

DEFAULT_ENV_PREFIX = "PRETTYLOG_"
NO_COLOR_ENV = "NO_COLOR"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PrinterConfig:
    # stack traces
    method_count: int = 2
    error_method_count: int = 8

    # layout
    line_length: int = 120
    colors: bool = True
    print_emojis: bool = True
    print_time: bool = False

    def __post_init__(self) -> None:
        if int(self.line_length) < 2:
            raise ConfigError(f"line_length must be >= 2 (got {self.line_length!r})")
        if int(self.method_count) < 0:
            raise ConfigError(f"method_count must be >= 0 (got {self.method_count!r})")
        if int(self.error_method_count) < 0:
            raise ConfigError(
                f"error_method_count must be >= 0 (got {self.error_method_count!r})"
            )

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> "PrinterConfig":
        """
        Build a config from environment variables.

        Recognised (with the default prefix):
          PRETTYLOG_METHOD_COUNT, PRETTYLOG_ERROR_METHOD_COUNT, PRETTYLOG_LINE_LENGTH,
          PRETTYLOG_COLORS, PRETTYLOG_EMOJIS, PRETTYLOG_PRINT_TIME

        Unset or blank values keep the defaults. If PRETTYLOG_COLORS is unset,
        a non-empty NO_COLOR disables colours (https://no-color.org).
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        changes: dict[str, object] = {}

        for field_name, suffix in (
            ("method_count", "METHOD_COUNT"),
            ("error_method_count", "ERROR_METHOD_COUNT"),
            ("line_length", "LINE_LENGTH"),
        ):
            raw = _env_value(env, prefix + suffix)
            if raw is not None:
                changes[field_name] = _parse_int(prefix + suffix, raw)

        for field_name, suffix in (
            ("colors", "COLORS"),
            ("print_emojis", "EMOJIS"),
            ("print_time", "PRINT_TIME"),
        ):
            raw = _env_value(env, prefix + suffix)
            if raw is not None:
                changes[field_name] = _parse_bool(prefix + suffix, raw)

        if "colors" not in changes and _env_value(env, NO_COLOR_ENV) is not None:
            changes["colors"] = False

        return replace(cfg, **changes) if changes else cfg


def _env_value(env: Mapping[str, str], key: str) -> str | None:
    raw = str(env.get(key, "") or "").strip()
    return raw or None


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be an integer (got {raw!r})") from e


def _parse_bool(key: str, raw: str) -> bool:
    v = raw.lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean flag (got {raw!r})")


__all__ = ["PrinterConfig", "DEFAULT_ENV_PREFIX", "NO_COLOR_ENV"]
