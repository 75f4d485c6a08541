import logging

from prettylog.ansi import RESET, RESET_BG, RESET_FG, AnsiColor
from prettylog.levels import Level, level_name


def test_level_from_logging_maps_to_highest_level_not_above() -> None:
    assert Level.from_logging(logging.DEBUG) is Level.DEBUG
    assert Level.from_logging(logging.INFO) is Level.INFO
    assert Level.from_logging(25) is Level.INFO
    assert Level.from_logging(logging.CRITICAL) is Level.WTF
    assert Level.from_logging(60) is Level.WTF
    # Anything below DEBUG is treated as verbose.
    assert Level.from_logging(5) is Level.VERBOSE
    assert Level.from_logging(1) is Level.VERBOSE


def test_level_name_is_upper_case_label() -> None:
    assert level_name(Level.WARNING) == "WARNING"
    assert level_name(Level.WTF) == "WTF"


def test_ansi_color_wraps_foreground_and_background() -> None:
    fg = AnsiColor.foreground(12)
    assert fg("x") == "\x1b[38;5;12mx" + RESET
    bg = fg.to_bg()
    assert bg("x") == "\x1b[48;5;12mx" + RESET
    assert bg.to_fg() == fg
    assert fg.reset_foreground == RESET_FG
    assert fg.reset_background == RESET_BG


def test_ansi_none_is_pass_through() -> None:
    c = AnsiColor.none()
    assert c("plain") == "plain"
    assert str(c) == ""
    assert c.reset_foreground == ""
    assert c.reset_background == ""


def test_ansi_grey_ramp_is_clamped() -> None:
    assert AnsiColor.grey(0.0) == 232
    assert AnsiColor.grey(0.5) == 244
    assert AnsiColor.grey(1.0) == 255
    assert AnsiColor.grey(-3) == 232
    assert AnsiColor.grey(7) == 255
