import io
import logging

import pytest

from prettylog.cli import main
from prettylog.logging_utils import PrettyLogFormatter


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "NO_COLOR",
        "PRETTYLOG_METHOD_COUNT",
        "PRETTYLOG_ERROR_METHOD_COUNT",
        "PRETTYLOG_LINE_LENGTH",
        "PRETTYLOG_COLORS",
        "PRETTYLOG_EMOJIS",
        "PRETTYLOG_PRINT_TIME",
    ):
        monkeypatch.delenv(key, raising=False)


def test_cli_demo_prints_every_level() -> None:
    buf = io.StringIO()
    rc = main(["--demo", "--no-color", "--no-emoji", "--line-length", "20"], out=buf)
    assert int(rc) == 0
    text = buf.getvalue()
    assert "\x1b" not in text
    assert "│ debug message" in text
    assert '│   "workers": 4,' in text
    assert "│ #0   Service.handle (package:myapp/service.py:42)" in text
    assert "asyncio" not in text
    assert text.count("┌" + "─" * 19) == 6


def test_cli_single_event_with_name_and_ignore() -> None:
    buf = io.StringIO()
    rc = main(
        [
            "--name",
            "disk",
            "--level",
            "warning",
            "--message",
            "almost full",
            "--no-color",
            "--no-emoji",
            "--method-count",
            "0",
            "--line-length",
            "10",
            "--ignore",
            "vendor",
        ],
        out=buf,
    )
    assert rc == 0
    assert buf.getvalue().split("\n")[:-1] == [
        "┌" + "─" * 9,
        "│ disk │ WARNING",
        "├" + "┄" * 9,
        "│ almost full",
        "└" + "─" * 9,
    ]


def test_cli_accepts_fatal_alias_and_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRETTYLOG_COLORS", "0")
    monkeypatch.setenv("PRETTYLOG_METHOD_COUNT", "0")
    buf = io.StringIO()
    rc = main(["--level", "fatal", "--message", "x", "--error", "bad"], out=buf)
    assert rc == 0
    lines = buf.getvalue().split("\n")
    assert lines[1] == "│ bad"
    assert lines[3] == "│ 👾 x"


def test_cli_rejects_invalid_configuration() -> None:
    assert main(["--line-length", "1"], out=io.StringIO()) == 2


def test_cli_rejects_unknown_level() -> None:
    with pytest.raises(SystemExit):
        main(["--level", "loud"], out=io.StringIO())


def test_cli_routes_diagnostics_through_pretty_formatter() -> None:
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        assert main(["--log-level", "debug", "--method-count", "0"], out=io.StringIO()) == 0
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, PrettyLogFormatter)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved[1]:
            root.addHandler(h)
        root.setLevel(saved[0])
