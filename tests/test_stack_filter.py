from prettylog.ignore_list import IgnoreListStore
from prettylog.levels import Level
from prettylog.stack_filter import (
    FrameFilterEngine,
    extract_origin,
    is_internal_origin,
    render_frame,
)


def _engine() -> FrameFilterEngine:
    return FrameFilterEngine(IgnoreListStore())


APP_TRACE = "\n".join(
    [
        "#0      Service.handle (package:app/service.py:42)",
        "#1      Client.get (package:vendor/http/client.py:7)",
        "#2      Router.dispatch (package:app/router.py:17)",
        "#3      Worker.run (package:vendor/pool.py:3)",
        "#4      main (package:app/main.py:9)",
    ]
)


def test_globally_ignored_logger_frame_is_dropped_for_every_level() -> None:
    eng = _engine()
    eng.ignore_list.add_global("logger")
    line = "#0      Logger.log (package:logger/src/logger.dart:115:29)"
    for level in (None, *Level):
        assert eng.filter(line, 8, level) is None
        assert eng.is_discarded(line, level)


def test_survivors_are_renumbered_contiguously() -> None:
    eng = _engine()
    eng.ignore_list.add_global("vendor")
    out = eng.filter(APP_TRACE, 10)
    assert out == "\n".join(
        [
            "#0   Service.handle (package:app/service.py:42)",
            "#1   Router.dispatch (package:app/router.py:17)",
            "#2   main (package:app/main.py:9)",
        ]
    )


def test_frame_cap_returns_min_of_survivors_and_cap() -> None:
    eng = _engine()
    eng.ignore_list.add_global("vendor")
    for cap, expected in ((1, 1), (2, 2), (3, 3), (9, 3)):
        out = eng.filter(APP_TRACE, cap)
        assert out is not None
        lines = out.split("\n")
        assert len(lines) == expected
        assert [ln.split()[0] for ln in lines] == [f"#{i}" for i in range(expected)]


def test_level_scoped_entries_only_apply_to_that_level() -> None:
    eng = _engine()
    eng.ignore_list.add_for_level("vendor", Level.ERROR)

    err = eng.filter(APP_TRACE, 10, Level.ERROR)
    assert err is not None and "vendor/" not in err

    for level in (None, Level.INFO, Level.WARNING):
        kept = eng.filter(APP_TRACE, 10, level)
        assert kept is not None
        assert len(kept.split("\n")) == 5


def test_global_and_level_entries_are_additive() -> None:
    eng = _engine()
    eng.ignore_list.add_global("vendor")
    eng.ignore_list.add_for_level("app", Level.ERROR)
    # Every frame is ignored for ERROR: no trace at all rather than an empty one.
    assert eng.filter(APP_TRACE, 10, Level.ERROR) is None
    assert eng.filter(APP_TRACE, 10, Level.INFO) is not None


def test_prefix_needs_a_path_separator() -> None:
    eng = _engine()
    eng.ignore_list.add_global("app")
    trace = "#0      f (package:application/x.py:1)\n#1      g (package:app/y.py:2)"
    assert eng.filter(trace, 10) == "#0   f (package:application/x.py:1)"


def test_blank_trace_yields_none() -> None:
    eng = _engine()
    assert eng.filter("", 5) is None
    assert eng.filter("\n   \n\t\n", 5) is None


def test_skip_frames_drops_leading_raw_lines() -> None:
    eng = _engine()
    out = eng.filter(APP_TRACE, 10, skip_frames=3)
    assert out == "\n".join(
        [
            "#0   Worker.run (package:vendor/pool.py:3)",
            "#1   main (package:app/main.py:9)",
        ]
    )
    assert eng.filter(APP_TRACE, 10, skip_frames=5) is None


def test_builtin_internal_origins_are_always_dropped() -> None:
    eng = _engine()
    trace = "\n".join(
        [
            "#0      PrettyPrinter.log (package:prettylog/printer.py:140)",
            "#1      Logger._log (python:logging/__init__.py:1622)",
            "sdk/stdlib/json/decoder.py 337:12",
            "python:asyncio/events.py:80 in _run",
            "#4      handler (package:app/api.py:5)",
        ]
    )
    assert eng.filter(trace, 10) == "#0   handler (package:app/api.py:5)"


def test_bundled_frames_are_matched_on_origin_after_root() -> None:
    eng = _engine()
    eng.ignore_list.add_global("logger")
    line = "packages/logger/src/printers/pretty_printer.dart 91:37"
    assert extract_origin(line) == ("bundled", "logger/src/printers/pretty_printer.dart")
    assert eng.filter(line, 3) is None


def test_first_matching_shape_wins() -> None:
    line = "packages/vendor/x.dart 1:1"

    eng = _engine()
    eng.ignore_list.add_global("vendor")
    assert eng.filter(line, 3) is None

    # The bare shape would see "packages/..." but it is never consulted here.
    eng = _engine()
    eng.ignore_list.add_global("packages")
    assert eng.filter(line, 3) == "#0   packages/vendor/x.dart 1:1"


def test_bare_module_frames() -> None:
    eng = _engine()
    eng.ignore_list.add_global("vendor")
    assert extract_origin("package:vendor/lib.py:12 in f") == ("bare", "vendor/lib.py:12")
    assert eng.filter("package:vendor/lib.py:12 in f", 3) is None
    assert eng.filter("package:app/lib.py:12 in f", 3) == "#0   package:app/lib.py:12 in f"


def test_unrecognised_lines_are_kept() -> None:
    eng = _engine()
    eng.ignore_list.add_global("vendor")
    trace = "Traceback (most recent call last):\n<asynchronous suspension>"
    assert eng.filter(trace, 5) == (
        "#0   Traceback (most recent call last):\n#1   <asynchronous suspension>"
    )


def test_render_frame_strips_only_leading_frame_number() -> None:
    assert render_frame(0, "#12     foo (package:a/b.py:1)") == "#0   foo (package:a/b.py:1)"
    assert render_frame(3, "bar #1 baz") == "#3   bar #1 baz"


def test_is_internal_origin() -> None:
    assert is_internal_origin("prettylog/printer.py:3")
    assert is_internal_origin("python:logging/__init__.py:1")
    assert is_internal_origin("stdlib/json/x.py")
    assert not is_internal_origin("prettylogger/x.py")


def test_non_positive_cap_yields_none() -> None:
    eng = _engine()
    assert eng.filter(APP_TRACE, 0) is None
    assert eng.filter(APP_TRACE, -1) is None
