"""Tests for the command-line entry point."""

from io import StringIO

import pytest

from fretpick.main import main, make_parser, run
from fretpick.resolver import Resolver


def test_make_parser() -> None:
    args = make_parser().parse_args(["C", "Am", "--count", "2", "--midi"])
    assert args.symbols == ["C", "Am"]
    assert args.candidate_count == 2
    assert args.midi
    assert args.max_candidates is None


def test_run_reports_errors_and_continues() -> None:
    out = StringIO()
    err = StringIO()
    status = run(["H", "C"], Resolver(), out=out, err=err)
    assert status == 1
    assert "error:" in err.getvalue()
    assert "'H'" in err.getvalue()
    assert "Tab: x32010" in out.getvalue()


def test_run_with_midi() -> None:
    out = StringIO()
    assert run(["Em"], Resolver(), midi=True, out=out) == 0
    assert "note_on" in out.getvalue()
    assert "note_off" in out.getvalue()


def test_main(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["Cmaj7", "--max-candidates", "20"]) == 0
    assert "Tab: x32000" in capsys.readouterr().out


def test_main_suggest(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--suggest", "am7"]) == 0
    assert "Am7" in capsys.readouterr().out.splitlines()


def test_main_needs_symbols() -> None:
    with pytest.raises(SystemExit):
        main([])
