"""Tests for CLI argument parsing and command dispatch."""

import pathlib
from unittest.mock import patch

import pytest

from pdfsr.cli import main
from pdfsr.register import ACTIVE_MARKER

ALGEBRA = "000000000000-000000000000-Algebra.pdf"


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """No user config, no real viewer."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(pathlib.Path, "home", lambda: home)
    with patch("pdfsr.tools.subprocess.Popen") as popen:
        yield popen


def _exit_code(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_no_flag_prints_help(capsys):
    main([])
    out = capsys.readouterr().out
    assert "usage:" in out.lower()
    assert "-q" in out


def test_unknown_option_exits_1(capsys):
    assert _exit_code(["-z"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_positional_argument_exits_1():
    assert _exit_code(["-q", "extra"]) == 1


def test_missing_argument_exits_1():
    assert _exit_code(["-i"]) == 1


def test_two_modes_exit_1():
    assert _exit_code(["-q", "-h"]) == 1


def test_query_and_hit(deck, capsys, isolated):
    (deck / ALGEBRA).write_bytes(b"%PDF")
    main(["-d", str(deck), "-q"])
    assert "Algebra.pdf" in capsys.readouterr().out
    assert (deck / ACTIVE_MARKER).read_text().strip() == ALGEBRA
    assert isolated.call_args[0][0] == ["xdg-open", str(deck / ALGEBRA)]

    with patch("pdfsr.review.now", return_value=5000):
        main(["-d", str(deck), "-h"])
    out = capsys.readouterr().out
    assert "Hit first review, next in 1m 30s" in out
    assert (deck / "000000005090-000000005000-Algebra.pdf").exists()
    assert (deck / ACTIVE_MARKER).read_text() == ""


def test_miss_reports_elapsed(deck, capsys):
    name = "000000001090-000000001000-x.pdf"
    (deck / name).write_bytes(b"")
    (deck / ACTIVE_MARKER).write_text(name + "\n")
    with patch("pdfsr.review.now", return_value=1100):
        main(["-d", str(deck), "-m"])
    assert "Miss after 1m 40s, next in 1m" in capsys.readouterr().out
    assert (deck / "000000001160-000000001100-x.pdf").exists()


def test_all_caught_up(deck, capsys):
    main(["-d", str(deck), "-Q"])
    assert "All caught up." in capsys.readouterr().out


def test_hit_without_active_card_exits_1(deck, capsys):
    assert _exit_code(["-d", str(deck), "-h"]) == 1
    assert "No active card" in capsys.readouterr().err


def test_collision_exits_1_and_keeps_register(deck, capsys):
    (deck / ALGEBRA).write_bytes(b"a")
    (deck / "000000005090-000000005000-Algebra.pdf").write_bytes(b"b")
    (deck / ACTIVE_MARKER).write_text(ALGEBRA + "\n")
    with patch("pdfsr.review.now", return_value=5000):
        assert _exit_code(["-d", str(deck), "-h"]) == 1
    assert "already exists" in capsys.readouterr().err
    assert (deck / ACTIVE_MARKER).read_text().strip() == ALGEBRA


def test_bad_deck_dir_exits_1(tmp_path):
    assert _exit_code(["-d", str(tmp_path / "missing"), "-p"]) == 1


def test_print_empty(deck, capsys):
    main(["-d", str(deck), "-p"])
    assert "No timestamped cards." in capsys.readouterr().out


def test_add_then_strip(deck, capsys):
    (deck / "Algebra.pdf").write_bytes(b"")
    main(["-d", str(deck), "-a"])
    assert (deck / ALGEBRA).exists()
    main(["-d", str(deck), "-r"])
    assert (deck / "Algebra.pdf").exists()
    out = capsys.readouterr().out
    assert "1 card(s) stamped" in out
    assert "1 card(s) unstamped" in out


def test_import(deck, tmp_path, capsys):
    remote = tmp_path / "remote"
    remote.mkdir()
    (remote / "000000000200-000000000100-t.pdf").write_bytes(b"t")
    main(["-d", str(deck), "-I", str(remote)])
    assert (deck / "000000000200-000000000100-t.pdf").exists()
    assert "1 card(s) imported" in capsys.readouterr().out


def test_import_invalid_dir_exits_1(deck, tmp_path, capsys):
    assert _exit_code(["-d", str(deck), "-i", str(tmp_path / "nowhere")]) == 1
    assert "Not a directory" in capsys.readouterr().err
