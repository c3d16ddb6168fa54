# tests/test_main.py

import os

import cli.main as cli_main
from cli.path_utils import ROSTER_FILE_ENV_VAR, get_roster_path, resolve_roster_path
from core.response import ErrorCode, Response
from models.roster import Roster


def test_main_add_then_save_and_exit(roster_path, feed_input):
    feed_input("1", "7", "Ada Lovelace", "ada@mmm.edu", "MATH 101", "93.5", "0")

    cli_main.main(["--file", roster_path, "--no-animation"])

    with open(roster_path, encoding="utf-8") as f:
        assert f.read() == "7|Ada Lovelace|ada@mmm.edu|MATH 101|93.5\n"


def test_main_loads_existing_file(write_roster_file, feed_input, capsys):
    path = write_roster_file(
        "101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n" "102|broken\n"
    )
    feed_input("2", "0")

    cli_main.main(["--file", path, "--no-animation"])

    out = capsys.readouterr().out
    assert "Skipped line 2" in out
    assert "Sean Cameron" in out

    with open(path, encoding="utf-8") as f:
        assert f.read() == "101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n"


def test_main_interrupt_discards_changes(roster_path, feed_input, capsys):
    feed_input("1", "7", "Ada Lovelace", "ada@mmm.edu", "MATH 101", "93.5")

    cli_main.main(["--file", roster_path, "--no-animation"])

    assert "Unsaved changes were discarded" in capsys.readouterr().out
    assert not os.path.exists(roster_path)


def test_main_keeps_lines_around_invalid_utf8(roster_path, feed_input, capsys):
    with open(roster_path, "wb") as f:
        f.write(
            b"1|Ana|ana@mmm.edu|MATH 101|80.0\n"
            b"2|B\xff|b@mmm.edu|MATH 101|70.0\n"
            b"3|Cy|cy@mmm.edu|MATH 101|90.0\n"
        )
    feed_input("0")

    cli_main.main(["--file", roster_path, "--no-animation"])

    assert "Skipped line 2" in capsys.readouterr().out

    with open(roster_path, "rb") as f:
        assert f.read() == (
            b"1|Ana|ana@mmm.edu|MATH 101|80.0\n" b"3|Cy|cy@mmm.edu|MATH 101|90.0\n"
        )


def test_main_failed_load_does_not_overwrite(
    write_roster_file, feed_input, monkeypatch, capsys
):
    path = write_roster_file("101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n")
    monkeypatch.setattr(
        Roster,
        "load",
        staticmethod(
            lambda _path: Response.fail(detail="disk error", error=ErrorCode.IO_ERROR)
        ),
    )
    feed_input("0", "n")

    cli_main.main(["--file", path, "--no-animation"])

    assert "[ERROR: IO_ERROR] disk error" in capsys.readouterr().out

    with open(path, encoding="utf-8") as f:
        assert f.read() == "101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n"


def test_save_and_exit_after_failed_load_declined(write_roster_file, feed_input):
    path = write_roster_file("unreadable\n")
    feed_input("n")

    assert cli_main.save_and_exit(Roster(path), load_failed=True)

    with open(path, encoding="utf-8") as f:
        assert f.read() == "unreadable\n"


def test_save_and_exit_after_failed_load_with_changes(
    write_roster_file, sample_student, feed_input
):
    path = write_roster_file("unreadable\n")
    roster = Roster(path)
    roster.add_student(sample_student)
    feed_input("n", "n")

    assert not cli_main.save_and_exit(roster, load_failed=True)
    assert roster.has_unsaved_changes

    with open(path, encoding="utf-8") as f:
        assert f.read() == "unreadable\n"


def test_save_and_exit_after_failed_load_confirmed(
    write_roster_file, sample_student, feed_input
):
    path = write_roster_file("unreadable\n")
    roster = Roster(path)
    roster.add_student(sample_student)
    feed_input("y")

    assert cli_main.save_and_exit(roster, load_failed=True)

    with open(path, encoding="utf-8") as f:
        assert f.read() == "101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n"


def test_save_and_exit_failure_returns_to_menu(tmp_path, sample_student, feed_input):
    roster = Roster(str(tmp_path))
    roster.add_student(sample_student)
    feed_input("n", "n")

    assert not cli_main.save_and_exit(roster)
    assert roster.has_unsaved_changes


def test_save_and_exit_failure_discard(tmp_path, sample_student, feed_input):
    roster = Roster(str(tmp_path))
    roster.add_student(sample_student)
    feed_input("n", "y")

    assert cli_main.save_and_exit(roster)


def test_load_roster_falls_back_to_empty(tmp_path, capsys):
    roster, load_failed = cli_main.load_roster(str(tmp_path), animate=False)

    assert load_failed
    assert len(roster) == 0
    assert roster.path == str(tmp_path)
    assert "will not be overwritten without confirmation" in capsys.readouterr().out


def test_load_roster_reports_success(write_roster_file):
    path = write_roster_file("101|Sean Cameron|scameron@mmm.edu|THTR 274A|88.5\n")

    roster, load_failed = cli_main.load_roster(path, animate=False)

    assert not load_failed
    assert 101 in roster


# === path utils ===


def test_get_roster_path_prefers_user_input(monkeypatch):
    monkeypatch.setenv(ROSTER_FILE_ENV_VAR, "from_env.txt")

    assert get_roster_path(" custom.txt ") == "custom.txt"


def test_get_roster_path_uses_environment(monkeypatch):
    monkeypatch.setenv(ROSTER_FILE_ENV_VAR, "from_env.txt")

    assert get_roster_path(None) == "from_env.txt"


def test_get_roster_path_default(monkeypatch):
    monkeypatch.delenv(ROSTER_FILE_ENV_VAR, raising=False)

    assert get_roster_path("") == "students.txt"


def test_resolve_roster_path_is_absolute(monkeypatch):
    monkeypatch.delenv(ROSTER_FILE_ENV_VAR, raising=False)

    resolved = resolve_roster_path("~/roster.txt")

    assert os.path.isabs(resolved)
    assert resolved == os.path.join(os.path.expanduser("~"), "roster.txt")
