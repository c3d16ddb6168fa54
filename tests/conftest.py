# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student


@pytest.fixture
def roster_path(tmp_path):
    return str(tmp_path / "students.txt")


@pytest.fixture
def sample_roster(roster_path):
    return Roster(roster_path)


@pytest.fixture
def populated_roster(sample_roster, sample_student, sample_second_student):
    sample_roster.add_student(sample_student)
    sample_roster.add_student(sample_second_student)
    return sample_roster


@pytest.fixture
def sample_student():
    return Student(101, "Sean Cameron", "scameron@mmm.edu", "THTR 274A", 88.5)


@pytest.fixture
def sample_second_student():
    return Student(102, "Paul Atreides", "patreides@mmm.edu", "DUNE 101", 95.0)


@pytest.fixture
def write_roster_file(roster_path):
    def _write(content: str) -> str:
        with open(roster_path, "w", encoding="utf-8") as f:
            f.write(content)
        return roster_path

    return _write


@pytest.fixture
def feed_input(monkeypatch):
    """
    Replaces `input()` with a scripted sequence of answers; running out behaves like end of input.
    """

    def _feed(*responses: str) -> None:
        answers = iter(responses)

        def _input(_prompt: str = "") -> str:
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", _input)

    return _feed
