# tests/test_students_menu.py

import cli.students_menu as students_menu
from models.student import Student


def test_add_student(sample_roster, feed_input, capsys):
    feed_input("7", "Ada Lovelace", "ada@mmm.edu", "MATH 101", "93.5")

    students_menu.add_student(sample_roster, animate=False)

    student = sample_roster.find_student_by_id(7).data["record"]
    assert student.name == "Ada Lovelace"
    assert student.grade == "A"
    assert "successfully added" in capsys.readouterr().out


def test_add_student_reprompts_bad_numbers(sample_roster, feed_input):
    feed_input("seven", "7", "Ada Lovelace", "ada@mmm.edu", "MATH 101", "lots", "70")

    students_menu.add_student(sample_roster, animate=False)

    assert sample_roster.find_student_by_id(7).data["record"].score == 70.0


def test_add_student_rejects_non_finite_score(sample_roster, feed_input, capsys):
    feed_input("7", "Ada Lovelace", "ada@mmm.edu", "MATH 101", "nan", "inf", "88")

    students_menu.add_student(sample_roster, animate=False)

    assert sample_roster.find_student_by_id(7).data["record"].score == 88.0
    assert capsys.readouterr().out.count("not a finite number") == 2


def test_add_student_cancel(sample_roster, feed_input):
    feed_input("7", "Ada Lovelace", "")

    students_menu.add_student(sample_roster, animate=False)

    assert len(sample_roster) == 0
    assert not sample_roster.has_unsaved_changes


def test_add_duplicate_student(populated_roster, feed_input, capsys):
    feed_input("101")

    students_menu.add_student(populated_roster, animate=False)

    out = capsys.readouterr().out
    assert "[ERROR: DUPLICATE_KEY] Duplicate roll number 101" in out
    assert populated_roster.find_student_by_id(101).data["record"].name == "Sean Cameron"


def test_view_all_students_empty(sample_roster, capsys):
    students_menu.view_all_students(sample_roster)

    assert "No records available." in capsys.readouterr().out


def test_view_all_students(populated_roster, capsys):
    students_menu.view_all_students(populated_roster)

    out = capsys.readouterr().out
    assert "Sean Cameron" in out
    assert "Paul Atreides" in out


def test_sort_students_by_score(populated_roster, capsys):
    students_menu.sort_students_by_score(populated_roster)

    out = capsys.readouterr().out
    assert out.index("Paul Atreides") < out.index("Sean Cameron")


def test_sort_students_by_score_empty(sample_roster, capsys):
    students_menu.sort_students_by_score(sample_roster)

    assert "No records to sort." in capsys.readouterr().out


def test_search_missing_student(populated_roster, feed_input, capsys):
    feed_input("999")

    students_menu.search_student(populated_roster)

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_delete_student(populated_roster, feed_input):
    feed_input("101", "y")

    students_menu.delete_student(populated_roster)

    assert 101 not in populated_roster


def test_delete_student_declined(populated_roster, feed_input):
    feed_input("101", "n")

    students_menu.delete_student(populated_roster)

    assert 101 in populated_roster


def test_update_student(populated_roster, feed_input):
    feed_input("101", "Sean C.", "sean@mmm.edu", "THTR 275", "74.99", "y")

    students_menu.update_student(populated_roster, animate=False)

    assert populated_roster.find_student_by_id(101).data["record"] == Student(
        101, "Sean C.", "sean@mmm.edu", "THTR 275", 74.99
    )


def test_update_missing_student(populated_roster, feed_input, capsys):
    feed_input("999")

    students_menu.update_student(populated_roster, animate=False)

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out
    assert len(populated_roster) == 2
