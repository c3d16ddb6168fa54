# cli/students_menu.py

"""
Student record commands for the Roster CLI.

This module defines one handler per main menu command:
- Adding a new student
- Viewing all students
- Searching for a student by roll number
- Deleting a student
- Updating every field of a student
- Viewing students sorted by score

All operations are routed through the `Roster` API. Failed `Response` objects are reported to the user and the
session continues; nothing here terminates the program.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster
from models.student import Student

# === add student ===


def add_student(roster: Roster, animate: bool = True) -> None:
    """
    Prompts for a new `Student` and adds it to the roster.

    Args:
        roster (Roster): The active `Roster`.
        animate (bool, optional): If True, shows the loading indicator before adding. Defaults to True.

    Notes:
        - Additions are not saved automatically; they are written on "Save & Exit".
        - A duplicate roll number is reported and the roster is left unchanged.
    """
    roll_no = helpers.prompt_int_or_cancel("Enter roll number (leave blank to cancel):")

    if roll_no is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    roll_no = cast(int, roll_no)

    availability = roster.check_roll_number_available(roll_no)

    if not availability.success:
        helpers.display_response_failure(availability)
        return

    new_student = prompt_student_details(roll_no)

    if new_student is None:
        helpers.returning_without_changes()
        return

    if animate:
        helpers.display_loading()

    roster_response = roster.add_student(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\n{new_student.name} was not added.")
        return

    print(f"\n{roster_response.detail}")


def prompt_student_details(roll_no: int, prefix: str = "") -> Student | None:
    """
    Collects name, email, course, and score for a roll number and builds a `Student`.

    Args:
        roll_no (int): The roll number the new record will carry.
        prefix (str, optional): Text placed before each field label, e.g. "new ". Defaults to "".

    Returns:
        A new `Student` object, or None if the user cancels at any prompt.
    """
    name = helpers.prompt_user_input_or_cancel(
        f"Enter {prefix}name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return None
    name = cast(str, name)

    email = helpers.prompt_user_input_or_cancel(
        f"Enter {prefix}email address (leave blank to cancel):"
    )

    if email is MenuSignal.CANCEL:
        return None
    email = cast(str, email)

    course = helpers.prompt_user_input_or_cancel(
        f"Enter {prefix}course (leave blank to cancel):"
    )

    if course is MenuSignal.CANCEL:
        return None
    course = cast(str, course)

    score = helpers.prompt_float_or_cancel(
        f"Enter {prefix}score (leave blank to cancel):"
    )

    if score is MenuSignal.CANCEL:
        return None
    score = cast(float, score)

    return Student(id=roll_no, name=name, email=email, course=course, score=score)


# === view students ===


def view_all_students(roster: Roster) -> None:
    roster_response = roster.get_records()

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    students = roster_response.data["records"]

    if not students:
        print("\nNo records available.")
        return

    helpers.display_banner("Student Records")
    helpers.display_results(students, formatter=model_formatters.format_student_multiline)


def sort_students_by_score(roster: Roster) -> None:
    roster_response = roster.sort_by_score_desc()

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    students = roster_response.data["records"]

    if not students:
        print("\nNo records to sort.")
        return

    helpers.display_banner("Sorted by Score (DESC)")
    print(model_formatters.format_student_table_header())
    helpers.display_results(students, formatter=model_formatters.format_student_oneline)


# === search student ===


def prompt_find_student(roster: Roster, prompt: str) -> Student | MenuSignal:
    """
    Prompts for a roll number and looks up the matching `Student`.

    Args:
        roster (Roster): The active `Roster`.
        prompt (str): The text shown when asking for the roll number.

    Returns:
        A copy of the matching `Student`, or `MenuSignal.CANCEL` if the user cancels or no match exists.

    Notes:
        - A failed lookup is reported before returning.
    """
    roll_no = helpers.prompt_int_or_cancel(prompt)

    if roll_no is MenuSignal.CANCEL:
        return MenuSignal.CANCEL
    roll_no = cast(int, roll_no)

    roster_response = roster.find_student_by_id(roll_no)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return MenuSignal.CANCEL

    return roster_response.data["record"]


def search_student(roster: Roster) -> None:
    student = prompt_find_student(
        roster, "Enter roll number to search for (leave blank to cancel):"
    )

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print(f"\n{model_formatters.format_student_multiline(student)}")


# === delete student ===


def delete_student(roster: Roster) -> None:
    """
    Prompts for a roll number, shows the matching record, and removes it after confirmation.

    Args:
        roster (Roster): The active `Roster`.
    """
    student = prompt_find_student(
        roster, "Enter roll number to delete (leave blank to cancel):"
    )

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print("\nYou are about to delete the following student:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_action("Are you sure you want to delete this student?"):
        helpers.returning_without_changes()
        return

    roster_response = roster.remove_student(student.id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent was not deleted.")
        return

    print(f"\n{roster_response.detail}")


# === update student ===


def update_student(roster: Roster, animate: bool = True) -> None:
    """
    Prompts for a roll number and replaces every field of the matching record.

    Args:
        roster (Roster): The active `Roster`.
        animate (bool, optional): If True, shows the loading indicator before updating. Defaults to True.

    Notes:
        - The roll number itself cannot be changed.
        - Partial edits are not supported; all four fields are collected again.
    """
    current = prompt_find_student(
        roster, "Enter roll number to update (leave blank to cancel):"
    )

    if current is MenuSignal.CANCEL:
        return
    current = cast(Student, current)

    print("\nYou are updating the following student:")
    print(model_formatters.format_student_multiline(current))

    replacement = prompt_student_details(current.id, prefix="new ")

    if replacement is None:
        helpers.returning_without_changes()
        return

    print("\nThe record will be replaced with:")
    print(model_formatters.format_student_multiline(replacement))

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    if animate:
        helpers.display_loading()

    roster_response = roster.update_student(current.id, replacement)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent was not updated.")
        return

    print(f"\n{roster_response.detail}")
