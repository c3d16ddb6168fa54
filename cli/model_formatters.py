# cli/model_formatters.py

# anything that renders domain objects for the console
from textwrap import dedent

import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return (
        f"{student.id:>6} | {student.name:<20} | {student.course:<12} | "
        f"{formatters.format_score(student.score):>6} | {student.grade}"
    )


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Roll No : {student.id}
        Name    : {student.name}
        Email   : {student.email}
        Course  : {student.course}
        Score   : {formatters.format_score(student.score)}
        Grade   : {student.grade}
        {formatters.format_divider(35)}"""
    )


def format_student_table_header() -> str:
    header = f"{'Roll':>6} | {'Name':<20} | {'Course':<12} | {'Score':>6} | Grade"
    return f"{header}\n{formatters.format_divider(len(header))}"
