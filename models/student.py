# models/student.py

"""
Represents a single student on the roster.

Stores identifying information (roll number, name, email), the enrolled course, and a numeric score.
The letter grade is derived from the score and is recomputed whenever the score changes, so it can never
drift out of sync with the score it was computed from.

Includes functionality for:
- Computing a letter grade from a score
- Replacing all mutable fields at once
- Serializing to and from a single line of the roster file
- Producing independent copies for the `Roster`

The roll number is the record's unique key and is fixed at construction.
"""

from __future__ import annotations

import math

import core.formatters as formatters

FIELD_DELIMITER = "|"
FIELD_COUNT = 5

# (minimum score, grade), checked from the top down
GRADE_THRESHOLDS: list[tuple[float, str]] = [
    (90.0, "A"),
    (75.0, "B"),
    (60.0, "C"),
]
FALLBACK_GRADE = "D"


def calculate_grade(score: float) -> str:
    """
    Maps a score onto a letter grade.

    Args:
        score (float): The student's score. Values outside 0-100 are graded with the same thresholds.

    Returns:
        "A" for scores of 90 and above, "B" for 75 up to 90, "C" for 60 up to 75, and "D" for anything lower.
    """
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade

    return FALLBACK_GRADE


class Student:

    def __init__(
        self,
        id: int,
        name: str,
        email: str,
        course: str,
        score: float,
    ):
        self._id: int = id
        self._name: str = name
        self._email: str = email
        self._course: str = course
        self._score: float = score
        self._grade: str = calculate_grade(score)

    # === properties ===

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def course(self) -> str:
        return self._course

    @property
    def score(self) -> float:
        return self._score

    @property
    def grade(self) -> str:
        return self._grade

    # === data manipulators ===

    def update_details(self, name: str, email: str, course: str, score: float) -> None:
        """
        Replaces every mutable field of the record and recomputes the grade.

        Notes:
            - Partial updates are not supported; callers pass the current value for any field they want to keep.
            - The roll number cannot be changed.
        """
        self._name = name
        self._email = email
        self._course = course
        self._score = score
        self._grade = calculate_grade(score)

    def copy(self) -> Student:
        return Student(self._id, self._name, self._email, self._course, self._score)

    # === persistence and import ===

    def to_line(self) -> str:
        """
        Serializes the record as one roster file line, without the trailing newline.

        Notes:
            - Fields are joined with `|` in the order id, name, email, course, score.
            - No escaping is applied, so a field containing `|` will not survive a reload.
        """
        return FIELD_DELIMITER.join(
            [
                str(self._id),
                self._name,
                self._email,
                self._course,
                formatters.format_score(self._score),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> Student:
        """
        Parses one roster file line into a `Student`.

        Args:
            line (str): A single line from the roster file. The trailing line terminator is ignored.

        Returns:
            A new `Student` with its grade computed from the parsed score.

        Raises:
            ValueError:
                - If the line does not contain exactly five `|`-separated fields.
                - If the roll number is not an integer or the score is not a finite number.
        """
        fields = line.rstrip("\r\n").split(FIELD_DELIMITER)

        if len(fields) != FIELD_COUNT:
            raise ValueError(
                f"Expected {FIELD_COUNT} fields separated by '{FIELD_DELIMITER}', found {len(fields)}."
            )

        id_str, name, email, course, score_str = fields

        try:
            id = int(id_str.strip())
        except ValueError:
            raise ValueError(f"Roll number is not an integer: {id_str!r}")

        try:
            score = float(score_str.strip())
        except ValueError:
            raise ValueError(f"Score is not a number: {score_str!r}")

        if not math.isfinite(score):
            raise ValueError(f"Score is not a finite number: {score_str!r}")

        return cls(id=id, name=name, email=email, course=course, score=score)

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return (
            self._id == other._id
            and self._name == other._name
            and self._email == other._email
            and self._course == other._course
            and self._score == other._score
        )

    __hash__ = None  # mutable record

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._email}, {self._course}, {self._score})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, roll no: {self._id}, grade: {self._grade}"
