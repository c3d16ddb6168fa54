# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all student records.

Students are stored in a dictionary keyed by roll number and written to a flat `|`-delimited text file upon saving.
The roster owns its records exclusively: every record is copied on the way in and on the way out, so callers can only
change roster state through the methods below.

Provides functions for loading a Roster from disk and saving it back, along with adding, removing, updating, finding,
listing, and sorting student records. Includes session-scoped attributes like path (current save location) and
unsaved_changes (mutations since the last successful save).
"""

from __future__ import annotations

import logging
import os

from core.response import ErrorCode, Response
from models.student import FIELD_DELIMITER, Student

logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, path: str | None = None):
        self._students: dict[int, Student] = {}
        self._path: str | None = path
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def path(self) -> str | None:
        return self._path

    @path.setter
    def path(self, path: str) -> None:
        self._path = path

    # --- status markers ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === public classmethods ===

    @classmethod
    def load(cls, path: str) -> Response:
        """
        Reads a roster file from disk and returns a populated `Roster` instance.

        Args:
            path (str): The roster file path. The returned roster remembers it as its save location.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read, or if it does not exist yet.
                    - False if the file exists but could not be read.
                - detail (str | None):
                    - On success, a summary of how many records were loaded and skipped.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.IO_ERROR` if OSError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "roster" (Roster): The loaded `Roster` object.
                        - "skipped" (list[tuple[int, str]]): Line number and reason for each malformed line.
                    - On failure:
                        - None

        Notes:
            - A missing file is not an error: an empty roster is returned and no file is created.
            - Blank lines are ignored.
            - Malformed lines are skipped and loading continues; each one is logged as a warning.
            - Lines are decoded one at a time, so a line that is not valid UTF-8 only skips that line.
            - If a roll number appears on more than one line, the later line wins.
        """
        roster = cls(path)
        skipped: list[tuple[int, str]] = []

        if not os.path.exists(path):
            logger.info("No roster file at %s, starting with an empty roster.", path)

            return Response.succeed(
                detail="No roster file found. Starting with an empty roster.",
                data={
                    "roster": roster,
                    "skipped": skipped,
                },
            )

        try:
            with open(path, "rb") as f:
                lines = f.read().splitlines()

            for line_number, line in enumerate(lines, 1):
                if line.strip() == b"":
                    continue

                parse_response = cls.parse_record_line(line)

                if not parse_response.success:
                    logger.warning(
                        "Skipping malformed record on line %d of %s: %s",
                        line_number,
                        path,
                        parse_response.detail,
                    )
                    skipped.append((line_number, str(parse_response.detail)))
                    continue

                student = parse_response.data["record"]

                if student.id in roster._students:
                    logger.warning(
                        "Roll number %d appears again on line %d of %s, keeping the later record.",
                        student.id,
                        line_number,
                        path,
                    )

                roster._students[student.id] = student

        except OSError as e:
            logger.error("Failed to read roster file %s: %s", path, e)

            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.IO_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info(
                "Loaded %d record(s) from %s, skipped %d malformed line(s).",
                len(roster._students),
                path,
                len(skipped),
            )

            detail = f"Loaded {len(roster._students)} record(s)."
            if skipped:
                detail += f" Skipped {len(skipped)} malformed line(s)."

            return Response.succeed(
                detail=detail,
                data={
                    "roster": roster,
                    "skipped": skipped,
                },
            )

    @staticmethod
    def parse_record_line(line: str | bytes) -> Response:
        """
        Parses a single roster file line into a `Student`.

        Args:
            line (str | bytes): One line of the roster file, with or without its line terminator.
                Raw bytes are decoded as UTF-8.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the line parsed into a `Student`.
                    - False if the line is malformed.
                - detail (str | None):
                    - On failure, the reason the line was rejected.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MALFORMED_RECORD` if the field count is wrong or a number fails to parse,
                      or if a raw line is not valid UTF-8.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The parsed `Student`.
                    - On failure:
                        - None
        """
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")

            student = Student.from_line(line)

        except UnicodeDecodeError as e:
            return Response.fail(
                detail=f"Line is not valid UTF-8: {e.reason} at byte {e.start}.",
                error=ErrorCode.MALFORMED_RECORD,
            )

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.MALFORMED_RECORD,
            )

        else:
            return Response.succeed(
                data={
                    "record": student,
                },
            )

    # === persistence ===

    def save(self, path: str | None = None) -> Response:
        """
        Serializes every record and writes the roster file, one record per line.

        Args:
            path (str | None):
                - The file path to write.
                - If no argument is provided, `self.path` will be used by default.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to disk.
                    - False if no path is known or the write failed.
                - detail (str | None):
                    - On success:
                        - "Roster successfully saved to disk."
                    - On failure:
                        - Description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if neither `path` nor `self.path` is set.
                    - `ErrorCode.IO_ERROR` if OSError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This intentionally overwrites existing content.
            - Records are written in insertion order, so saving twice without changes produces identical files.
            - The unsaved changes marker is only cleared when the write succeeds.
        """
        target = path if path is not None else self._path

        if target is None:
            return Response.fail(
                detail="No file path was provided for saving the roster.",
                error=ErrorCode.INVALID_INPUT,
            )

        try:
            for student in self._students.values():
                if any(
                    FIELD_DELIMITER in field
                    for field in (student.name, student.email, student.course)
                ):
                    logger.warning(
                        "Record %d contains '%s' and will not load back correctly.",
                        student.id,
                        FIELD_DELIMITER,
                    )

            with open(target, "w", encoding="utf-8", newline="\n") as f:
                for student in self._students.values():
                    f.write(student.to_line() + "\n")

        except OSError as e:
            logger.error("Failed to write roster file %s: %s", target, e)

            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.IO_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            logger.info("Saved %d record(s) to %s.", len(self._students), target)

            return Response.succeed(detail="Roster successfully saved to disk.")

    # === data accessors ===

    def get_records(self) -> Response:
        """
        Fetches every record in the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the operation succeeded, even if the roster is empty.
                    - False for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): Copies of every record, in insertion order (may be empty).
                    - On failure:
                        - None

        Notes:
            - This method is read-only and never raises exceptions.
            - Rendering an empty roster is left to the caller.
        """
        try:
            records = [student.copy() for student in self._students.values()]

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "records": records,
                },
            )

    def sort_by_score_desc(self) -> Response:
        """
        Fetches every record ordered from the highest score to the lowest.

        Returns:
            Response: Same contract as `get_records()`, with "records" sorted by score in descending order.

        Notes:
            - The sort is stable: students with equal scores keep their insertion order.
            - The roster itself is not reordered.
        """
        records_response = self.get_records()

        if not records_response.success:
            return records_response

        records = sorted(
            records_response.data["records"], key=lambda s: s.score, reverse=True
        )

        return Response.succeed(
            data={
                "records": records,
            },
        )

    def find_student_by_id(self, id: int) -> Response:
        """
        Finds a `Student` by roll number.

        Args:
            id (int): The roll number of the `Student`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was found.
                    - False if no match is found or the lookup failed.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for other failures
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the matched `Student`.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - Mutating the returned record has no effect on the roster; use `update_student()` instead.
        """
        try:
            student = self._students.get(id)

            if student is None:
                return Response.fail(
                    detail=f"No student found with roll number {id}.",
                    error=ErrorCode.NOT_FOUND,
                    status_code=404,
                )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "record": student.copy(),
                },
            )

    def check_roll_number_available(self, id: int) -> Response:
        """
        Checks that no tracked record uses the given roll number.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the roll number is free.
                - detail (str | None): On failure, a human-readable description of the conflict.
                - error (ErrorCode | str | None): `ErrorCode.DUPLICATE_KEY` if the roll number is taken.
                - status_code (int | None): 200 on success, 409 if the roll number is taken.
        """
        if id in self._students:
            return Response.fail(
                detail=f"Duplicate roll number {id}. Cannot add student.",
                error=ErrorCode.DUPLICATE_KEY,
                status_code=409,
            )

        return Response.succeed()

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the roster as having unsaved changes.
        """
        self._unsaved_changes = True

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` to the roster.

        Args:
            student (Student): The `Student` to add. A copy is stored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was added.
                    - False if the roll number is already taken or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_KEY` if the roll number is already on the roster.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the roll number is taken
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the added `Student`.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - On failure the roster is left unchanged.
        """
        try:
            availability = self.check_roll_number_available(student.id)

            if not availability.success:
                return availability

            self._students[student.id] = student.copy()

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._mark_dirty()
            logger.debug("Added student %d.", student.id)

            return Response.succeed(
                detail="Student successfully added to the roster.",
                data={
                    "record": student.copy(),
                },
            )

    def remove_student(self, id: int) -> Response:
        """
        Removes the `Student` with the given roll number.

        Args:
            id (int): The roll number of the `Student` to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was removed.
                    - False if no match is found or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student`.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
        """
        try:
            removed = self._students.pop(id)

        except KeyError:
            return Response.fail(
                detail=f"No student found with roll number {id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._mark_dirty()
            logger.debug("Removed student %d.", id)

            return Response.succeed(
                detail="Student successfully removed from the roster.",
                data={
                    "record": removed,
                },
            )

    def update_student(self, id: int, student: Student) -> Response:
        """
        Replaces the stored record for a roll number with a new `Student`.

        Args:
            id (int): The roll number of the record being replaced.
            student (Student): The replacement record. Its roll number must equal `id`. A copy is stored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was replaced.
                    - False if no match is found, the roll numbers disagree, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no record exists for `id`.
                    - `ErrorCode.VALIDATION_FAILED` if `student.id` differs from `id`.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the stored replacement.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - The whole record is replaced; there is no partial update.
            - Roll numbers are never changed through this method, so the dictionary key and the record id always agree.
        """
        try:
            if id not in self._students:
                return Response.fail(
                    detail=f"No student found with roll number {id}.",
                    error=ErrorCode.NOT_FOUND,
                    status_code=404,
                )

            if student.id != id:
                return Response.fail(
                    detail=f"Replacement record has roll number {student.id}, expected {id}.",
                    error=ErrorCode.VALIDATION_FAILED,
                )

            self._students[id] = student.copy()

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._mark_dirty()
            logger.debug("Updated student %d.", id)

            return Response.succeed(
                detail="Student successfully updated.",
                data={
                    "record": student.copy(),
                },
            )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, id: object) -> bool:
        return id in self._students

    def __repr__(self) -> str:
        return f"Roster({self._path!r}, {len(self._students)} students)"
