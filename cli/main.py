# cli/main.py

"""
Main Menu for the Roster CLI.

Parses command-line options, loads the roster file once at startup, runs the interactive menu, and saves the roster
when the user chooses "Save & Exit".
"""

import argparse
import functools
import logging
from typing import cast

import cli.menu_helpers as helpers
import cli.students_menu as students_menu
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import ROSTER_FILE_ENV_VAR, ensure_parent_dir, resolve_roster_path
from models.roster import Roster

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Manage a roster of student records stored in a flat text file.",
    )
    parser.add_argument(
        "--file",
        dest="file_path",
        default=None,
        help=f"Roster file to load and save (default: ${ROSTER_FILE_ENV_VAR} or ./students.txt).",
    )
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="Skip the loading indicator when adding or updating students.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Console entry point.

    Args:
        argv (list[str] | None): Command-line arguments, excluding the program name. Defaults to `sys.argv[1:]`.

    Notes:
        - Ctrl+C or end of input leaves the program without saving.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    roster_path = resolve_roster_path(args.file_path)
    logger.debug("Using roster file %s", roster_path)

    try:
        run_cli(roster_path, animate=not args.no_animation)

    except (KeyboardInterrupt, EOFError):
        print("\n\nInterrupted. Unsaved changes were discarded.")


def load_roster(roster_path: str, animate: bool = True) -> tuple[Roster, bool]:
    """
    Loads the roster file, falling back to an empty in-memory roster if the file cannot be read.

    Args:
        roster_path (str): The resolved roster file path.
        animate (bool, optional): If True, shows the loading indicator first. Defaults to True.

    Returns:
        A `(roster, load_failed)` pair. If loading failed, the roster is empty and bound to `roster_path`.

    Notes:
        - Skipped malformed lines are reported to the user but do not stop the program.
        - After a failed load, "Save & Exit" asks before replacing the unreadable file.
    """
    if animate:
        helpers.display_loading("Loading roster")

    roster_response = Roster.load(roster_path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(
            "Continuing with an empty roster. The file will not be overwritten without confirmation."
        )
        return Roster(roster_path), True

    for line_number, reason in roster_response.data["skipped"]:
        print(f"[WARNING] Skipped line {line_number}: {reason}")

    print(f"... {roster_response.detail}")

    return roster_response.data["roster"], False


def run_cli(roster_path: str, animate: bool = True) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        roster_path (str): The resolved roster file path.
        animate (bool, optional): If True, shows the loading indicator for add and update. Defaults to True.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    roster, load_failed = load_roster(roster_path, animate)

    title = formatters.format_banner_text("STUDENT RECORD MANAGER")
    options = [
        ("Add Student", functools.partial(students_menu.add_student, animate=animate)),
        ("View All Students", students_menu.view_all_students),
        ("Search Student by Roll No", students_menu.search_student),
        ("Delete Student", students_menu.delete_student),
        (
            "Update Student",
            functools.partial(students_menu.update_student, animate=animate),
        ),
        ("Sort by Score (highest first)", students_menu.sort_students_by_score),
    ]
    zero_option = "Save & Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            if save_and_exit(roster, load_failed):
                return

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def save_and_exit(roster: Roster, load_failed: bool = False) -> bool:
    """
    Saves the roster and reports whether the program should exit.

    Args:
        roster (Roster): The active `Roster`.
        load_failed (bool, optional): True if the roster file could not be read at startup. Defaults to False.

    Returns:
        True if the roster was saved, or if the user chose to exit without saving.
        False if the user wants to return to the menu.

    Notes:
        - If the file could not be read at startup, the user must confirm before it is overwritten. Declining
          leaves the file untouched.
        - A failed save never terminates the session on its own; the user decides whether to retry, return, or discard.
    """
    if load_failed and not helpers.confirm_action(
        "The roster file could not be read at startup. Overwrite it with the roster in memory?"
    ):
        return exit_without_saving(roster)

    while True:
        try:
            ensure_parent_dir(cast(str, roster.path))
        except OSError as e:
            logger.error("Could not create directory for %s: %s", roster.path, e)

        roster_response = roster.save()

        if roster_response.success:
            print(f"\n{roster_response.detail}")
            exit_program()
            return True

        helpers.display_response_failure(roster_response)

        if helpers.confirm_action("Would you like to try saving again?"):
            continue

        return exit_without_saving(roster)


def exit_without_saving(roster: Roster) -> bool:
    if not roster.has_unsaved_changes or helpers.confirm_discard_unsaved_changes():
        exit_program()
        return True

    helpers.returning_to("Main menu")
    return False


def exit_program() -> None:
    exit_banner = formatters.format_banner_text("Goodbye!")
    print(f"\n{exit_banner}\n")


if __name__ == "__main__":
    main()
