# cli/path_utils.py

import os

DEFAULT_ROSTER_FILENAME = "students.txt"
ROSTER_FILE_ENV_VAR = "STUDENT_ROSTER_FILE"


def get_roster_path(user_input: str | None) -> str:
    """
    Picks the roster file path from user input, the environment, or the default location.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the environment and default are used.

    Returns:
        An unresolved path string. Precedence is user input, then `STUDENT_ROSTER_FILE`, then `students.txt` in the working directory.
    """
    if user_input is not None and user_input.strip():
        return user_input.strip()

    env_path = os.environ.get(ROSTER_FILE_ENV_VAR, "").strip()

    if env_path:
        return env_path

    return DEFAULT_ROSTER_FILENAME


def resolve_roster_path(user_input: str | None) -> str:
    """
    Produces an absolute roster file path.

    Args:
        user_input (str | None): An optional file path string. If None, the environment variable or default filename is used.

    Returns:
        A fully resolved path with `~` expanded.

    Notes:
        - The file itself is not created; `Roster.load()` treats a missing file as an empty roster.
    """
    roster_path = get_roster_path(user_input)

    return os.path.abspath(os.path.expanduser(roster_path))


def ensure_parent_dir(file_path: str) -> None:
    """
    Creates the directory that will hold `file_path`, including parents, if it does not exist.
    """
    parent = os.path.dirname(file_path)

    if parent:
        os.makedirs(parent, exist_ok=True)
