# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Roster application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across the menu modules to maintain consistent behavior and reduce duplication.
"""

import math
import time
from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("\nSelect an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            # retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_loading(label: str = "Loading", steps: int = 4, delay: float = 0.3) -> None:
    """
    Prints a short dotted progress indicator, pausing between dots.

    Args:
        label (str, optional): Text printed before the dots. Defaults to "Loading".
        steps (int, optional): Number of dots to print. Defaults to 4.
        delay (float, optional): Seconds to wait before each dot. A delay of 0 prints immediately.

    Notes:
        - Purely cosmetic; it runs synchronously and has no effect on roster data.
    """
    print(label, end="", flush=True)

    for _ in range(steps):
        if delay > 0:
            time.sleep(delay)
        print(".", end="", flush=True)

    print()


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_int_or_cancel()` and `prompt_float_or_cancel()` do the same, and re-prompt on unparseable input.
# - `confirm_action()` and its variants loop until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def confirm_discard_unsaved_changes() -> bool:
    return confirm_action(
        "There are unsaved changes to the roster. Exit without saving?"
    )


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_int_or_cancel(prompt: str) -> int | MenuSignal:
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if isinstance(response, MenuSignal):
            return response

        try:
            return int(response)

        except ValueError:
            print(f"\n[ERROR] '{response}' is not a whole number. Please try again.")


def prompt_float_or_cancel(prompt: str) -> float | MenuSignal:
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if isinstance(response, MenuSignal):
            return response

        try:
            value = float(response)

        except ValueError:
            print(f"\n[ERROR] '{response}' is not a number. Please try again.")
            continue

        if not math.isfinite(value):
            print(f"\n[ERROR] '{response}' is not a finite number. Please try again.")
            continue

        return value


# === system messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")
