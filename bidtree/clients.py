"""Password-gated console for viewing and changing clients' service choices."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

PASSWORD = "password"
MAX_FAILED_LOGINS = 3
EXIT_CHOICE = 3

CLIENT_NAMES = (
    "Bob Jones",
    "Sarah Davis",
    "Amy Friendly",
    "Johnny Smith",
    "Carol Spears",
)
DEFAULT_CHOICES = (1, 2, 1, 1, 2)

_HEADER = "   Clients Name      Service Selected (1 = Brokerage, 2 = Retirement)"
_MENU = (
    "What would you like to do?\n"
    "DISPLAY the client list (enter 1)\n"
    "CHANGE a client's choice (enter 2)\n"
    "Exit the program.. (enter 3)"
)


def check_user_permission_access(password: str) -> bool:
    """Return True if ``password`` grants access."""
    return password == PASSWORD


def display_info(choices: Sequence[int]) -> str:
    """Render the numbered client list with each client's service choice."""
    lines = [_HEADER]
    lines.extend(
        f"{number}. {name} selected option {choice}"
        for number, (name, choice) in enumerate(zip(CLIENT_NAMES, choices), start=1)
    )
    return "\n".join(lines)


def change_customer_choice(
    choices: Sequence[int], client_number: int, service: int
) -> list[int]:
    """Return ``choices`` with client ``client_number`` (1-based) set to ``service``.

    A client number outside the list leaves the choices unchanged.
    """
    updated = list(choices)
    if 1 <= client_number <= len(updated):
        updated[client_number - 1] = service
    return updated


def _first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def _read_int(prompt: str) -> int:
    print(prompt)
    try:
        return int(_first_token(input()))
    except ValueError:
        return 0


def _login() -> bool:
    failed = 0
    while True:
        if failed > MAX_FAILED_LOGINS:
            print("Max login attempts reached")
            return False
        print("Enter your username: ")
        _first_token(input())
        print("Enter your password: ")
        attempt = _first_token(input())
        if check_user_permission_access(attempt):
            return True
        print("Invalid Password. Please try again")
        failed += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Log in, then show or change client choices until the user exits."""
    try:
        if not _login():
            return 0
    except EOFError:
        return 0

    choices = list(DEFAULT_CHOICES)
    while True:
        print()
        try:
            choice = _read_int(_MENU)
        except EOFError:
            break
        if choice == 1:
            print("You chose 1")
            print()
            print(display_info(choices))
        elif choice == 2:
            print("You chose 2")
            print()
            print(display_info(choices))
            print()
            try:
                client_number = _read_int(
                    "Enter the number of the client that you wish to change "
                )
                service = _read_int(
                    "Please enter the client's new service choice "
                    "(1 = Brokerage, 2 = Retirement) "
                )
            except EOFError:
                break
            choices = change_customer_choice(choices, client_number, service)
        if choice == EXIT_CHOICE:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())