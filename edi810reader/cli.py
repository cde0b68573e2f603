"""Interactive menu for viewing an EDI 810 invoice."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from enum import IntEnum

from .parser import DEFAULT_INPUT_PATH, InvoiceFileError, load_invoice
from .render import (
    DEFAULT_OUTPUT_PATH,
    ElementNotFoundError,
    render_element_table,
    render_invoice,
    write_invoice,
)

Reader = Callable[[], str]
Writer = Callable[[str], object]

_CLEAR_SCREEN = "\033[2J\033[H"

_MENU = (
    "Please enter a selection from the menu below.\n\n"
    "1. View human-readable invoice from EDI 810 file on the CONSOLE.\n"
    "2. View human-readable invoice from EDI 810 file in a BINARY FILE.\n"
    "3. View machine-readable invoice from EDI 810 file on the CONSOLE.\n"
    "4. Quit.\n\n"
    "Selection: "
)


class MenuChoice(IntEnum):
    """Entries of the main menu."""

    VIEW_HUMAN_INVOICE_ON_CONSOLE = 1
    OUTPUT_HUMAN_INVOICE_TO_FILE = 2
    VIEW_MACHINE_INVOICE = 3
    QUIT = 4


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def prompt_menu_choice(read: Reader | None = None, write: Writer | None = None) -> MenuChoice:
    """Show the menu and read a selection until a valid one is given."""
    read = read or input
    write = write or _stdout_write
    low, high = min(MenuChoice), max(MenuChoice)
    write(_MENU)
    while True:
        answer = read().strip()
        try:
            return MenuChoice(int(answer))
        except ValueError:
            write(f"Invalid input. Please enter an integer between {low.value} and {high.value}: ")


def prompt_yes_no(read: Reader | None = None, write: Writer | None = None) -> bool:
    """Read a Y/N answer, asking again until one is given."""
    read = read or input
    write = write or _stdout_write
    while True:
        answer = read().strip().upper()[:1]
        if answer in ("Y", "N"):
            write("\n")
            return answer == "Y"
        write('Invalid input. Please enter "Y" or "N": ')


def main(argv: list[str] | None = None) -> int:
    """Run the interactive invoice viewer; returns the exit status."""
    parser = argparse.ArgumentParser(description="Read an EDI 810 invoice.")
    parser.add_argument("--input", default=DEFAULT_INPUT_PATH, help="invoice file to read")
    parser.add_argument("--output", default=DEFAULT_OUTPUT_PATH, help="file for option 2")
    args = parser.parse_args(argv)
    write = _stdout_write

    try:
        try:
            elements = load_invoice(args.input)
        except InvoiceFileError as exc:
            write(f"{exc}\n")
            write("Try one more time and press any key: ")
            input()
            try:
                elements = load_invoice(args.input)
            except InvoiceFileError:
                write(
                    "Please ensure the input file is correctly placed and named, "
                    "then re-run the program.\n"
                )
                return 1

        write("Kroger EDI 810 Invoice Reader and Generator\n")
        write("-------------------------------------------\n\n")

        again = True
        while again:
            choice = prompt_menu_choice(input, write)
            if choice is MenuChoice.QUIT:
                write("Program terminating...\n")
                return 0
            write(_CLEAR_SCREEN)
            if choice is MenuChoice.VIEW_HUMAN_INVOICE_ON_CONSOLE:
                write(render_invoice(elements))
            elif choice is MenuChoice.OUTPUT_HUMAN_INVOICE_TO_FILE:
                target = write_invoice(elements, args.output)
                write(
                    "File output complete. If a previous file existed, it has been "
                    f'overwritten. See "{target}".\n'
                )
            else:
                write(render_element_table(elements))
            write("\n\n\nWOULD YOU LIKE TO MAKE ANOTHER MENU CHOICE? (Y/N): ")
            again = prompt_yes_no(input, write)
            write("\n\n")
    except ElementNotFoundError as exc:
        write(f"{exc}\n")
        return 1
    except EOFError:
        write("\n")
        return 1

    write("\n\n")
    return 0