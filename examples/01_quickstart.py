#!/usr/bin/env python3
"""Example: Quickstart — contextbook

Minimal working example: parse command lines, execute them against a
contact model, filter the view and render commands back to text.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install contextbook
"""
from __future__ import annotations

import contextbook
from contextbook.parser import ParseError

SESSION = [
    "add n/Alice Pauline p/94351253 e/alice@example.com note/Met at the conference t/friends",
    "add n/Benson Meier p/98765432 e/johnd@example.com t/owesMoney t/friends",
    "add n/Carl Kurz p/95352563 e/heinz@example.com",
    "find t/owesMoney",
    "edit 1 p/91234567 t/",
    "list",
]


def main() -> None:
    print(f"contextbook version: {contextbook.__version__}")

    # Step 1: Parse a command line into an immutable command object
    command = contextbook.parse_input(SESSION[0])
    print(f"Parsed {type(command).__name__}: {command.contact}")

    # Step 2: Render it back in canonical form
    print(f"Canonical: {contextbook.format_command(command)}")

    # Step 3: Run a whole session through a ContactBook
    book = contextbook.ContactBook()
    for line in SESSION:
        result = book.execute(line)
        print(f"> {line}\n  {result.feedback_to_user}")

    # Step 4: Inspect the filtered view
    for position, contact in enumerate(book.shown, start=1):
        print(f"  {position}. {contact}")

    # Step 5: Invalid input raises a ParseError with usage text
    try:
        contextbook.parse_input("add n/Dana")
    except ParseError as exc:
        print(f"\nRejected: {exc.message.splitlines()[0]}")


if __name__ == "__main__":
    main()
