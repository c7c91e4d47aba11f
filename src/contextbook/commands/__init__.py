"""contextbook commands module.

Exports the ``Command`` base class, its result and error types, and every
concrete command.
"""
from __future__ import annotations

from contextbook.commands.base import Command, CommandError, CommandResult, Index
from contextbook.commands.commands import (
    ALL_COMMANDS,
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditContactDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)

__all__ = [
    # Base types
    "Command",
    "CommandError",
    "CommandResult",
    "Index",
    # Commands
    "AddCommand",
    "DeleteCommand",
    "EditCommand",
    "EditContactDescriptor",
    "FindCommand",
    "ListCommand",
    "ClearCommand",
    "HelpCommand",
    "ExitCommand",
    "ALL_COMMANDS",
]
