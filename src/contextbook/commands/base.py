"""Base types shared by every contextbook command.

A command is an immutable value holding only what it needs to run.  It
never caches model state: ``execute`` reads and mutates the model it is
given, validating fully before the first mutation so that a failing
command leaves the model untouched.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from contextbook.model.model import ModelManager


class CommandError(Exception):
    """Raised when a well-formed command cannot be executed."""


@dataclass(frozen=True, slots=True)
class Index:
    """A one-based position in the filtered contact view."""

    one_based: int

    def __post_init__(self) -> None:
        if self.one_based < 1:
            raise ValueError(f"Index must be positive, got {self.one_based}")

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of executing a command.

    Parameters
    ----------
    feedback_to_user:
        Message to show the user.
    show_help:
        Whether the caller should display help.
    exit:
        Whether the caller should end the session.
    """

    feedback_to_user: str
    show_help: bool = field(default=False)
    exit: bool = field(default=False)


class Command(ABC):
    """Abstract base for all commands.

    Subclasses set ``COMMAND_WORD`` and ``MESSAGE_USAGE`` and implement
    ``execute``.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: "ModelManager") -> CommandResult:
        """Run the command against ``model``.

        Raises
        ------
        CommandError
            If the command cannot be applied to the current model state.
        """
