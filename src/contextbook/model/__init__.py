"""contextbook model module.

Exports ``ModelManager``, the ``ContactList`` it owns, and the model's
error types.
"""
from __future__ import annotations

from contextbook.model.model import (
    ContactList,
    ContactNotFoundError,
    DuplicateContactError,
    ModelManager,
)

__all__ = [
    "ModelManager",
    "ContactList",
    "DuplicateContactError",
    "ContactNotFoundError",
]
