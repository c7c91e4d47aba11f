"""contextbook formatter module.

Exports the ``CommandFormatter`` class and its convenience functions.
"""
from __future__ import annotations

from contextbook.formatter.formatter import CommandFormatter, format_command, format_contact_args

__all__ = ["CommandFormatter", "format_command", "format_contact_args"]
