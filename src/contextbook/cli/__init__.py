"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations. Library modules must never import from here.
"""
from __future__ import annotations
