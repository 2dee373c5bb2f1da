"""
FILE: weekplan/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .board import (
    show,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "show",
    "version",
    "help",
    "repl",
]
