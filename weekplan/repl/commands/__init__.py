"""
FILE: weekplan/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

# Export all command handlers for easy importing
from .selection import (
    handle_select_command,
    handle_deselect_command,
)
from .clipboard import (
    handle_copy_command,
    handle_cut_command,
    handle_paste_command,
)
from .dragdrop import (
    handle_drag_command,
    handle_drop_command,
    handle_undrag_command,
)
from .folder import (
    handle_folder_command,
)
from .editing import (
    handle_edit_command,
    handle_set_command,
    handle_save_command,
    handle_cancel_command,
)
from .board import (
    handle_ls_command,
    handle_show_command,
    handle_status_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_select_command",
    "handle_deselect_command",
    "handle_copy_command",
    "handle_cut_command",
    "handle_paste_command",
    "handle_drag_command",
    "handle_drop_command",
    "handle_undrag_command",
    "handle_folder_command",
    "handle_edit_command",
    "handle_set_command",
    "handle_save_command",
    "handle_cancel_command",
    "handle_ls_command",
    "handle_show_command",
    "handle_status_command",
    "handle_help_command",
    "handle_clear_command",
]
