"""
FILE: weekplan/repl/commands/selection.py
PURPOSE: Selection command handlers for REPL
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_outcome
from .args import task_ids_arg


def handle_select_command(result: ParseResult) -> None:
    """
    Handle 'select' command - click a task, optionally with Ctrl held.

    Usage:
        select 3          (select only 3, or deselect it if it is the only selection)
        select 3 -m       (toggle 3, keep the rest of the selection)
        select 3,5,7 -m   (toggle several)
    """
    ids = task_ids_arg(result, "select <id>[,<id>...] [-m|--multi]")
    if ids is None:
        return

    multi = bool(result.flags.get("multi", False))
    if len(ids) > 1 and not multi:
        # Plain clicks on several cards would each replace the selection
        console.print("[yellow]Selecting several tasks implies --multi[/yellow]")
        multi = True

    store = repl_context.store
    for task_id in ids:
        display_outcome(store.select(task_id, multi), console)

    selected = store.selected_ids()
    if selected:
        console.print(
            f"[dim]Selection: {', '.join(f'#{i}' for i in selected)} "
            f"({store.selection_points()} pts)[/dim]"
        )


def handle_deselect_command(result: ParseResult) -> None:
    """
    Handle 'deselect' command - clear the selection.

    Usage:
        deselect
    """
    display_outcome(repl_context.store.clear_selection(), console)
