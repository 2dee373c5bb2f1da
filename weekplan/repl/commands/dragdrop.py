"""
FILE: weekplan/repl/commands/dragdrop.py
PURPOSE: Drag-and-drop command handlers for REPL
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_outcome
from ...core.constants import FOLDER_TARGET
from ...core.models import MultiDrag
from ...formatting import resolve_bucket_name
from .args import task_id_arg


def handle_drag_command(result: ParseResult) -> None:
    """
    Handle 'drag' command - pick up a task (and the selection it belongs to).

    Usage:
        drag 3
    """
    task_id = task_id_arg(result, "drag <id>")
    if task_id is None:
        return

    payload = repl_context.store.begin_drag(task_id)
    if payload is None:
        console.print(f"[dim]Task {task_id} is not in any bucket[/dim]")
        return

    ids = ", ".join(f"#{t.id}" for t in payload.tasks)
    if isinstance(payload, MultiDrag):
        console.print(f"[yellow]Dragging {len(payload.tasks)} selected tasks:[/yellow] {ids}")
    else:
        console.print(f"[yellow]Dragging[/yellow] {ids}")
    console.print("[dim]Drop with: drop <bucket> | drop folder[/dim]")


def handle_drop_command(result: ParseResult) -> None:
    """
    Handle 'drop' command - drop the dragged tasks on a bucket or the folder.

    Usage:
        drop friday
        drop folder
    """
    if not result.args:
        console.print("[red]Error:[/red] Drop target required")
        console.print("[dim]Usage: drop <bucket> | drop folder[/dim]")
        return

    store = repl_context.store
    target = " ".join(result.args)
    if target.lower() == FOLDER_TARGET and FOLDER_TARGET not in store.bucket_names:
        display_outcome(store.drop_on_folder(), console)
        return

    bucket = resolve_bucket_name(target, store.bucket_names)
    display_outcome(store.drop_on_bucket(bucket), console)


def handle_undrag_command(result: ParseResult) -> None:
    """
    Handle 'undrag' command - release the drag outside any drop zone.

    Usage:
        undrag
    """
    display_outcome(repl_context.store.cancel_drag(), console)
