"""
FILE: weekplan/repl/commands/board.py
PURPOSE: Board viewing command handlers for REPL (ls, show, status)
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_week, display_task
from ...formatting import BoardFormatter, resolve_bucket_name
from .args import task_id_arg


def handle_ls_command(result: ParseResult) -> None:
    """
    Handle 'ls' command - show the week or a single bucket.

    Usage:
        ls
        ls wed
        ls --json
        ls --raw
    """
    snap = repl_context.store.snapshot()

    if result.flags.get("json"):
        console.print_json(BoardFormatter.to_json(snap))
        return
    if result.flags.get("raw"):
        for line in BoardFormatter.to_raw_lines(snap):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        return

    if result.args:
        bucket = resolve_bucket_name(" ".join(result.args), repl_context.store.bucket_names)
        view = snap.bucket(bucket)
        if not view.tasks:
            console.print(f"[dim]{bucket} is empty[/dim]")
            return
        console.print(BoardFormatter.create_bucket_table(view, snap.selected_ids))
        console.print(f"[dim]Total: {view.total_points} pts[/dim]")
        return

    display_week(snap, console)


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - full details for one task.

    Usage:
        show 3
    """
    task_id = task_id_arg(result, "show <id>")
    if task_id is None:
        return

    store = repl_context.store
    task = store.require_task(task_id)
    on_clipboard = task_id in {t.id for t in store.clipboard_tasks()}
    display_task(
        task,
        store.owner_of(task_id),
        task_id in store.folder_ids(),
        on_clipboard,
        console,
    )


def handle_status_command(result: ParseResult) -> None:
    """
    Handle 'status' command - selection, clipboard, drag and edit state.

    Usage:
        status
    """
    console.print(BoardFormatter.status_line(repl_context.store.snapshot()))
