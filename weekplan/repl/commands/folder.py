"""
FILE: weekplan/repl/commands/folder.py
PURPOSE: Billing folder command handlers for REPL
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_outcome
from ...formatting import BoardFormatter, parse_task_ids


def handle_folder_command(result: ParseResult) -> None:
    """
    Handle 'folder' command - show the folder or change its contents.

    Usage:
        folder              (list folder entries)
        folder add          (add the selection to the folder)
        folder rm 3         (remove an entry; the task stays in its bucket)
        folder rm 3,5
    """
    store = repl_context.store
    subcommand = result.args[0].lower() if result.args else "ls"

    if subcommand == "ls":
        snap = store.snapshot()
        if not snap.folder:
            console.print("[dim]Folder is empty. Use 'folder add' or 'drop folder'.[/dim]")
            return
        console.print(BoardFormatter.create_folder_table(snap))
        return

    if subcommand == "add":
        display_outcome(store.add_selection_to_folder(), console)
        return

    if subcommand == "rm":
        if len(result.args) < 2:
            console.print("[red]Error:[/red] Task ID required")
            console.print("[dim]Usage: folder rm <id>[,<id>...][/dim]")
            return
        try:
            ids = parse_task_ids(",".join(result.args[1:]))
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid task ID: {' '.join(result.args[1:])}")
            return
        for task_id in ids:
            display_outcome(store.remove_from_folder(task_id), console)
        return

    console.print(f"[red]Unknown folder subcommand:[/red] {subcommand}")
    console.print("[dim]Usage: folder [ls|add|rm <id>][/dim]")
