"""
FILE: weekplan/repl/commands/args.py
PURPOSE: Argument helpers shared by REPL command handlers
"""

from typing import List, Optional

from ..main import console
from ..parser import ParseResult
from ...formatting import parse_task_ids


def task_ids_arg(result: ParseResult, usage: str) -> Optional[List[int]]:
    """
    Read comma-separated task ids from the first positional argument.

    Prints an error with usage and returns None when missing or invalid.
    """
    if not result.args:
        console.print("[red]Error:[/red] Task ID required")
        console.print(f"[dim]Usage: {usage}[/dim]")
        return None
    try:
        ids = parse_task_ids(",".join(result.args))
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid task ID: {' '.join(result.args)}")
        return None
    if not ids:
        console.print("[red]Error:[/red] Task ID required")
        return None
    return ids


def task_id_arg(result: ParseResult, usage: str) -> Optional[int]:
    """Like task_ids_arg, but exactly one id."""
    ids = task_ids_arg(result, usage)
    if ids is None:
        return None
    if len(ids) > 1:
        console.print("[red]Error:[/red] Only one task ID allowed")
        console.print(f"[dim]Usage: {usage}[/dim]")
        return None
    return ids[0]
