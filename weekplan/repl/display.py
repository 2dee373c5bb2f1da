"""
FILE: weekplan/repl/display.py
PURPOSE: Display functions for the week, single tasks and operation outcomes
EXPORTS:
  - display_week() - Render the whole week as a table plus status line
  - display_task() - Show full details for one task
  - display_outcome() - Report an operation result
DEPENDENCIES:
  - rich (formatted output)
  - weekplan.formatting (BoardFormatter)
  - weekplan.core.models (Task, PlannerSnapshot, Outcome)
NOTES:
  - Accepts console as a parameter to avoid circular imports with main
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from ..core.models import Task, PlannerSnapshot, Outcome
from ..formatting import BoardFormatter

console = Console()


def display_week(snapshot: PlannerSnapshot, console_instance: Console = None) -> None:
    """Render every bucket, then the selection/clipboard status line."""
    if console_instance is None:
        console_instance = console

    console_instance.print(BoardFormatter.create_week_table(snapshot))
    console_instance.print(BoardFormatter.status_line(snapshot))


def display_task(
    task: Task,
    bucket_name: Optional[str],
    in_folder: bool,
    on_clipboard: bool = False,
    console_instance: Console = None,
) -> None:
    """
    Show full details for one task.

    Args:
        task: Task to display
        bucket_name: Owning bucket, or None for a task taken out by a cut
        in_folder: Whether the folder references this task
        on_clipboard: Whether the clipboard holds a snapshot of this task
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if bucket_name:
        location = bucket_name
    elif on_clipboard:
        location = "[red]clipboard (cut)[/red]"
    else:
        # Cut, then replaced on the clipboard before any paste
        location = "[red]unplaced[/red]"
    body = (
        f"[bold]{task.title}[/bold]\n"
        f"{task.description or '[dim]No description[/dim]'}\n\n"
        f"[dim]Points:[/dim] {task.points}\n"
        f"[dim]Bucket:[/dim] {location}\n"
        f"[dim]In folder:[/dim] {'yes' if in_folder else 'no'}"
    )
    console_instance.print(Panel(body, title=f"Task #{task.id}", expand=False))


def display_outcome(outcome: Outcome, console_instance: Console = None) -> None:
    """Green check for applied operations, dim note for no-ops."""
    if console_instance is None:
        console_instance = console

    if outcome.applied:
        console_instance.print(f"[green]✓ {outcome.message}[/green]")
    else:
        console_instance.print(f"[dim]{outcome.message}[/dim]")
