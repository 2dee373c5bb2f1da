"""
FILE: weekplan/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - BoardFormatter: Class for rendering snapshots as rich tables, JSON or text
  - parse_task_ids: Parse comma-separated task IDs
  - resolve_bucket_name: Match user input to a bucket name
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - typing (type hints)
  - weekplan.core.models (Task, BucketView, PlannerSnapshot)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
  - Renders only from snapshots; never touches the store
"""

import json
from typing import Any, Dict, Iterable, List, Sequence

from rich.table import Table
from rich.text import Text

from .core.models import Task, BucketView, PlannerSnapshot
from .core.exceptions import BucketNotFoundError, InvalidInputError


SELECTED_STYLE = "bold black on bright_cyan"
CUT_STYLE = "red"
COPY_STYLE = "blue"


class BoardFormatter:
    """Centralized planner display formatting."""

    @staticmethod
    def task_card(task: Task, selected: bool = False) -> Text:
        """One task as a compact card line: '#id title (pts)'."""
        card = Text()
        card.append(f"#{task.id} ", style="cyan")
        card.append(task.title or "<untitled>", style=SELECTED_STYLE if selected else "white")
        card.append(f" ({task.points} pts)", style="dim")
        return card

    @staticmethod
    def create_week_table(snapshot: PlannerSnapshot, title: str = "Week") -> Table:
        """
        Create a Rich table with one column per bucket.

        Args:
            snapshot: Store snapshot to render
            title: Table title

        Returns:
            Rich Table with task cards and per-bucket point totals in the footer
        """
        selected = set(snapshot.selected_ids)
        table = Table(title=title, show_header=True, header_style="bold cyan", show_footer=True)
        for view in snapshot.buckets:
            table.add_column(
                view.name,
                footer=f"Total: {view.total_points} pts",
                style="white",
                overflow="fold",
            )

        rows = max((len(view.tasks) for view in snapshot.buckets), default=0)
        for i in range(rows):
            row = []
            for view in snapshot.buckets:
                if i < len(view.tasks):
                    task = view.tasks[i]
                    row.append(BoardFormatter.task_card(task, task.id in selected))
                else:
                    row.append(Text(""))
            table.add_row(*row)
        return table

    @staticmethod
    def create_bucket_table(view: BucketView, selected_ids: Iterable[int] = ()) -> Table:
        """Detailed table for a single bucket."""
        selected = set(selected_ids)
        table = Table(title=view.name, show_header=True, header_style="bold cyan")
        table.add_column("ID", style="cyan", width=6, no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Points", style="magenta", justify="right")
        table.add_column("Description", style="dim")

        for task in view.tasks:
            marker = "● " if task.id in selected else ""
            table.add_row(f"{marker}{task.id}", task.title, str(task.points), task.description)
        return table

    @staticmethod
    def create_folder_table(snapshot: PlannerSnapshot) -> Table:
        """Table of folder entries with the total in the title."""
        table = Table(
            title=f"Billing folder ({len(snapshot.folder)} tasks, {snapshot.folder_points} pts)",
            show_header=True,
            header_style="bold green",
        )
        table.add_column("ID", style="cyan", width=6, no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Points", style="magenta", justify="right")
        table.add_column("Description", style="dim")

        for task in snapshot.folder:
            table.add_row(str(task.id), task.title, str(task.points), task.description)
        return table

    @staticmethod
    def status_line(snapshot: PlannerSnapshot) -> str:
        """One-line summary of selection, clipboard and drag state (rich markup)."""
        parts = [
            f"{len(snapshot.selection)} selected ({snapshot.selection_points} pts)",
        ]
        if snapshot.clipboard:
            style = CUT_STYLE if snapshot.clipboard_mode == "cut" else COPY_STYLE
            ids = ",".join(str(t.id) for t in snapshot.clipboard)
            parts.append(f"[{style}]clipboard: {snapshot.clipboard_mode} {ids}[/{style}]")
        else:
            parts.append("[dim]clipboard empty[/dim]")
        if snapshot.drag is not None:
            ids = ",".join(str(t.id) for t in snapshot.drag.tasks)
            parts.append(f"[yellow]dragging {ids}[/yellow]")
        if snapshot.editing_task_id is not None:
            parts.append(f"[magenta]editing #{snapshot.editing_task_id}[/magenta]")
        return " | ".join(parts)

    @staticmethod
    def to_json_dict(snapshot: PlannerSnapshot) -> Dict[str, Any]:
        """
        Convert a snapshot to a JSON-serializable dict.

        Args:
            snapshot: Snapshot to serialize

        Returns:
            Dictionary with buckets (in display order), folder, selection and clipboard
        """
        return {
            "version": snapshot.version,
            "buckets": {
                view.name: [t.to_dict() for t in view.tasks] for view in snapshot.buckets
            },
            "folder": [t.to_dict() for t in snapshot.folder],
            "selection": list(snapshot.selected_ids),
            "clipboard": {
                "mode": snapshot.clipboard_mode,
                "tasks": [t.to_dict() for t in snapshot.clipboard],
            },
        }

    @staticmethod
    def to_json(snapshot: PlannerSnapshot) -> str:
        return json.dumps(BoardFormatter.to_json_dict(snapshot), indent=2)

    @staticmethod
    def to_raw_lines(snapshot: PlannerSnapshot) -> List[str]:
        """
        Convert a snapshot to plain text lines.

        Returns:
            One header line per bucket followed by one line per task
        """
        selected = set(snapshot.selected_ids)
        lines = []
        for view in snapshot.buckets:
            lines.append(f"{view.name} ({view.total_points} pts)")
            for task in view.tasks:
                marker = "*" if task.id in selected else " "
                lines.append(f"  {task.id}: [{marker}] {task.title} ({task.points})")
        return lines


def parse_task_ids(id_string: str) -> List[int]:
    """
    Parse comma-separated task IDs.

    Args:
        id_string: Comma-separated string of IDs (e.g., "1,2,3")

    Returns:
        List of integers

    Raises:
        ValueError: If any ID is not a valid integer
    """
    ids = [part.strip().lstrip("#") for part in id_string.split(",")]
    return [int(part) for part in ids if part]


def resolve_bucket_name(name: str, bucket_names: Sequence[str]) -> str:
    """
    Match user input to one of the bucket names.

    Exact matches win, then case-insensitive matches, then a unique
    case-insensitive prefix ("tue" -> "Tuesday").

    Raises:
        BucketNotFoundError: If nothing matches
        InvalidInputError: If the prefix matches more than one bucket
    """
    if name in bucket_names:
        return name
    lowered = name.strip().lower()
    if not lowered:
        raise BucketNotFoundError(name)
    for bucket in bucket_names:
        if bucket.lower() == lowered:
            return bucket
    matches = [bucket for bucket in bucket_names if bucket.lower().startswith(lowered)]
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise InvalidInputError(
            f"'{name}' is ambiguous. Could be: {', '.join(matches)}"
        )
    raise BucketNotFoundError(name)
