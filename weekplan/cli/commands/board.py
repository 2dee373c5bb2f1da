"""
FILE: weekplan/cli/commands/board.py
PURPOSE: Board rendering command (show)
"""

import json
from typing import Optional

import typer

from ..main import app, console, error_console
from ...config import load_settings
from ...core.exceptions import WeekplanError
from ...core.seed import store_from_settings
from ...formatting import BoardFormatter, resolve_bucket_name


@app.command()
def show(
    bucket: Optional[str] = typer.Option(None, "--bucket", "-b", help="Show a single bucket"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Render the starting week.

    Example:
        weekplan show
        weekplan show --bucket tue
        weekplan show --json
    """
    try:
        store = store_from_settings(load_settings())
        snap = store.snapshot()

        if json_output:
            data = BoardFormatter.to_json_dict(snap)
            if bucket:
                name = resolve_bucket_name(bucket, store.bucket_names)
                data = {"bucket": name, "tasks": data["buckets"][name]}
            console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
            return

        if bucket:
            name = resolve_bucket_name(bucket, store.bucket_names)
            view = snap.bucket(name)
            if raw:
                for task in view.tasks:
                    console.print(f"{task.id}: {task.title} ({task.points})", markup=False, highlight=False, soft_wrap=True)
                return
            console.print(BoardFormatter.create_bucket_table(view))
            console.print(f"\n[dim]Total: {view.total_points} pts[/dim]")
            return

        if raw:
            for line in BoardFormatter.to_raw_lines(snap):
                console.print(line, markup=False, highlight=False, soft_wrap=True)
            return

        console.print(BoardFormatter.create_week_table(snap))

    except WeekplanError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
