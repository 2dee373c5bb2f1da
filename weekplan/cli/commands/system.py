"""
FILE: weekplan/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show Weekplan version."""
    console.print(f"Weekplan v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]Weekplan[/bold cyan] - Terminal weekly planner\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  weekplan [command] [options]")
    console.print("  weekplan                  [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("repl", "Launch interactive REPL", "weekplan repl"),
        ("show", "Render the starting week", "weekplan show [--bucket Monday] [--json|--raw]"),
        ("version", "Show version", "weekplan version"),
        ("help", "Show this help message", "weekplan help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Environment:[/bold]")
    console.print("  [yellow]WEEKPLAN_BUCKETS[/yellow]    Comma-separated bucket names (default Monday..Sunday)")
    console.print("  [yellow]WEEKPLAN_SEED[/yellow]       demo (default) or empty")
    console.print("  [yellow]WEEKPLAN_LOG_LEVEL[/yellow]  Console log level (default WARNING)")
    console.print("  [yellow]WEEKPLAN_LOG_FILE[/yellow]   Write a full debug log to this file\n")

    console.print("[dim]Inside the REPL, type 'help' for planner commands.[/dim]")


@app.command()
def repl():
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - Selection, clipboard, drag-and-drop, folder and edit commands
    - Exit with Ctrl+D or type 'exit'

    Example:
        weekplan repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main()
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
