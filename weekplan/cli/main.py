"""
FILE: weekplan/cli/main.py
PURPOSE: Typer-based CLI entry point for the weekly planner
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - show() - Render the starting week
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - weekplan.config (settings from environment)
  - weekplan.logging_setup (logging configuration)
  - weekplan.repl (interactive mode)
NOTES:
  - Running with no command launches the REPL
  - State lives only for the session; one-shot commands see the seeded week
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from ..config import load_settings
from ..logging_setup import setup_logging

# Typer app setup
app = typer.Typer(
    name="weekplan",
    help="Terminal weekly planner with clipboard, drag-and-drop and a billing folder",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Default callback - configures logging, launches REPL when no command is specified.
    """
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    version,
    help,
    repl,
    show,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
