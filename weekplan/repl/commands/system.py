"""
FILE: weekplan/repl/commands/system.py
PURPOSE: System command handlers for REPL
"""

from ..main import console
from ..parser import ParseResult


def handle_help_command(result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]ls [<bucket>] [--json|--raw][/cyan]   Show the week (or one bucket)
  [cyan]show <id>[/cyan]                 Full details for a task
  [cyan]status[/cyan]                    Selection, clipboard and drag state
  [cyan]select <id>[,<id>...] [-m][/cyan]  Select a task (-m toggles, keeps others)
  [cyan]deselect[/cyan]                  Clear the selection
  [cyan]copy[/cyan]                      Copy the selection (paste as often as you like)
  [cyan]cut[/cyan]                       Cut the selection (paste once to move it)
  [cyan]paste <bucket>[/cyan]            Paste the clipboard at the end of a bucket
  [cyan]drag <id>[/cyan]                 Pick up a task (or the whole selection)
  [cyan]drop <bucket>|folder[/cyan]      Drop what you are dragging
  [cyan]undrag[/cyan]                    Let go without dropping
  [cyan]folder [ls|add|rm <id>][/cyan]   Billing folder (add uses the selection)
  [cyan]edit <id>[/cyan]                 Open the edit form
  [cyan]set <field> <value>[/cyan]       Change title, description or points
  [cyan]save[/cyan] / [cyan]cancel[/cyan]             Close the edit form
  [cyan]help[/cyan]                      Show this help
  [cyan]clear[/cyan]                     Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]             Exit REPL

[bold cyan]Examples:[/bold cyan]

  [dim]select 1
  select 2 -m
  cut
  paste wed
  drag 3
  drop folder
  edit 4 --title "Code review" --points 5[/dim]

[dim]Bucket names can be shortened to any unique prefix (mon, tue, ...).[/dim]
"""
    console.print(help_text)


def handle_clear_command(result: ParseResult) -> None:
    """
    Handle 'clear' command - clear the screen.

    Args:
        result: Parsed command (unused)
    """
    console.clear()
