"""
FILE: weekplan/repl/main.py
PURPOSE: Interactive REPL for the weekly planner with prompt-toolkit
EXPORTS:
  - REPLContext (session state holding the task store)
  - repl_context (module-level session)
  - execute_command(result) -> bool
  - run_repl(store) - Main REPL loop
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - weekplan.core (TaskStore, snapshots, exceptions)
  - weekplan.repl.parser (command parsing)
  - weekplan.repl.completer (autocomplete)
NOTES:
  - The REPL is a presentation layer: each command calls one store operation
    and re-renders from the resulting snapshot
  - The context subscribes to the store and keeps the latest snapshot for
    the prompt and bottom toolbar
  - Ctrl+D or "exit"/"quit" to exit
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console

from ..config import load_settings
from ..core.exceptions import WeekplanError
from ..core.models import PlannerSnapshot
from ..core.seed import demo_store, store_from_settings
from ..core.store import TaskStore
from ..formatting import BoardFormatter
from .parser import parse_command, ParseResult
from .completer import create_completer

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()


# --- REPL Context (Session State) ---


@dataclass
class REPLContext:
    """
    Session state for the REPL.

    Attributes:
        store: The task store all commands operate on
        latest: Most recent snapshot pushed by the store
    """
    store: TaskStore = field(default_factory=demo_store)
    latest: Optional[PlannerSnapshot] = None
    _unsubscribe: Optional[Callable[[], None]] = field(default=None, repr=False)

    def __post_init__(self):
        self.attach(self.store)

    def attach(self, store: TaskStore) -> None:
        """Switch to a store and follow its snapshots."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.store = store
        self.latest = store.snapshot()
        self._unsubscribe = store.subscribe(self._on_snapshot)

    def _on_snapshot(self, snapshot: PlannerSnapshot) -> None:
        self.latest = snapshot

    def get_prompt(self) -> str:
        """
        Generate prompt string based on current state.

        Returns:
            Prompt like "weekplan> ", "weekplan:[2 selected]> " or
            "weekplan:[editing #3]> "
        """
        snap = self.latest
        parts = []
        if snap is not None:
            if snap.editing_task_id is not None:
                parts.append(f"editing #{snap.editing_task_id}")
            if snap.selection:
                parts.append(f"{len(snap.selection)} selected")
            if snap.drag is not None:
                parts.append("dragging")

        if parts:
            return f"weekplan:[{' | '.join(parts)}]> "
        return "weekplan> "


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def format_prompt() -> HTML:
    """Formatted prompt text with the context in magenta."""
    plain = repl_context.get_prompt()
    if plain == "weekplan> ":
        return HTML("<b>weekplan&gt; </b>")
    context_str = plain[len("weekplan:["):-len("]> ")]
    return HTML(f"<b>weekplan:[<ansimagenta>{context_str}</ansimagenta>]&gt; </b>")


def get_bottom_toolbar() -> HTML:
    """Bottom toolbar with selection, clipboard and folder totals."""
    snap = repl_context.latest
    if snap is None:
        return HTML("<style bg='#444444' fg='#ffffff'> Weekplan </style>")

    clip = f"{len(snap.clipboard)} on clipboard ({snap.clipboard_mode})" if snap.clipboard else "clipboard empty"
    text = (
        f"{len(snap.selection)} selected ({snap.selection_points} pts) | "
        f"{clip} | folder: {len(snap.folder)} ({snap.folder_points} pts)"
    )
    return HTML(f"<style bg='#444444' fg='#ffffff'> {text} </style>")


# Import command handlers from command modules
from .commands import (
    # Selection handlers
    handle_select_command,
    handle_deselect_command,
    # Clipboard handlers
    handle_copy_command,
    handle_cut_command,
    handle_paste_command,
    # Drag and drop handlers
    handle_drag_command,
    handle_drop_command,
    handle_undrag_command,
    # Folder handlers
    handle_folder_command,
    # Edit handlers
    handle_edit_command,
    handle_set_command,
    handle_save_command,
    handle_cancel_command,
    # Board handlers
    handle_ls_command,
    handle_show_command,
    handle_status_command,
    # System handlers
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit

    Dispatches to appropriate handler based on command name.
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    if not command:
        return True

    handlers = {
        "select": handle_select_command,
        "deselect": handle_deselect_command,
        "copy": handle_copy_command,
        "cut": handle_cut_command,
        "paste": handle_paste_command,
        "drag": handle_drag_command,
        "drop": handle_drop_command,
        "undrag": handle_undrag_command,
        "folder": handle_folder_command,
        "edit": handle_edit_command,
        "set": handle_set_command,
        "save": handle_save_command,
        "cancel": handle_cancel_command,
        "ls": handle_ls_command,
        "show": handle_show_command,
        "status": handle_status_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        try:
            handler(result)
        except WeekplanError as e:
            console.print(f"[red]Error:[/red] {e}")
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(store: Optional[TaskStore] = None) -> None:
    """
    Main REPL loop.

    Sets up prompt_toolkit session with:
    - Command history (in-memory, not persisted)
    - Autocomplete (commands, buckets, task ids, form fields)
    - Bottom toolbar fed by store snapshots

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    if store is not None:
        repl_context.attach(store)

    # In piped/test environments, skip prompt_toolkit entirely
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]Weekplan REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()
    console.print(BoardFormatter.create_week_table(repl_context.store.snapshot()))
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(repl_context.get_prompt())
            else:
                user_input = session.prompt(format_prompt())

            result = parse_command(user_input)

            if not execute_command(result):
                break

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            # Unexpected error - show but don't crash
            logger.exception("Unhandled error in REPL command")
            console.print(f"[red]Unexpected error:[/red] {e}")


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: weekplan repl
    """
    try:
        run_repl(store_from_settings(load_settings()))
    except WeekplanError as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
