"""
FILE: weekplan/repl/commands/editing.py
PURPOSE: Task editing command handlers for REPL (edit, set, save, cancel)
"""

from rich.table import Table

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_outcome
from ...core.constants import FORM_FIELDS
from ...core.models import FormBuffer
from .args import task_id_arg


def _print_form(task_id: int, form: FormBuffer) -> None:
    table = Table(title=f"Editing task #{task_id}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("title", form.title)
    table.add_row("description", form.description or "[dim](empty)[/dim]")
    table.add_row("points", str(form.points))
    console.print(table)


def handle_edit_command(result: ParseResult) -> None:
    """
    Handle 'edit' command - open the edit form for a task.

    With field flags the whole edit is applied and saved at once.

    Usage:
        edit 3
        edit 3 --title "Code review" --points 5
        edit 3 --description ""
    """
    task_id = task_id_arg(result, 'edit <id> [--title "..."] [--description "..."] [--points N]')
    if task_id is None:
        return

    store = repl_context.store
    form = store.begin_edit(task_id)
    if form is None:
        console.print(f"[dim]Task {task_id} is not in any bucket[/dim]")
        return

    updates = {name: result.flags[name] for name in FORM_FIELDS if name in result.flags}
    if not updates:
        _print_form(task_id, form)
        console.print("[dim]Change fields with 'set <field> <value>', then 'save' or 'cancel'[/dim]")
        return

    for name, value in updates.items():
        # A trailing flag without a value means "clear the field"
        store.update_form_field(name, "" if value is True else value)
    display_outcome(store.commit_edit(), console)


def handle_set_command(result: ParseResult) -> None:
    """
    Handle 'set' command - change one field of the open edit form.

    Usage:
        set title Write release notes
        set points 8
        set description
    """
    if not result.args:
        console.print("[red]Error:[/red] Field name required")
        console.print(f"[dim]Usage: set <{'|'.join(FORM_FIELDS)}> <value>[/dim]")
        return

    store = repl_context.store
    if store.editing_task_id is None:
        console.print("[dim]No edit in progress. Start one with 'edit <id>'.[/dim]")
        return

    field_name = result.args[0].lower()
    value = " ".join(result.args[1:])
    outcome = store.update_form_field(field_name, value)
    if outcome.applied and store.form is not None:
        _print_form(store.editing_task_id, store.form)
    else:
        display_outcome(outcome, console)


def handle_save_command(result: ParseResult) -> None:
    """
    Handle 'save' command - write the form back to the task.

    Usage:
        save
    """
    display_outcome(repl_context.store.commit_edit(), console)


def handle_cancel_command(result: ParseResult) -> None:
    """
    Handle 'cancel' command - close the edit form without saving.

    Usage:
        cancel
    """
    display_outcome(repl_context.store.cancel_edit(), console)
