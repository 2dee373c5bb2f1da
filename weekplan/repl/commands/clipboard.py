"""
FILE: weekplan/repl/commands/clipboard.py
PURPOSE: Clipboard command handlers for REPL (copy, cut, paste)
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ..display import display_outcome
from ...formatting import resolve_bucket_name


def handle_copy_command(result: ParseResult) -> None:
    """
    Handle 'copy' command - copy selected tasks to the clipboard.

    Usage:
        copy
    """
    display_outcome(repl_context.store.copy(), console)


def handle_cut_command(result: ParseResult) -> None:
    """
    Handle 'cut' command - move selected tasks onto the clipboard.

    Cut tasks leave their bucket until pasted.

    Usage:
        cut
    """
    display_outcome(repl_context.store.cut(), console)


def handle_paste_command(result: ParseResult) -> None:
    """
    Handle 'paste' command - paste the clipboard at the end of a bucket.

    Usage:
        paste tuesday
        paste tue
    """
    if not result.args:
        console.print("[red]Error:[/red] Bucket name required")
        console.print("[dim]Usage: paste <bucket>[/dim]")
        return

    store = repl_context.store
    bucket = resolve_bucket_name(" ".join(result.args), store.bucket_names)
    outcome = store.paste_into(bucket)
    display_outcome(outcome, console)
    if outcome.applied:
        console.print(f"[dim]New in {bucket}: {', '.join(f'#{i}' for i in outcome.task_ids)}[/dim]")
