"""
FILE: weekplan/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - PlannerCompleter (Completer for command/arg completion)
  - create_completer(store) -> PlannerCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - weekplan.core.store (for bucket names and task ids)
NOTES:
  - Suggests command names when at start of line
  - Suggests bucket names after paste/ls, and bucket names plus "folder" after drop
  - Suggests task ids after select/drag/edit/show and folder ids after "folder rm"
  - Suggests field names after "set" and field flags after "edit <id>"
  - Case-insensitive matching
"""

from typing import Iterable, Optional
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import FORM_FIELDS, FOLDER_TARGET
from ..core.store import TaskStore


class PlannerCompleter(Completer):
    """
    Custom completer for the Weekplan REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Bucket names, task ids and form fields depending on command
    - Flags after command names
    """

    COMMANDS = [
        "ls", "show", "status", "select", "deselect", "copy", "cut", "paste",
        "drag", "drop", "undrag", "folder", "edit", "set", "save", "cancel",
        "help", "clear", "exit", "quit",
    ]

    FOLDER_SUBCOMMANDS = ["ls", "add", "rm"]

    COMMAND_FLAGS = {
        "select": ["--multi"],
        "ls": ["--json", "--raw"],
        "edit": ["--title", "--description", "--points"],
    }

    COMMAND_DESCRIPTIONS = {
        "ls": "Show the week",
        "show": "Task details",
        "status": "Selection and clipboard state",
        "select": "Select a task",
        "deselect": "Clear the selection",
        "copy": "Copy the selection",
        "cut": "Cut the selection",
        "paste": "Paste into a bucket",
        "drag": "Pick up a task",
        "drop": "Drop on a bucket or folder",
        "undrag": "Let go without dropping",
        "folder": "Billing folder",
        "edit": "Edit a task",
        "set": "Change a form field",
        "save": "Save the edit",
        "cancel": "Discard the edit",
        "help": "Show help",
        "clear": "Clear the screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    TASK_ID_COMMANDS = {"select", "drag", "edit", "show"}
    BUCKET_COMMANDS = {"paste", "ls"}

    def __init__(self, store: Optional[TaskStore] = None):
        self._store = store

    @property
    def store(self) -> TaskStore:
        if self._store is not None:
            return self._store
        # Follow whatever store the REPL session is attached to
        from .main import repl_context
        return repl_context.store

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Args:
            document: Current document with cursor position
            complete_event: Event that triggered completion

        Yields:
            Completion objects for matching suggestions
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        if not words or (not at_new_word and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_commands(word)
            return

        command = words[0].lower()
        current = "" if at_new_word else words[-1]
        position = len(words) if at_new_word else len(words) - 1

        if current.startswith("-"):
            yield from self._complete_flags(command, current)
            return

        if command == "folder":
            if position == 1:
                yield from self._complete_from(self.FOLDER_SUBCOMMANDS, current)
            elif position == 2 and words[1].lower() == "rm":
                yield from self._complete_task_ids(current, self.store.folder_ids())
            return

        if command in self.TASK_ID_COMMANDS and position == 1:
            yield from self._complete_task_ids(current, [t.id for t in self.store.all_tasks()])
            return

        if command in self.BUCKET_COMMANDS and position == 1:
            yield from self._complete_from(self.store.bucket_names, current)
            return

        if command == "drop" and position == 1:
            yield from self._complete_from(list(self.store.bucket_names) + [FOLDER_TARGET], current)
            return

        if command == "set" and position == 1:
            yield from self._complete_from(FORM_FIELDS, current)
            return

        if at_new_word:
            yield from self._complete_flags(command, "")

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word_lower):
                yield Completion(flag, start_position=-len(word), display=flag)

    def _complete_from(self, values: Iterable[str], word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for value in values:
            if value.lower().startswith(word_lower):
                yield Completion(value, start_position=-len(word), display=value)

    def _complete_task_ids(self, word: str, task_ids: Iterable[int]) -> Iterable[Completion]:
        """
        Complete task ids, showing each task's title as meta text.

        Only the part after the last comma is completed so "1,2,<tab>" works.
        """
        prefix = word.rsplit(",", 1)[-1]
        for task_id in task_ids:
            text = str(task_id)
            if text.startswith(prefix):
                task = self.store.get_task(task_id)
                yield Completion(
                    text,
                    start_position=-len(prefix),
                    display=text,
                    display_meta=task.title if task else "",
                )


def create_completer(store: Optional[TaskStore] = None) -> PlannerCompleter:
    """
    Create completer instance for REPL.

    Args:
        store: Store to complete from; defaults to the REPL session's store
    """
    return PlannerCompleter(store)
