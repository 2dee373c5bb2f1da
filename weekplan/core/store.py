"""
FILE: weekplan/core/store.py
PURPOSE: The task store - state machine for buckets, selection, clipboard, drag and folder
EXPORTS:
  - TaskStore (class)
  - parse_points(raw_value) -> int
DEPENDENCIES:
  - weekplan.core.models (Task, FormBuffer, SingleDrag, MultiDrag, snapshots, Outcome)
  - weekplan.core.constants (bucket defaults, clipboard modes, form fields)
  - weekplan.core.exceptions (BucketNotFoundError, InvalidInputError, TaskNotFoundError)
  - logging (stdlib)
NOTES:
  - One authoritative Task record per id; buckets, selection and folder hold ids
  - An id -> owning bucket index is updated alongside every bucket mutation
  - Clipboard holds value snapshots taken at copy/cut time
  - Unmet preconditions return Outcome(applied=False); nothing is raised for them.
    Pasting or dropping onto an unknown bucket is such a no-op
  - Raises only for contract violations: bad seed data, bucket queries with an
    unknown name, unknown form field, and require_task on an unknown id
  - Every state change bumps the snapshot version and notifies subscribers
"""

import logging
from dataclasses import replace
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .constants import (
    DEFAULT_BUCKETS,
    CLIPBOARD_COPY,
    CLIPBOARD_CUT,
    FORM_FIELDS,
    FIELD_POINTS,
)
from .exceptions import BucketNotFoundError, InvalidInputError, TaskNotFoundError
from .models import (
    Task,
    FormBuffer,
    SingleDrag,
    MultiDrag,
    DragPayload,
    BucketView,
    PlannerSnapshot,
    Outcome,
)

logger = logging.getLogger(__name__)

Subscriber = Callable[[PlannerSnapshot], None]
SeedData = Mapping[str, Iterable[Union[Task, Mapping[str, Any]]]]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_points(raw_value: Any) -> int:
    """
    Parse a points value typed into the edit form.

    Reads the leading integer of the input ("12abc" -> 12, "3.9" -> 3).
    Input without a leading integer becomes 0, and so does a negative
    result, since points are never negative.
    """
    if isinstance(raw_value, bool):
        return 0
    if isinstance(raw_value, int):
        return max(raw_value, 0)
    match = _LEADING_INT_RE.match(str(raw_value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


class TaskStore:
    """
    Holds every task and applies the planner operations.

    Selection, clipboard, buckets and folder are coupled fields of one
    state machine; each public operation runs to completion and leaves
    them consistent.
    """

    def __init__(
        self,
        bucket_names: Sequence[str] = DEFAULT_BUCKETS,
        seed: Optional[SeedData] = None,
    ):
        names = tuple(bucket_names)
        if not names:
            raise InvalidInputError("At least one bucket is required")
        if len(set(names)) != len(names):
            raise InvalidInputError("Bucket names must be unique")
        if any(not str(name).strip() for name in names):
            raise InvalidInputError("Bucket names cannot be empty")

        self._bucket_names: Tuple[str, ...] = names
        self._records: Dict[int, Task] = {}
        self._buckets: Dict[str, List[int]] = {name: [] for name in names}
        self._owner: Dict[int, str] = {}
        self._folder: List[int] = []
        self._selection: List[int] = []
        self._clipboard: List[Task] = []
        self._clipboard_mode: str = CLIPBOARD_COPY
        self._drag: Optional[DragPayload] = None
        self._editing_id: Optional[int] = None
        self._form: Optional[FormBuffer] = None
        self._version = 0
        self._subscribers: List[Subscriber] = []

        if seed:
            self._load_seed(seed)

    # -------------------- loading --------------------

    def _load_seed(self, seed: SeedData) -> None:
        for bucket_name, entries in seed.items():
            self._require_bucket(bucket_name)
            for entry in entries:
                task = entry.copy() if isinstance(entry, Task) else Task.from_dict(entry)
                if task.id in self._records:
                    raise InvalidInputError(f"Duplicate task id {task.id} in seed data")
                if task.points < 0:
                    raise InvalidInputError(
                        f"Task {task.id} has negative points ({task.points})"
                    )
                self._records[task.id] = task
                self._place(task.id, bucket_name)
        logger.debug("Seeded %d task(s) into %d bucket(s)", len(self._records), len(self._bucket_names))

    # -------------------- internal helpers --------------------

    def _require_bucket(self, name: str) -> None:
        if name not in self._buckets:
            raise BucketNotFoundError(name)

    def _view(self, task_id: int) -> Task:
        return self._records[task_id].copy()

    def _place(self, task_id: int, bucket_name: str) -> None:
        self._buckets[bucket_name].append(task_id)
        self._owner[task_id] = bucket_name

    def _unplace(self, task_id: int) -> Optional[str]:
        owner = self._owner.pop(task_id, None)
        if owner is not None:
            self._buckets[owner].remove(task_id)
        return owner

    def _changed(self, message: str, task_ids: Iterable[int] = ()) -> Outcome:
        self._version += 1
        logger.debug("v%d: %s", self._version, message)
        if self._subscribers:
            snap = self.snapshot()
            for callback in list(self._subscribers):
                callback(snap)
        return Outcome(True, message, tuple(task_ids))

    def _noop(self, message: str) -> Outcome:
        logger.debug("No-op: %s", message)
        return Outcome(False, message)

    # -------------------- queries --------------------

    @property
    def bucket_names(self) -> Tuple[str, ...]:
        return self._bucket_names

    @property
    def version(self) -> int:
        return self._version

    @property
    def clipboard_mode(self) -> str:
        return self._clipboard_mode

    @property
    def pending_drag(self) -> Optional[DragPayload]:
        return self._drag

    @property
    def editing_task_id(self) -> Optional[int]:
        return self._editing_id

    @property
    def form(self) -> Optional[FormBuffer]:
        return self._form

    def tasks_in(self, bucket_name: str) -> List[Task]:
        """Return copies of the tasks in a bucket, in display order."""
        self._require_bucket(bucket_name)
        return [self._view(tid) for tid in self._buckets[bucket_name]]

    def get_task(self, task_id: int) -> Optional[Task]:
        """Return a copy of the task with this id, or None if unknown."""
        if task_id not in self._records:
            return None
        return self._view(task_id)

    def require_task(self, task_id: int) -> Task:
        """
        Like get_task, but for ids the caller expects to exist.

        Raises:
            TaskNotFoundError: If the store holds no task with this id
        """
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def owner_of(self, task_id: int) -> Optional[str]:
        """Return the bucket that currently holds the task, if any."""
        return self._owner.get(task_id)

    def all_tasks(self) -> List[Task]:
        """Return every task placed in a bucket, bucket by bucket."""
        return [self._view(tid) for name in self._bucket_names for tid in self._buckets[name]]

    def selected_ids(self) -> List[int]:
        return list(self._selection)

    def selected_tasks(self) -> List[Task]:
        return [self._view(tid) for tid in self._selection]

    def folder_ids(self) -> List[int]:
        return list(self._folder)

    def folder_tasks(self) -> List[Task]:
        return [self._view(tid) for tid in self._folder]

    def clipboard_tasks(self) -> List[Task]:
        return [t.copy() for t in self._clipboard]

    def bucket_points(self, bucket_name: str) -> int:
        self._require_bucket(bucket_name)
        return sum(self._records[tid].points for tid in self._buckets[bucket_name])

    def selection_points(self) -> int:
        return sum(self._records[tid].points for tid in self._selection)

    def folder_points(self) -> int:
        return sum(self._records[tid].points for tid in self._folder)

    def next_id(self) -> int:
        """
        Next id a copy-mode paste would allocate.

        Derived from every id the store holds, including tasks that are
        currently only on the clipboard after a cut.
        """
        return max(self._records, default=0) + 1

    def snapshot(self) -> PlannerSnapshot:
        """Build an immutable picture of the current state."""
        return PlannerSnapshot(
            version=self._version,
            buckets=tuple(
                BucketView(name, tuple(self._view(tid) for tid in self._buckets[name]))
                for name in self._bucket_names
            ),
            folder=tuple(self.folder_tasks()),
            selection=tuple(self.selected_tasks()),
            clipboard=tuple(self.clipboard_tasks()),
            clipboard_mode=self._clipboard_mode,
            drag=self._drag,
            editing_task_id=self._editing_id,
            form=self._form,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback receiving the new snapshot after each state change.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -------------------- selection --------------------

    def select(self, task_id: int, multi: bool = False) -> Outcome:
        """
        Select a task.

        With multi (Ctrl/Cmd held) the task's membership is toggled and
        the rest of the selection is kept. Without it the selection
        becomes exactly this task, unless it already was exactly this
        task, in which case the selection is cleared.
        """
        if task_id not in self._owner:
            return self._noop(f"Task {task_id} is not in any bucket")

        if multi:
            if task_id in self._selection:
                self._selection.remove(task_id)
                return self._changed(f"Deselected task {task_id}", [task_id])
            self._selection.append(task_id)
            return self._changed(f"Added task {task_id} to selection", [task_id])

        if self._selection == [task_id]:
            self._selection = []
            return self._changed(f"Deselected task {task_id}", [task_id])
        self._selection = [task_id]
        return self._changed(f"Selected task {task_id}", [task_id])

    def clear_selection(self) -> Outcome:
        if not self._selection:
            return self._noop("Selection already empty")
        cleared = self._selection
        self._selection = []
        return self._changed("Cleared selection", cleared)

    # -------------------- clipboard --------------------

    def copy(self) -> Outcome:
        """Snapshot the selected tasks onto the clipboard in copy mode."""
        if not self._selection:
            return self._noop("Nothing selected to copy")
        self._clipboard = [self._view(tid) for tid in self._selection]
        self._clipboard_mode = CLIPBOARD_COPY
        return self._changed(
            f"Copied {len(self._clipboard)} task(s)", [t.id for t in self._clipboard]
        )

    def cut(self) -> Outcome:
        """
        Snapshot the selected tasks onto the clipboard in cut mode and
        take them out of their buckets.

        Cut tasks belong to no bucket until pasted. Their records are
        kept so folder entries referencing them still resolve.
        """
        if not self._selection:
            return self._noop("Nothing selected to cut")
        self._clipboard = [self._view(tid) for tid in self._selection]
        self._clipboard_mode = CLIPBOARD_CUT
        for task in self._clipboard:
            self._unplace(task.id)
        self._selection = []
        return self._changed(
            f"Cut {len(self._clipboard)} task(s)", [t.id for t in self._clipboard]
        )

    def paste_into(self, bucket_name: str) -> Outcome:
        """
        Paste the clipboard at the end of a bucket.

        Cut mode moves the tasks (same ids, snapshot content) and empties
        the clipboard. Copy mode appends fresh-id duplicates and keeps
        the clipboard for further pastes. An unknown bucket name leaves
        everything as it was.
        """
        if not self._clipboard:
            return self._noop("Clipboard is empty")
        if bucket_name not in self._buckets:
            logger.warning("Paste into unknown bucket %r ignored", bucket_name)
            return self._noop(f"Bucket '{bucket_name}' not found")

        pasted: List[int] = []
        if self._clipboard_mode == CLIPBOARD_CUT:
            for task in self._clipboard:
                if task.id in self._owner:
                    logger.warning("Task %d is already placed in %s; skipping paste", task.id, self._owner[task.id])
                    continue
                self._records[task.id] = task.copy()
                self._place(task.id, bucket_name)
                pasted.append(task.id)
            self._clipboard = []
            self._clipboard_mode = CLIPBOARD_COPY
            return self._changed(f"Moved {len(pasted)} task(s) to {bucket_name}", pasted)

        for task in self._clipboard:
            new_id = self.next_id()
            self._records[new_id] = task.copy(id=new_id)
            self._place(new_id, bucket_name)
            pasted.append(new_id)
        return self._changed(f"Pasted {len(pasted)} copy(ies) into {bucket_name}", pasted)

    # -------------------- drag and drop --------------------

    def begin_drag(self, task_id: int) -> Optional[DragPayload]:
        """
        Start dragging a task and return the pending payload.

        Dragging a member of a multi-selection drags the whole selection.
        Otherwise only this task is dragged and the selection collapses
        to it. Returns None for a task that is not in any bucket.
        """
        if task_id not in self._owner:
            self._noop(f"Task {task_id} is not in any bucket")
            return None

        if task_id in self._selection and len(self._selection) > 1:
            payload: DragPayload = MultiDrag(tuple(self._view(tid) for tid in self._selection))
        else:
            payload = SingleDrag(self._view(task_id))
            if task_id not in self._selection:
                self._selection = [task_id]

        self._drag = payload
        self._changed(f"Dragging {len(payload.tasks)} task(s)", [t.id for t in payload.tasks])
        return payload

    def cancel_drag(self) -> Outcome:
        if self._drag is None:
            return self._noop("No drag in progress")
        self._drag = None
        return self._changed("Drag cancelled")

    def drop_on_bucket(self, bucket_name: str) -> Outcome:
        """
        Drop the pending payload onto a bucket.

        Each task is moved from its owning bucket to the end of the
        target. Tasks already owned by the target are left where they
        are, and tasks no longer in any bucket are skipped. The payload
        is discarded afterwards whether or not anything moved, including
        when bucket_name is not one of the store's buckets.
        """
        if self._drag is None:
            return self._noop("No drag in progress")

        payload, self._drag = self._drag, None
        if bucket_name not in self._buckets:
            logger.warning("Drop on unknown bucket %r; drag discarded", bucket_name)
            self._changed(f"Drag discarded over unknown bucket {bucket_name}")
            return Outcome(False, f"Bucket '{bucket_name}' not found")

        moved: List[int] = []
        for task in payload.tasks:
            source = self._owner.get(task.id)
            if source is None or source == bucket_name:
                continue
            self._unplace(task.id)
            if task.id not in self._buckets[bucket_name]:
                self._place(task.id, bucket_name)
            moved.append(task.id)

        outcome = self._changed(f"Moved {len(moved)} task(s) to {bucket_name}", moved)
        if not moved:
            return Outcome(False, f"Nothing to move into {bucket_name}")
        return outcome

    def drop_on_folder(self) -> Outcome:
        """Add the pending payload's tasks to the folder, skipping ones already there."""
        if self._drag is None:
            return self._noop("No drag in progress")

        payload, self._drag = self._drag, None
        added = self._add_to_folder(t.id for t in payload.tasks)
        outcome = self._changed(f"Added {len(added)} task(s) to folder", added)
        if not added:
            return Outcome(False, "Tasks already in folder")
        return outcome

    # -------------------- folder --------------------

    def _add_to_folder(self, task_ids: Iterable[int]) -> List[int]:
        added = []
        for tid in task_ids:
            if tid in self._records and tid not in self._folder:
                self._folder.append(tid)
                added.append(tid)
        return added

    def add_selection_to_folder(self) -> Outcome:
        """Add the selected tasks to the folder, then clear the selection."""
        if not self._selection:
            return self._noop("Nothing selected to add to folder")
        added = self._add_to_folder(self._selection)
        self._selection = []
        outcome = self._changed(f"Added {len(added)} task(s) to folder", added)
        if not added:
            return Outcome(False, "Tasks already in folder")
        return outcome

    def remove_from_folder(self, task_id: int) -> Outcome:
        """Remove a folder entry; the task stays in its bucket."""
        if task_id not in self._folder:
            return self._noop(f"Task {task_id} is not in the folder")
        self._folder.remove(task_id)
        return self._changed(f"Removed task {task_id} from folder", [task_id])

    # -------------------- editing --------------------

    def begin_edit(self, task_id: int) -> Optional[FormBuffer]:
        """
        Open the edit surface for a task placed in a bucket.

        Returns:
            The form buffer loaded with the task's content, or None if
            the task is not in any bucket
        """
        if task_id not in self._owner:
            self._noop(f"Task {task_id} is not in any bucket")
            return None
        self._editing_id = task_id
        self._form = FormBuffer.from_task(self._records[task_id])
        self._changed(f"Editing task {task_id}", [task_id])
        return self._form

    def update_form_field(self, field_name: str, raw_value: Any) -> Outcome:
        """
        Store a value typed into the edit form.

        Points are parsed leniently (see parse_points); other fields are
        stored verbatim.

        Raises:
            InvalidInputError: If field_name is not an editable field
        """
        if field_name not in FORM_FIELDS:
            raise InvalidInputError(
                f"Unknown field '{field_name}'. Must be one of: {', '.join(FORM_FIELDS)}"
            )
        if self._form is None:
            return self._noop("No edit in progress")

        if field_name == FIELD_POINTS:
            value: Any = parse_points(raw_value)
        else:
            value = "" if raw_value is None else str(raw_value)
        self._form = replace(self._form, **{field_name: value})
        return self._changed(f"Set {field_name} on task {self._editing_id}", [self._editing_id])

    def commit_edit(self) -> Outcome:
        """
        Write the form buffer into the task and close the edit surface.

        The id and bucket position are kept. Selection and folder entries
        resolve against the same record, so they show the new content.
        Clipboard snapshots keep the content they were taken with.
        """
        if self._editing_id is None or self._form is None:
            return self._noop("No edit in progress")

        task_id, form = self._editing_id, self._form
        record = self._records.get(task_id)
        if record is not None:
            record.title = form.title
            record.description = form.description
            record.points = form.points
        self._editing_id = None
        self._form = None
        return self._changed(f"Saved task {task_id}", [task_id])

    def cancel_edit(self) -> Outcome:
        if self._editing_id is None:
            return self._noop("No edit in progress")
        task_id = self._editing_id
        self._editing_id = None
        self._form = None
        return self._changed(f"Cancelled edit of task {task_id}", [task_id])
