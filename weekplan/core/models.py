"""
FILE: weekplan/core/models.py
PURPOSE: Domain models for tasks, drag payloads, edit forms and store snapshots
EXPORTS:
  - Task (dataclass)
  - FormBuffer (frozen dataclass)
  - SingleDrag / MultiDrag (tagged drag payload variants)
  - DragPayload (type alias)
  - BucketView (frozen dataclass)
  - PlannerSnapshot (frozen dataclass)
  - Outcome (frozen dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - typing (stdlib)
NOTES:
  - Task has from_dict() for seed conversion and to_dict() for serialization
  - Everything handed out by the store is a copy or a frozen value;
    mutating a returned Task never changes store state
"""

from dataclasses import dataclass, asdict, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union


@dataclass
class Task:
    """A unit of work with title, description and points."""

    id: int
    title: str
    description: str = ""
    points: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Convert a seed mapping to a Task object."""
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            description=str(data.get("description") or ""),
            points=int(data.get("points") or 0),
        )

    def copy(self, **changes: Any) -> "Task":
        """Return an independent copy, optionally with some fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FormBuffer:
    """Editable copy of a task's content while the edit surface is open."""

    title: str = ""
    description: str = ""
    points: int = 0

    @classmethod
    def from_task(cls, task: Task) -> "FormBuffer":
        return cls(title=task.title, description=task.description, points=task.points)


@dataclass(frozen=True)
class SingleDrag:
    """Drag payload carrying one task."""

    task: Task

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return (self.task,)


@dataclass(frozen=True)
class MultiDrag:
    """Drag payload carrying the whole active selection."""

    tasks: Tuple[Task, ...]


DragPayload = Union[SingleDrag, MultiDrag]


@dataclass(frozen=True)
class BucketView:
    """Read-only view of one bucket."""

    name: str
    tasks: Tuple[Task, ...] = ()

    @property
    def total_points(self) -> int:
        return sum(t.points for t in self.tasks)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(t.id for t in self.tasks)


@dataclass(frozen=True)
class PlannerSnapshot:
    """
    Immutable picture of the whole store after an operation.

    Attributes:
        version: Increases by one for every state-changing operation
        buckets: Buckets in display order
        folder: Folder entries in insertion order
        selection: Selected tasks in selection order
        clipboard: Clipboard value snapshots
        clipboard_mode: "copy" or "cut"
        drag: Pending drag payload, if any
        editing_task_id: Task targeted by the edit surface, if open
        form: Current form buffer, if the edit surface is open
    """

    version: int
    buckets: Tuple[BucketView, ...]
    folder: Tuple[Task, ...] = ()
    selection: Tuple[Task, ...] = ()
    clipboard: Tuple[Task, ...] = ()
    clipboard_mode: str = "copy"
    drag: Optional[DragPayload] = None
    editing_task_id: Optional[int] = None
    form: Optional[FormBuffer] = None

    def bucket(self, name: str) -> Optional[BucketView]:
        for view in self.buckets:
            if view.name == name:
                return view
        return None

    @property
    def selected_ids(self) -> Tuple[int, ...]:
        return tuple(t.id for t in self.selection)

    @property
    def folder_ids(self) -> Tuple[int, ...]:
        return tuple(t.id for t in self.folder)

    @property
    def selection_points(self) -> int:
        return sum(t.points for t in self.selection)

    @property
    def folder_points(self) -> int:
        return sum(t.points for t in self.folder)


@dataclass(frozen=True)
class Outcome:
    """
    Result of a store operation.

    Operations never raise for unmet preconditions; they return an
    Outcome with applied=False and a short reason instead.
    """

    applied: bool
    message: str = ""
    task_ids: Tuple[int, ...] = field(default=())

    def __bool__(self) -> bool:
        return self.applied
