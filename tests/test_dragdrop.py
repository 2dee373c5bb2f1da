"""
Tests for the drag-and-drop protocol: begin_drag, drop_on_bucket, drop_on_folder.
"""

# Path setup handled by conftest.py
from weekplan.core.models import SingleDrag, MultiDrag


def test_drag_unselected_task_collapses_selection(week):
    week.select(1)
    week.select(2, multi=True)
    payload = week.begin_drag(5)
    assert isinstance(payload, SingleDrag)
    assert payload.task.id == 5
    assert week.selected_ids() == [5]


def test_drag_member_of_multi_selection_drags_all(week):
    week.select(1)
    week.select(3, multi=True)
    week.select(6, multi=True)
    payload = week.begin_drag(3)
    assert isinstance(payload, MultiDrag)
    assert [t.id for t in payload.tasks] == [1, 3, 6]
    assert week.selected_ids() == [1, 3, 6]
    assert week.pending_drag is payload
    print("✓ Multi-selection drag carries every selected task")


def test_drag_sole_selected_task_keeps_selection(week):
    week.select(4)
    payload = week.begin_drag(4)
    assert isinstance(payload, SingleDrag)
    assert week.selected_ids() == [4]


def test_drag_unknown_task_returns_none(week):
    assert week.begin_drag(42) is None
    assert week.pending_drag is None


def test_drop_moves_to_end_of_target(week):
    week.begin_drag(1)
    outcome = week.drop_on_bucket("Friday")
    assert outcome.applied
    assert [t.id for t in week.tasks_in("Friday")] == [8, 1]
    assert [t.id for t in week.tasks_in("Monday")] == [2]
    assert week.owner_of(1) == "Friday"
    assert week.pending_drag is None


def test_drop_multi_from_several_buckets(week):
    week.select(2)
    week.select(4, multi=True)
    week.begin_drag(2)
    week.drop_on_bucket("Sunday")
    assert [t.id for t in week.tasks_in("Sunday")] == [2, 4]
    assert [t.id for t in week.tasks_in("Monday")] == [1]
    assert [t.id for t in week.tasks_in("Tuesday")] == [3]


def test_drop_on_own_bucket_changes_nothing(week):
    before = week.snapshot()
    week.begin_drag(2)
    outcome = week.drop_on_bucket("Monday")
    assert not outcome.applied
    assert week.snapshot().buckets == before.buckets
    assert week.pending_drag is None


def test_drop_multi_partially_in_target(week):
    """Tasks already owned by the target keep their position."""
    week.select(1)
    week.select(3, multi=True)
    week.begin_drag(1)
    week.drop_on_bucket("Tuesday")
    assert [t.id for t in week.tasks_in("Tuesday")] == [3, 4, 1]
    assert [t.id for t in week.tasks_in("Monday")] == [2]


def test_drop_without_drag_is_noop(week):
    version = week.version
    assert not week.drop_on_bucket("Monday").applied
    assert not week.drop_on_folder().applied
    assert week.version == version


def test_drop_skips_tasks_cut_after_drag_started(week):
    week.select(1)
    week.select(2, multi=True)
    week.begin_drag(1)
    # Selection still {1, 2}; cut takes both out before the drop lands
    week.cut()
    week.drop_on_bucket("Sunday")
    assert week.tasks_in("Sunday") == []
    assert week.pending_drag is None


def test_drop_on_unknown_bucket_discards_drag(week):
    before = week.snapshot()
    week.begin_drag(1)
    outcome = week.drop_on_bucket("Someday")
    assert not outcome.applied
    assert week.pending_drag is None
    assert week.snapshot().buckets == before.buckets
    assert week.owner_of(1) == "Monday"


def test_drop_on_folder_adds_without_moving(week):
    week.begin_drag(5)
    outcome = week.drop_on_folder()
    assert outcome.applied
    assert week.folder_ids() == [5]
    assert week.owner_of(5) == "Wednesday"
    assert week.pending_drag is None


def test_drop_on_folder_skips_existing_entries(week):
    week.begin_drag(5)
    week.drop_on_folder()

    # Selection is still [5] from the first drag
    week.select(6, multi=True)
    week.begin_drag(6)
    week.drop_on_folder()
    assert week.folder_ids() == [5, 6]

    week.begin_drag(6)
    outcome = week.drop_on_folder()
    assert not outcome.applied
    assert week.folder_ids() == [5, 6]
    assert week.pending_drag is None


def test_cancel_drag(week):
    week.begin_drag(3)
    assert week.cancel_drag().applied
    assert week.pending_drag is None
    assert not week.cancel_drag().applied
    assert not week.drop_on_bucket("Sunday").applied
