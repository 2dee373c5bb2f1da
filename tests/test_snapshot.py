"""
Tests for snapshots and subscriptions.
"""

import dataclasses

import pytest

# Path setup handled by conftest.py
from weekplan.core.exceptions import BucketNotFoundError, TaskNotFoundError
from weekplan.core.models import PlannerSnapshot


def test_snapshot_lists_buckets_in_order(week):
    snap = week.snapshot()
    assert isinstance(snap, PlannerSnapshot)
    assert [b.name for b in snap.buckets] == list(week.bucket_names)
    assert snap.bucket("Monday").ids == (1, 2)
    assert snap.bucket("Wednesday").total_points == 13
    assert snap.bucket("Nope") is None


def test_snapshot_is_frozen(week):
    snap = week.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.version = 10


def test_snapshot_does_not_follow_later_changes(week):
    snap = week.snapshot()
    week.select(1)
    week.cut()
    assert snap.bucket("Monday").ids == (1, 2)
    assert snap.selection == ()


def test_returned_tasks_are_copies(week):
    task = week.tasks_in("Monday")[0]
    task.title = "Mutated outside"
    assert week.get_task(1).title == "Team meeting"


def test_version_bumps_only_on_change(week):
    v0 = week.version
    week.copy()                 # no selection: no-op
    assert week.version == v0
    week.select(1)
    assert week.version == v0 + 1


def test_subscribers_receive_snapshots(week):
    received = []
    unsubscribe = week.subscribe(received.append)

    week.select(2)
    week.copy()
    week.paste_into("Sunday")
    assert [s.version for s in received] == [1, 2, 3]
    assert received[-1].bucket("Sunday").ids == (9,)
    assert received[1].clipboard_mode == "copy"

    unsubscribe()
    week.select(2)
    assert len(received) == 3


def test_no_op_does_not_notify(week):
    received = []
    week.subscribe(received.append)
    week.paste_into("Monday")
    week.remove_from_folder(1)
    assert received == []


def test_snapshot_reports_drag_and_edit(week):
    week.begin_drag(3)
    week.begin_edit(5)
    snap = week.snapshot()
    assert [t.id for t in snap.drag.tasks] == [3]
    assert snap.editing_task_id == 5
    assert snap.form.points == 13


def test_require_task(week):
    assert week.require_task(5).title == "API development"
    with pytest.raises(TaskNotFoundError):
        week.require_task(99)


def test_bucket_points(week):
    assert week.bucket_points("Monday") == 7
    assert week.bucket_points("Sunday") == 0
    assert week.bucket_points("Wednesday") == week.snapshot().bucket("Wednesday").total_points
    with pytest.raises(BucketNotFoundError):
        week.bucket_points("Someday")
