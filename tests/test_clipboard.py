"""
Tests for copy, cut and paste.

Cut moves: paste once, then the clipboard is empty.
Copy stamps: every paste makes new duplicates and the clipboard stays.
"""

# Path setup handled by conftest.py


def test_cut_then_paste_scenario(store):
    """Mon=[T1], Tue=[]: select, cut, paste into Tue."""
    store.select(1)
    assert store.selected_ids() == [1]

    store.cut()
    assert [t.id for t in store.clipboard_tasks()] == [1]
    assert store.clipboard_mode == "cut"
    assert store.tasks_in("Mon") == []
    assert store.selected_ids() == []

    store.paste_into("Tue")
    tue = store.tasks_in("Tue")
    assert [t.id for t in tue] == [1]
    assert tue[0].points == 2
    assert tue[0].title == "T1"
    assert store.tasks_in("Mon") == []
    assert store.clipboard_tasks() == []
    assert store.clipboard_mode == "copy"
    print("✓ Cut/paste moves the task with its id and content")


def test_copy_then_paste_scenario(store):
    """Mon=[T1], Tue=[]: select, copy, paste into Tue."""
    store.select(1)
    store.copy()
    assert [t.id for t in store.clipboard_tasks()] == [1]
    assert store.clipboard_mode == "copy"

    outcome = store.paste_into("Tue")
    tue = store.tasks_in("Tue")
    assert len(tue) == 1
    assert tue[0].id != 1
    assert tue[0].points == 2
    assert tue[0].title == "T1"
    assert tue[0].description == "first"
    assert outcome.task_ids == (tue[0].id,)
    assert [t.id for t in store.tasks_in("Mon")] == [1]
    assert [t.id for t in store.clipboard_tasks()] == [1]


def test_copy_paste_is_repeatable(week):
    week.select(1)
    week.select(2, multi=True)
    week.copy()

    week.paste_into("Sunday")
    week.paste_into("Sunday")
    sunday = week.tasks_in("Sunday")
    assert len(sunday) == 4
    ids = [t.id for t in sunday]
    assert len(set(ids)) == 4
    assert all(i > 8 for i in ids)
    assert [t.title for t in sunday] == [
        "Team meeting", "Requirements analysis", "Team meeting", "Requirements analysis",
    ]

    # Originals untouched, clipboard still pastable
    assert [t.id for t in week.tasks_in("Monday")] == [1, 2]
    assert week.paste_into("Saturday").applied
    assert len(week.tasks_in("Saturday")) == 2
    print("✓ Copy can be pasted again and again")


def test_copy_keeps_selection(week):
    week.select(3)
    week.copy()
    assert week.selected_ids() == [3]


def test_copy_follows_selection_order(week):
    week.select(5)
    week.select(1, multi=True)
    week.copy()
    assert [t.id for t in week.clipboard_tasks()] == [5, 1]


def test_cut_paste_only_once(store):
    store.select(1)
    store.cut()
    assert store.paste_into("Tue").applied
    outcome = store.paste_into("Mon")
    assert not outcome.applied
    assert store.tasks_in("Mon") == []
    assert [t.id for t in store.tasks_in("Tue")] == [1]


def test_cut_from_several_buckets(week):
    week.select(2)
    week.select(3, multi=True)
    week.select(8, multi=True)
    week.cut()
    assert [t.id for t in week.tasks_in("Monday")] == [1]
    assert [t.id for t in week.tasks_in("Tuesday")] == [4]
    assert week.tasks_in("Friday") == []
    for task_id in (2, 3, 8):
        assert week.owner_of(task_id) is None

    week.paste_into("Saturday")
    assert [t.id for t in week.tasks_in("Saturday")] == [2, 3, 8]


def test_paste_appends_to_end(week):
    week.select(8)
    week.cut()
    week.paste_into("Monday")
    assert [t.id for t in week.tasks_in("Monday")] == [1, 2, 8]


def test_copy_and_cut_need_selection(week):
    assert not week.copy().applied
    assert not week.cut().applied
    assert week.clipboard_tasks() == []


def test_paste_with_empty_clipboard_is_noop(week):
    version = week.version
    assert not week.paste_into("Monday").applied
    assert week.version == version


def test_paste_into_unknown_bucket_is_noop(week):
    week.select(1)
    week.cut()
    version = week.version
    outcome = week.paste_into("Someday")
    assert not outcome.applied
    assert week.version == version
    # The cut is still pending and can land somewhere real
    assert [t.id for t in week.clipboard_tasks()] == [1]
    assert week.paste_into("Sunday").applied
    assert week.owner_of(1) == "Sunday"


def test_copy_replaces_pending_cut(week):
    week.select(1)
    week.cut()
    week.select(3)
    week.copy()
    assert week.clipboard_mode == "copy"
    assert [t.id for t in week.clipboard_tasks()] == [3]
    # The cut task is no longer on the clipboard and sits in no bucket
    assert week.owner_of(1) is None


def test_copy_paste_while_cut_pending_never_reuses_cut_id(store):
    """Mon=[T1]: add T2 by copy, cut the higher id, copy-paste, then paste the cut."""
    store.select(1)
    store.copy()
    store.paste_into("Mon")          # creates id 2
    assert [t.id for t in store.tasks_in("Mon")] == [1, 2]

    store.select(2)
    store.cut()                      # id 2 leaves every bucket
    assert store.next_id() == 3

    store.select(1)
    # cut clipboard is replaced by this copy; id 2 must still never be reused
    store.copy()
    store.paste_into("Tue")
    assert [t.id for t in store.tasks_in("Tue")] == [3]


def test_clipboard_is_a_snapshot(week):
    week.select(1)
    week.copy()
    week.begin_edit(1)
    week.update_form_field("title", "Renamed")
    week.commit_edit()

    assert week.clipboard_tasks()[0].title == "Team meeting"
    week.paste_into("Sunday")
    assert week.tasks_in("Sunday")[0].title == "Team meeting"
