"""
Property tests over random operation sequences.

Checks the invariants every reachable state must hold:
- a task id is in at most one bucket
- a task id is in the folder at most once
- selection only references tasks placed in a bucket
- ids allocated by copy-paste are above every id seen before
"""

import random

import pytest

# Path setup handled by conftest.py
from weekplan.core.seed import demo_store


def _bucket_ids(store):
    return [t.id for name in store.bucket_names for t in store.tasks_in(name)]


def _check(store, seen_ids):
    ids = _bucket_ids(store)
    assert len(ids) == len(set(ids)), f"duplicate id across buckets: {ids}"

    folder = store.folder_ids()
    assert len(folder) == len(set(folder)), f"duplicate id in folder: {folder}"

    for task_id in store.selected_ids():
        assert store.owner_of(task_id) is not None

    for name in store.bucket_names:
        for task in store.tasks_in(name):
            assert store.owner_of(task.id) == name
            assert task.points >= 0

    seen_ids.update(ids)
    seen_ids.update(t.id for t in store.clipboard_tasks())


def _random_step(store, rng):
    ids = _bucket_ids(store) or [1]
    buckets = store.bucket_names
    op = rng.choice([
        "select", "multi", "copy", "cut", "paste", "drag", "drop",
        "drop_folder", "folder", "unfolder", "edit",
    ])
    if op == "select":
        store.select(rng.choice(ids))
    elif op == "multi":
        store.select(rng.choice(ids), multi=True)
    elif op == "copy":
        store.copy()
    elif op == "cut":
        store.cut()
    elif op == "paste":
        return store.paste_into(rng.choice(buckets))
    elif op == "drag":
        store.begin_drag(rng.choice(ids))
    elif op == "drop":
        store.drop_on_bucket(rng.choice(buckets))
    elif op == "drop_folder":
        store.drop_on_folder()
    elif op == "folder":
        store.add_selection_to_folder()
    elif op == "unfolder":
        folder = store.folder_ids()
        if folder:
            store.remove_from_folder(rng.choice(folder))
    elif op == "edit":
        if store.begin_edit(rng.choice(ids)) is not None:
            store.update_form_field("points", str(rng.randint(-3, 20)))
            store.commit_edit()
    return None


@pytest.mark.parametrize("seed", range(20))
def test_random_sequences_keep_invariants(seed):
    rng = random.Random(seed)
    store = demo_store()
    seen_ids = set()
    _check(store, seen_ids)

    for _ in range(200):
        before = max(seen_ids)
        mode = store.clipboard_mode
        outcome = _random_step(store, rng)
        if outcome is not None and outcome.applied and mode == "copy":
            assert all(new_id > before for new_id in outcome.task_ids)
        _check(store, seen_ids)


def test_copy_paste_twice_then_third_time(store):
    store.select(1)
    store.copy()
    first = store.paste_into("Tue").task_ids
    second = store.paste_into("Tue").task_ids
    assert len(first) == len(second) == 1
    assert first[0] != second[0]
    assert 1 not in first + second
    assert [t.id for t in store.tasks_in("Mon")] == [1]
    assert store.clipboard_tasks()
    assert store.paste_into("Mon").applied


def test_next_id_is_max_plus_one(week):
    assert week.next_id() == 9
    week.select(8)
    week.cut()
    # The cut task still counts
    assert week.next_id() == 9
