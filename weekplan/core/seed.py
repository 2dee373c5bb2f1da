"""
FILE: weekplan/core/seed.py
PURPOSE: Build task stores from seed data
EXPORTS:
  - demo_store(bucket_names) -> TaskStore
  - empty_store(bucket_names) -> TaskStore
  - store_from_settings(settings) -> TaskStore
DEPENDENCIES:
  - weekplan.core.store (TaskStore)
  - weekplan.core.constants (DEFAULT_BUCKETS, DEMO_WEEK)
NOTES:
  - Demo tasks whose day is not among the configured buckets are dropped
"""

import logging
from typing import Sequence

from .constants import DEFAULT_BUCKETS, DEMO_WEEK
from .store import TaskStore

logger = logging.getLogger(__name__)

SEED_DEMO = "demo"
SEED_EMPTY = "empty"
SEED_CHOICES = (SEED_DEMO, SEED_EMPTY)


def empty_store(bucket_names: Sequence[str] = DEFAULT_BUCKETS) -> TaskStore:
    """Create a store with empty buckets."""
    return TaskStore(bucket_names)


def demo_store(bucket_names: Sequence[str] = DEFAULT_BUCKETS) -> TaskStore:
    """Create a store holding the demo week."""
    names = tuple(bucket_names)
    seed = {day: tasks for day, tasks in DEMO_WEEK.items() if day in names}
    skipped = set(DEMO_WEEK) - set(seed)
    if skipped:
        logger.info("Demo days not in configured buckets: %s", ", ".join(sorted(skipped)))
    return TaskStore(names, seed=seed)


def store_from_settings(settings) -> TaskStore:
    """Create the store described by a Settings object."""
    if settings.seed == SEED_EMPTY:
        return empty_store(settings.buckets)
    return demo_store(settings.buckets)
