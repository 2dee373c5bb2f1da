"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from weekplan.core.models import Task
from weekplan.core.seed import demo_store
from weekplan.core.store import TaskStore


@pytest.fixture
def store():
    """Two buckets: Mon holds T1 (2 pts), Tue is empty."""
    return TaskStore(("Mon", "Tue"), seed={"Mon": [Task(1, "T1", "first", 2)], "Tue": []})


@pytest.fixture
def week():
    """The demo week (ids 1-8 across Monday..Friday)."""
    return demo_store()


@pytest.fixture
def repl_store():
    """Attach a fresh demo store to the REPL session for the duration of a test."""
    from weekplan.repl.main import repl_context

    previous = repl_context.store
    fresh = demo_store()
    repl_context.attach(fresh)
    yield fresh
    repl_context.attach(previous)
