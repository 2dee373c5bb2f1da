"""
Test that running `weekplan` without arguments launches the REPL.
"""

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def _run(args, stdin=""):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(PROJECT_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("WEEKPLAN_BUCKETS", None)
    env.pop("WEEKPLAN_SEED", None)
    return subprocess.run(
        [sys.executable, "-m", "weekplan", *args],
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=30,
        cwd=PROJECT_ROOT,
        env=env,
    )


def test_no_args_launches_repl():
    """Running without a subcommand should launch the REPL."""
    result = _run([], stdin="exit\n")
    assert "Weekplan REPL" in result.stdout
    assert "Goodbye!" in result.stdout
    print("✓ Default REPL launch works")


def test_repl_session_over_stdin():
    result = _run([], stdin="select 1\ncut\npaste sun\nls --raw\nexit\n")
    assert result.returncode == 0
    assert "Sunday (2 pts)" in result.stdout
    assert "  1: [ ] Team meeting (2)" in result.stdout


def test_version_command():
    result = _run(["version"])
    assert result.returncode == 0
    assert "Weekplan v" in result.stdout


def test_show_json_command():
    result = _run(["show", "--json"])
    assert result.returncode == 0
    assert '"Monday"' in result.stdout


def test_show_unknown_bucket_fails():
    result = _run(["show", "--bucket", "someday"])
    assert result.returncode == 1
