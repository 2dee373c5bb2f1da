"""
Tests for the REPL command parser.
"""

# Path setup handled by conftest.py
from weekplan.repl.parser import parse_command


def test_parser():
    """Test command parser directly."""
    result = parse_command("select 3")
    assert result.command == "select"
    assert result.args == ["3"]
    assert result.flags == {}
    print("✓ Basic command parsing works")

    result = parse_command("select 3 -m")
    assert result.args == ["3"]
    assert result.flags == {"multi": True}
    print("✓ Short flag parsing works")

    # Boolean flags never swallow the next token
    result = parse_command("select --multi 4")
    assert result.args == ["4"]
    assert result.flags == {"multi": True}

    result = parse_command('edit 3 --title "Code review" --points 5')
    assert result.command == "edit"
    assert result.args == ["3"]
    assert result.flags == {"title": "Code review", "points": "5"}
    print("✓ Quoted value flags work")

    result = parse_command("edit 3 --description")
    assert result.flags == {"description": True}

    result = parse_command("ls --json")
    assert result.flags == {"json": True}

    result = parse_command("set title Write release notes")
    assert result.args == ["title", "Write", "release", "notes"]


def test_empty_and_case():
    result = parse_command("   ")
    assert result.command == ""
    assert result.args == []

    result = parse_command("PASTE Tue")
    assert result.command == "paste"
    assert result.args == ["Tue"]


def test_unclosed_quote_falls_back():
    result = parse_command('edit 3 --title "oops')
    assert result.command == "edit"
    assert result.flags == {"title": '"oops'}
