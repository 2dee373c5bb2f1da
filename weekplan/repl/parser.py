"""
FILE: weekplan/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: edit 3 --title "Team meeting"
  - Boolean flags (--multi, --json, --raw) never take a value
  - Short flag -m is an alias for --multi
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import List, Dict


# Flags that are switches; the token after them stays positional
BOOLEAN_FLAGS = {"multi", "json", "raw"}

SHORT_FLAGS = {
    "-m": "multi",
}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "select", "paste", "drop")
        args: Positional arguments (e.g., ["3"], ["tuesday"])
        flags: Flag arguments as dict (e.g., {"title": "New", "multi": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str | bool] = field(default_factory=dict)
    raw_input: str = ""


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("select 3 -m")
        ParseResult(command="select", args=["3"], flags={"multi": True})

        >>> parse_command("paste tue")
        ParseResult(command="paste", args=["tue"], flags={})

        >>> parse_command('edit 3 --title "Code review" --points 5')
        ParseResult(command="edit", args=["3"], flags={"title": "Code review", "points": "5"})

    Args:
        input_str: Raw user input from REPL prompt

    Returns:
        ParseResult with command, args, and flags extracted

    Notes:
        - Command is always the first token (case-insensitive)
        - Value flags expect next token as value (--points 5)
        - A value flag at the end of input becomes True
        - Quoted strings are treated as single args
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote: fall back to plain split
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    command = tokens[0].lower()

    args = []
    flags = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token in SHORT_FLAGS:
            flags[SHORT_FLAGS[token]] = True
            i += 1
        elif token.startswith("--") and len(token) > 2:
            flag_name = token[2:].lower()

            if flag_name in BOOLEAN_FLAGS:
                flags[flag_name] = True
                i += 1
            elif i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                flags[flag_name] = tokens[i + 1]
                i += 2
            else:
                flags[flag_name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(
        command=command,
        args=args,
        flags=flags,
        raw_input=input_str
    )
