#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = []
# ///
"""PreToolUse hook that scrubs agent signatures from a pending `git commit`.

Runs the signature normalizer over the whole shell command and, when anything
was removed, prints `{"command": ...}` so the host runs the cleaned command
instead.  Never blocks: every path exits 0.
"""

import json
import re
import shlex
import sys

from commit_signature import COMMAND_SIGNATURE_PATTERNS, clean, is_commit_command
from hook_event import read_event

HOOK_NAME = "clean-commit-message"

# `"` + blank lines + `"` left behind when a quoted message argument is emptied.
EMPTIED_QUOTES = re.compile(r'"\s*\n+\s*"')
# Blank lines piled up in front of a heredoc terminator.
HEREDOC_GAP = re.compile(r"\n+EOF")


def _tokenizes(command: str) -> bool:
    try:
        shlex.split(command)
    except ValueError:
        return False
    return True


def rewrite_command(command: str) -> str | None:
    """Return the cleaned command, or None when there is nothing to change."""
    result = clean(command, COMMAND_SIGNATURE_PATTERNS)
    if not result.changed:
        return None

    cleaned = HEREDOC_GAP.sub("\nEOF", result.cleaned)
    cleaned = EMPTIED_QUOTES.sub('"', cleaned)

    # A trailer followed by more arguments on its line takes the closing quote.
    if _tokenizes(command) and not _tokenizes(cleaned):
        print(f"{HOOK_NAME}: rewrite would unbalance quotes, leaving command as is", file=sys.stderr)
        return None
    return cleaned


def main() -> int:
    try:
        try:
            event = read_event()
        except ValueError as exc:
            print(f"{HOOK_NAME}: unreadable hook input (ignored): {exc}", file=sys.stderr)
            return 0

        command = event.tool_input.command or ""
        if not is_commit_command(command):
            return 0

        cleaned = rewrite_command(command)
        if cleaned is None:
            print(f"{HOOK_NAME}: command left unchanged", file=sys.stderr)
            return 0

        print(f"{HOOK_NAME}: removed agent signature from commit message", file=sys.stderr)
        sys.stdout.write(json.dumps({"command": cleaned}) + "\n")
    except Exception as exc:  # never block the commit
        print(f"{HOOK_NAME}: error (ignored): {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
