#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = []
# ///
"""PostToolUse hook that scrubs agent signatures from the commit just made.

Once a `git commit` command has run, reads HEAD's message, strips agent
co-authorship trailers and robot-emoji signature lines, and amends HEAD when
that changes anything.  Only valid after the commit exists: run before it, it
would rewrite the previous commit.  Never blocks: every path exits 0.
"""

import subprocess
import sys

from commit_signature import is_commit_command, normalize
from hook_event import read_event

HOOK_NAME = "amend-commit-message"

GIT_TIMEOUT = 10  # seconds


def _git(args: list[str], cwd: str | None) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=GIT_TIMEOUT,
        check=True,
    )
    return result.stdout


def read_head_message(cwd: str | None = None) -> str:
    return _git(["log", "-1", "--format=%B"], cwd)


def amend_head_message(message: str, cwd: str | None = None) -> None:
    """Replace HEAD's message, keeping its tree, parents and author.

    *message* is passed as a single argument with no shell involved, so
    quotes and `$` in it reach git untouched.
    """
    _git(["commit", "--amend", "--no-verify", "-m", message], cwd)


def scrub_head(cwd: str | None = None) -> bool:
    """Amend HEAD if its message carries an agent signature; True if amended."""
    message = read_head_message(cwd)
    cleaned = normalize(message).strip()
    if cleaned == message.strip():
        return False
    amend_head_message(cleaned, cwd)
    return True


def main() -> int:
    try:
        try:
            event = read_event()
        except ValueError as exc:
            print(f"{HOOK_NAME}: unreadable hook input (ignored): {exc}", file=sys.stderr)
            return 0

        if not is_commit_command(event.tool_input.command or ""):
            return 0

        if scrub_head(event.cwd):
            print(f"{HOOK_NAME}: removed agent signature from HEAD", file=sys.stderr)
        else:
            print(f"{HOOK_NAME}: no agent signature to remove", file=sys.stderr)
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        print(f"{HOOK_NAME}: git {exc.cmd[1]} failed (ignored): {detail}", file=sys.stderr)
    except subprocess.TimeoutExpired:
        print(f"{HOOK_NAME}: git timed out after {GIT_TIMEOUT}s (ignored)", file=sys.stderr)
    except Exception as exc:  # never block the commit
        print(f"{HOOK_NAME}: error (ignored): {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
