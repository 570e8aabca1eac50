"""Shared pieces for the commit-message hooks.

Holds the signature patterns that identify automated co-authorship markers
and the normalizer that strips them from commit text.
"""

import re
from dataclasses import dataclass

COMMIT_MARKER = "git commit"

_FLAGS = re.IGNORECASE | re.MULTILINE

# Each pattern absorbs the whole newline run in front of the marker (the
# lookbehind pins the match to the start of that run) and stops at the end of
# the line, leaving that line's own newline in place.
SIGNATURE_PATTERNS = (
    re.compile(r"(?<!\n)\n*Co-Authored-By:.*claude.*$", _FLAGS),
    re.compile(r"(?<!\n)\n*Co-Authored-By:.*anthropic.*$", _FLAGS),
    re.compile(r"(?<!\n)\n*\U0001F916.*claude.*$", _FLAGS),
)

# Same markers for text embedded in a shell command: a double quote closing
# the line belongs to the command and is left in place.
COMMAND_SIGNATURE_PATTERNS = (
    re.compile(r"(?<!\n)\n*Co-Authored-By:.*claude.*?(?=\"?$)", _FLAGS),
    re.compile(r"(?<!\n)\n*Co-Authored-By:.*anthropic.*?(?=\"?$)", _FLAGS),
    re.compile(r"(?<!\n)\n*\U0001F916.*claude.*?(?=\"?$)", _FLAGS),
)

_BLANK_RUN = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class CleaningResult:
    original: str
    cleaned: str

    @property
    def changed(self) -> bool:
        return self.original != self.cleaned


def strip_signatures(text: str, patterns=SIGNATURE_PATTERNS) -> str:
    """Remove every match of every signature pattern, in pattern order."""
    for pattern in patterns:
        text = pattern.sub("", text)
    return text


def collapse_blank_lines(text: str) -> str:
    return _BLANK_RUN.sub("\n\n", text)


def clean(text: str, patterns=SIGNATURE_PATTERNS) -> CleaningResult:
    """Strip signatures from *text*.

    Blank-line runs are only collapsed when a signature was actually removed,
    so text without signatures comes back unchanged.
    """
    stripped = strip_signatures(text, patterns)
    if stripped == text:
        return CleaningResult(text, text)
    return CleaningResult(text, collapse_blank_lines(stripped))


def normalize(text: str) -> str:
    return clean(text).cleaned


def is_commit_command(command: str) -> bool:
    """Substring check for a ``git commit`` invocation anywhere in *command*.

    Deliberately not a shell parse: ``echo "git commit"`` also matches.
    """
    return COMMIT_MARKER in command
