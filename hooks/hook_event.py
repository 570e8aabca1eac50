"""Typed view of the JSON event a hook host pipes to a hook script."""

import json
import sys
from dataclasses import dataclass, field


def _str_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None


@dataclass
class ToolInput:
    command: str | None = None
    path: str | None = None
    file_path: str | None = None
    args: list[str] = field(default_factory=list)
    content: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "ToolInput":
        if not isinstance(payload, dict):
            return cls()
        args = payload.get("args")
        return cls(
            command=_str_or_none(payload.get("command")),
            path=_str_or_none(payload.get("path")),
            file_path=_str_or_none(payload.get("file_path")),
            args=[a for a in args if isinstance(a, str)] if isinstance(args, list) else [],
            content=_str_or_none(payload.get("content")),
        )

    @property
    def target_path(self) -> str:
        """Resolve the file a tool acts on: path, then file_path, then first arg."""
        if self.path:
            return self.path
        if self.file_path:
            return self.file_path
        if self.args:
            return self.args[0]
        return ""


@dataclass
class HookEvent:
    tool_name: str = ""
    tool_input: ToolInput = field(default_factory=ToolInput)
    cwd: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "HookEvent":
        if not isinstance(payload, dict):
            raise ValueError("hook payload must be a JSON object")
        return cls(
            tool_name=_str_or_none(payload.get("tool_name")) or "",
            tool_input=ToolInput.from_payload(payload.get("tool_input")),
            cwd=_str_or_none(payload.get("cwd")),
        )


def read_event() -> HookEvent:
    """Read stdin to EOF and parse it as a HookEvent.

    Raises ValueError (json.JSONDecodeError included) on malformed input.
    """
    return HookEvent.from_payload(json.loads(sys.stdin.buffer.read()))
