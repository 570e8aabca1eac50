#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = []
# ///
"""PreToolUse hook that gates file edits on a small ordered rule table.

- Blocks (exit 2) any Edit/Write on the production application config.
- Warns, without blocking, when a Java test written with Write calls the live
  payment API and is not marked @Disabled.

Anything else is allowed.  Errors fail open.
"""

import sys

from hook_event import HookEvent, read_event

HOOK_NAME = "security-dispatcher"

EXIT_ALLOW = 0
EXIT_BLOCK = 2

PRODUCTION_CONFIG_MARKERS = ("application-prod.yml", "application-production.yml")
CONTENT_MODIFYING_TOOLS = ("Edit", "Write")

TEST_SOURCE_DIR = "src/test/"
TEST_FILE_SUFFIX = "Test.java"
LIVE_API_HOST = "api.tosspayments.com"
DISABLED_MARKER = "@Disabled"


def is_production_config_edit(event: HookEvent) -> bool:
    path = event.tool_input.target_path
    return event.tool_name in CONTENT_MODIFYING_TOOLS and any(
        marker in path for marker in PRODUCTION_CONFIG_MARKERS
    )


def is_enabled_live_api_test(event: HookEvent) -> bool:
    """True for a Write of a test file that hits the live API without @Disabled."""
    path = event.tool_input.target_path
    if event.tool_name != "Write":
        return False
    if TEST_SOURCE_DIR not in path or not path.endswith(TEST_FILE_SUFFIX):
        return False
    content = event.tool_input.content or ""
    return LIVE_API_HOST in content and DISABLED_MARKER not in content


def evaluate(event: HookEvent) -> int:
    """Apply the rules in order and return the exit status."""
    if is_production_config_edit(event):
        print(
            f"{HOOK_NAME}: blocked: production config files must not be modified "
            f"({event.tool_input.target_path})",
            file=sys.stderr,
        )
        return EXIT_BLOCK

    if is_enabled_live_api_test(event):
        print(
            f"{HOOK_NAME}: warning: {event.tool_input.target_path} calls {LIVE_API_HOST}; "
            f"consider adding {DISABLED_MARKER} to tests that hit the real API",
            file=sys.stderr,
        )

    return EXIT_ALLOW


def main() -> int:
    try:
        event = read_event()
        print(
            f"{HOOK_NAME}: tool={event.tool_name} file={event.tool_input.target_path}",
            file=sys.stderr,
        )
        return evaluate(event)
    except Exception as exc:  # fail open
        print(f"{HOOK_NAME}: error (allowing): {exc}", file=sys.stderr)
        return EXIT_ALLOW


if __name__ == "__main__":
    raise SystemExit(main())
