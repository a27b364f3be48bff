import re
from typing import Optional

__all__ = (
    "REASON_MARKER",
    "ACTION_MARKER",
    "REASON_PATTERN",
    "format_reason_line",
    "extract_reason",
    "replace_reason",
)

REASON_MARKER: str = "**Reason:**"
ACTION_MARKER: str = "has been"

REASON_PATTERN = re.compile(r"\*\*Reason:\*\*\s*(.+)")


def format_reason_line(reason: str) -> str:
    # Reason lines never span more than one line
    return f"{REASON_MARKER} {' '.join(reason.split())}"


def extract_reason(description: Optional[str]) -> Optional[str]:
    """
    Return the text of the first `**Reason:**` line in `description`, if any.
    """
    if not description:
        return
    if match := REASON_PATTERN.search(description):
        return match.group(1)


def replace_reason(description: str, reason: str) -> str:
    """
    Write `reason` into `description` and return the new description.

    The first line starting with `**Reason:**` is replaced in place. Without one,
    the reason line is inserted right after the first line describing the action
    (a line containing "has been"), or appended when there is no such line.
    """
    lines: list[str] = description.split("\n")
    reason_line: str = format_reason_line(reason)

    # Replace an existing reason line, keeping its position
    for i, line in enumerate(lines):
        if line.startswith(REASON_MARKER):
            lines[i] = reason_line
            return "\n".join(lines)

    # Otherwise put the reason under the action line, or at the very end
    for i, line in enumerate(lines):
        if ACTION_MARKER in line:
            lines.insert(i + 1, reason_line)
            return "\n".join(lines)

    lines.append(reason_line)
    return "\n".join(lines)
