"""Status footer drawn beneath the galaxy."""

from __future__ import annotations


def status_line(elapsed: float) -> str:
    """Footer text for the given wall-clock seconds since start."""
    return f" Time: {int(elapsed)}s"


def compose_frame(rows: list[str], elapsed: float) -> str:
    """Join grid rows and the footer into one block, ready for a single write."""
    body = "".join(row + "\n" for row in rows)
    return f"{body}\n{status_line(elapsed)}"
