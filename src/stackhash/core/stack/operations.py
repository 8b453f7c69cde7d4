"""Stack operations."""

from __future__ import annotations

from typing import Any


def is_absent_or_empty(stack: Any) -> bool:
    """True if ``stack`` is None or reports itself empty.

    Every absent or empty stack belongs to one canonical equivalence class.
    """
    return stack is None or stack.is_empty()
