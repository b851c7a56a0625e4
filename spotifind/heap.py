"""Priority queue that always hands out the item with the highest priority."""

from __future__ import annotations

from typing import Any


class Heap:
    """Binary max-heap of items keyed by an integer priority.

    An item pushed with the same priority as an existing one does not move
    ahead of it.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def top(self) -> Any:
        """Return the item with the highest priority, or None if empty."""
        if not self._entries:
            return None
        return self._entries[0][1]

    def push(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given priority."""
        entries = self._entries
        entries.append((priority, data))
        now = len(entries) - 1
        while now > 0:
            parent = (now - 1) // 2
            if not entries[parent][0] < priority:
                break
            entries[now] = entries[parent]
            now = parent
        entries[now] = (priority, data)

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty heap")
        top = entries[0][1]
        last = entries.pop()
        if not entries:
            return top

        entries[0] = last
        priority = last[0]
        size = len(entries)
        now = 0
        while True:
            child = 2 * now + 1
            if child >= size:
                break
            if child + 1 < size and entries[child][0] < entries[child + 1][0]:
                child += 1
            if not entries[child][0] > priority:
                break
            entries[now], entries[child] = entries[child], entries[now]
            now = child
        return top