"""Ordered insertion helper and a small key/value map built on a list."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

LowerThan = Callable[[Any, Any], bool]


def sorted_insert(items: list, item: Any, lower_than: LowerThan) -> None:
    """Insert ``item`` before the first element it is lower than.

    Elements equal to ``item`` stay ahead of it, so insertion is stable.
    """
    index = next(
        (i for i, existing in enumerate(items) if lower_than(item, existing)),
        len(items),
    )
    items.insert(index, item)


class KeyedMap:
    """Key/value pairs kept in a list.

    Without ``lower_than`` keys are compared with ``==`` and pairs keep their
    insertion order. With it the pairs are kept sorted by key and two keys are
    equal when neither is lower than the other.
    """

    def __init__(self, lower_than: Optional[LowerThan] = None) -> None:
        self._lower_than = lower_than
        self._pairs: list[tuple[Any, Any]] = []

    def _matches(self, stored: Any, key: Any) -> bool:
        lower_than = self._lower_than
        if lower_than is None:
            return stored == key
        return not lower_than(stored, key) and not lower_than(key, stored)

    def _find(self, key: Any) -> Optional[int]:
        return next(
            (i for i, (stored, _) in enumerate(self._pairs) if self._matches(stored, key)),
            None,
        )

    def insert(self, key: Any, value: Any) -> bool:
        """Add the pair unless the key is present; return whether it was added."""
        if self._find(key) is not None:
            return False
        self.insert_multi(key, value)
        return True

    def insert_multi(self, key: Any, value: Any) -> None:
        """Add the pair even if the key is already present."""
        pair = (key, value)
        lower_than = self._lower_than
        if lower_than is None:
            self._pairs.append(pair)
        else:
            sorted_insert(self._pairs, pair, lambda a, b: lower_than(a[0], b[0]))

    def search(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Return the first ``(key, value)`` pair matching ``key``, or None."""
        index = self._find(key)
        return None if index is None else self._pairs[index]

    def remove(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Remove and return the first pair matching ``key``, or None."""
        index = self._find(key)
        return None if index is None else self._pairs.pop(index)

    def clear(self) -> None:
        self._pairs.clear()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None