"""
Ordered list with a movable selection cursor.
"""
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """
    Items in display order plus a cursor that wraps around at both ends.

    The cursor starts unset; the first call to next() or previous()
    selects index 0.
    """

    def __init__(self, items: list[T]):
        self._items = items
        self._selected: Optional[int] = None

    @classmethod
    def with_items(cls, items: Iterable[T]) -> "SelectableList[T]":
        return cls(list(items))

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def selected(self) -> Optional[int]:
        """Index under the cursor, or None if unset or the list is empty."""
        if not self._items:
            return None
        return self._selected

    @property
    def selected_item(self) -> Optional[T]:
        index = self.selected
        if index is None:
            return None
        return self._items[index]

    def next(self) -> None:
        """Move the cursor forward, wrapping to the first item."""
        if not self._items:
            return
        if self._selected is None or self._selected >= len(self._items) - 1:
            self._selected = 0
        else:
            self._selected += 1

    def previous(self) -> None:
        """Move the cursor back, wrapping to the last item."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self._items) - 1
        else:
            self._selected -= 1

    def __len__(self) -> int:
        return len(self._items)
