"""A doubly linked list with direct access to its items."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class ListItem:
    """A node of a :class:`LinkedList`.

    ``data`` may be changed in place; the links are maintained by the list.
    """

    __slots__ = ("data", "_next", "_prev", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self._next: Optional[ListItem] = None
        self._prev: Optional[ListItem] = None
        self._owner: Optional[LinkedList] = None

    @property
    def next(self) -> Optional[ListItem]:
        """The item after this one, or ``None`` at the end of the list."""
        return self._next

    @property
    def prev(self) -> Optional[ListItem]:
        """The item before this one, or ``None`` at the start of the list."""
        return self._prev

    def __repr__(self) -> str:
        return f"ListItem({self.data!r})"


class LinkedList:
    """Doubly linked list supporting O(1) insertion and removal at any item."""

    def __init__(self) -> None:
        self._first: Optional[ListItem] = None
        self._last: Optional[ListItem] = None
        self._size = 0

    def _check_owned(self, item: ListItem) -> None:
        if item is None or item._owner is not self:
            raise ValueError("item does not belong to this list")

    def first(self) -> Optional[ListItem]:
        """Return the first item, or ``None`` if the list is empty."""
        return self._first

    def last(self) -> Optional[ListItem]:
        """Return the last item, or ``None`` if the list is empty."""
        return self._last

    def insert(self, data: Any) -> ListItem:
        """Insert ``data`` at the beginning and return its new item."""
        item = ListItem(data)
        item._owner = self
        item._next = self._first
        if self._first is not None:
            self._first._prev = item
        else:
            self._last = item
        self._first = item
        self._size += 1
        return item

    def insert_after(self, item: ListItem, data: Any) -> ListItem:
        """Insert ``data`` right after ``item`` and return its new item."""
        self._check_owned(item)
        new_item = ListItem(data)
        new_item._owner = self
        new_item._prev = item
        new_item._next = item._next
        if item._next is not None:
            item._next._prev = new_item
        else:
            self._last = new_item
        item._next = new_item
        self._size += 1
        return new_item

    def erase(self, item: ListItem) -> Optional[ListItem]:
        """Remove ``item`` and return the item that followed it."""
        self._check_owned(item)
        following = item._next
        preceding = item._prev
        if following is not None:
            following._prev = preceding
        else:
            self._last = preceding
        if preceding is not None:
            preceding._next = following
        else:
            self._first = following
        item._next = item._prev = None
        item._owner = None
        self._size -= 1
        return following

    def erase_next(self, item: ListItem) -> Optional[ListItem]:
        """Remove the item after ``item`` and return the one after that."""
        self._check_owned(item)
        if item._next is None:
            raise IndexError("no item follows the given one")
        return self.erase(item._next)

    def items(self) -> Iterator[ListItem]:
        """Iterate over the list items from first to last."""
        item = self._first
        while item is not None:
            following = item._next
            yield item
            item = following

    def __iter__(self) -> Iterator[Any]:
        for item in self.items():
            yield item.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"