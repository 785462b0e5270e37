"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, content: Any) -> Node:
        """Insert ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def clear(self, deleter: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``deleter`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents built so far are passed to ``deleter``
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(deleter)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"