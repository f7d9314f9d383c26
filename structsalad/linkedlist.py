"""Singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class ListNode:
    """One link of the list: its content and the node after it."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list reached from its ``head`` node.

    ``delete`` callbacks, where a method takes one, are handed each content
    that the list drops.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for item in items:
            node = ListNode(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents from head to tail."""
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def add_front(self, content: Any) -> ListNode:
        """Put ``content`` in a new node at the head; return the node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Put ``content`` in a new node at the tail; return the node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """Return the tail node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def pop_front(self, delete: Deleter = None) -> Any:
        """Unlink the head node and return its content.

        ``delete`` is called on the content first if given. Raises
        ``IndexError`` on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, calling ``delete`` on contents from tail to head."""
        contents = list(self)
        self.head = None
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content from head to tail."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``f(content)`` for every content.

        If ``f`` returns None, the contents mapped so far are handed to
        ``delete`` from last to first and ``ValueError`` is raised.
        """
        mapped: List[Any] = []
        for content in self:
            result = f(content)
            if result is None:
                if delete is not None:
                    for done in reversed(mapped):
                        delete(done)
                raise ValueError("mapping function produced no value")
            mapped.append(result)
        return LinkedList(mapped)