"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int
    next: Optional[ListNode] = None


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a chain of nodes from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _iter_nodes(head: Optional[ListNode]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Values of a chain of nodes, from the head onwards."""
    return list(_iter_nodes(head))


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a chain of nodes in place and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


class SinglyLinkedList:
    """A singly linked list that appends at the end."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None

    def insert(self, value: int) -> None:
        """Append ``value`` at the end."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; do nothing if there is none."""
        if self.head is None:
            return
        if self.head.val == value:
            self.head = self.head.next
            return
        current = self.head
        while current.next is not None and current.next.val != value:
            current = current.next
        if current.next is not None:
            current.next = current.next.next

    def __iter__(self) -> Iterator[int]:
        return _iter_nodes(self.head)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class _DoubleNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: int) -> None:
        self.data = data
        self.prev: Optional[_DoubleNode] = None
        self.next: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """A doubly linked list with insertion at either end."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None

    def insert_at_front(self, value: int) -> None:
        """Insert ``value`` before the first element."""
        node = _DoubleNode(value)
        if self._head is None:
            self._head = self._tail = node
            return
        node.next = self._head
        self._head.prev = node
        self._head = node

    def insert_at_end(self, value: int) -> None:
        """Insert ``value`` after the last element."""
        node = _DoubleNode(value)
        if self._tail is None:
            self._head = self._tail = node
            return
        node.prev = self._tail
        self._tail.next = node
        self._tail = node

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if the list is empty or holds no such value.
        """
        if self._head is None:
            raise ValueError("list is empty")
        node = self._head
        while node is not None and node.data != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} not found")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "NULL"


class _CircularNode:
    __slots__ = ("data", "next")

    def __init__(self, data: int) -> None:
        self.data = data
        self.next: _CircularNode = self


class CircularLinkedList:
    """A circular singly linked list kept by its tail node."""

    def __init__(self) -> None:
        self._tail: Optional[_CircularNode] = None

    def insert_at_front(self, value: int) -> None:
        """Insert ``value`` as the new head."""
        node = _CircularNode(value)
        if self._tail is None:
            self._tail = node
            return
        node.next = self._tail.next
        self._tail.next = node

    def insert_at_end(self, value: int) -> None:
        """Insert ``value`` as the new tail."""
        self.insert_at_front(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if the list is empty or holds no such value.
        """
        tail = self._tail
        if tail is None:
            raise ValueError("list is empty")
        if tail.next is tail and tail.data == value:
            self._tail = None
            return
        head = tail.next
        previous, current = tail, head
        while True:
            if current.data == value:
                previous.next = current.next
                if current is tail:
                    self._tail = previous
                return
            previous, current = current, current.next
            if current is head:
                break
        raise ValueError(f"{value!r} not found")

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.data
            node = node.next
            if node is head:
                return

    def __str__(self) -> str:
        if self._tail is None:
            return "List is empty!"
        return "".join(f"{value} -> " for value in self) + "(Head)"