"""Linked-node containers: a double-ended queue, a singly linked list and a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Optional[_Node[T]] = None
        self.next: Optional[_Node[T]] = None


class Deque(Generic[T]):
    """Double-ended queue built on a doubly linked list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: T) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("Deque is empty")
        node = self._head
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("Deque is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        if self._head is None:
            raise IndexError("Deque is empty")
        return self._head.value

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("Deque is empty")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"


class SimpleList(Generic[T]):
    """Singly linked list with head and tail pointers."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: T) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("List is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last element; walks the list to find its predecessor."""
        if self._tail is None:
            raise IndexError("List is empty")
        node = self._tail
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            current = self._head
            while current.next is not self._tail:
                current = current.next
            current.next = None
            self._tail = current
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SimpleList({list(self)!r})"


class Stack(Generic[T]):
    """LIFO stack of linked nodes; iteration runs from top to bottom."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._top: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, value: T) -> None:
        node = _Node(value)
        node.next = self._top
        self._top = node
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element."""
        if self._top is None:
            raise IndexError("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def top(self) -> T:
        if self._top is None:
            raise IndexError("Stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"