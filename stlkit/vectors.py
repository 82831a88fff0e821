"""Growable and fixed-capacity array containers with explicit capacity tracking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _check_index(index: int, size: int) -> int:
    if not isinstance(index, int):
        raise TypeError(f"indices must be integers, not {type(index).__name__}")
    if index < 0:
        index += size
    if not 0 <= index < size:
        raise IndexError("index out of range")
    return index


class MyVector(Generic[T]):
    """Dynamic array whose capacity starts at zero and doubles when full."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = []
        self._capacity = 0
        for item in items:
            self.push_back(item)

    def _grow_for_one_more(self) -> None:
        if self._capacity == 0:
            self._capacity = 1
        elif len(self._data) >= self._capacity:
            self._capacity *= 2

    def push_back(self, value: T) -> None:
        self._grow_for_one_more()
        self._data.append(value)

    def insert(self, index: int, value: T) -> None:
        """Insert value before position index; index may equal the current size."""
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        if not 0 <= index <= len(self._data):
            raise IndexError("insert position out of range")
        self._grow_for_one_more()
        self._data.insert(index, value)

    def pop_back(self) -> None:
        """Drop the last element; does nothing when the vector is empty."""
        if self._data:
            self._data.pop()

    def erase(self, index: int) -> None:
        """Remove the element at index, shifting later elements left."""
        del self._data[_check_index(index, len(self._data))]

    def front(self) -> T:
        if not self._data:
            raise IndexError("front() on empty vector")
        return self._data[0]

    def back(self) -> T:
        if not self._data:
            raise IndexError("back() on empty vector")
        return self._data[-1]

    def clear(self) -> None:
        """Remove every element and release the storage (capacity becomes zero)."""
        self._data = []
        self._capacity = 0

    def copy(self) -> MyVector[T]:
        """Return an independent copy with the same elements and capacity."""
        duplicate: MyVector[T] = MyVector()
        duplicate._data = list(self._data)
        duplicate._capacity = self._capacity
        return duplicate

    def capacity(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> T:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MyVector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MyVector({self._data!r})"


class SimpleVector(Generic[T]):
    """Dynamic array with a preallocated capacity that doubles when exhausted."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[T] = []
        self._capacity = capacity

    def push_back(self, value: T) -> None:
        if len(self._data) == self._capacity:
            self.reserve(2 * self._capacity or 1)
        self._data.append(value)

    def reserve(self, new_capacity: int) -> None:
        """Grow the capacity to new_capacity; smaller requests are ignored."""
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def capacity(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> T:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"SimpleVector({self._data!r})"


class MyArray(Generic[T]):
    """Fixed-capacity array; appends beyond the capacity are dropped."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[T] = []
        self._capacity = capacity

    def push_back(self, value: T) -> bool:
        """Append value if there is room; return whether it was stored."""
        if len(self._data) >= self._capacity:
            return False
        self._data.append(value)
        return True

    def copy(self) -> MyArray[T]:
        """Return an independent copy with the same elements and capacity."""
        duplicate: MyArray[T] = MyArray(self._capacity)
        duplicate._data = list(self._data)
        return duplicate

    def capacity(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> T:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MyArray({self._data!r}, capacity={self._capacity})"