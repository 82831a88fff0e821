"""An owning integer array with copy, move and assignment semantics, plus a
value holder that shows the difference between shallow and deep copies."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _check_size(size: int) -> int:
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError(f"size must be an integer, not {type(size).__name__}")
    if size < 0:
        raise ValueError("size must not be negative")
    return size


class DynamicArray:
    """Fixed-size array of integers that owns its storage.

    ``DynamicArray()`` is empty; ``DynamicArray(n)`` holds ``n`` zeros.
    """

    def __init__(self, size: int = 0) -> None:
        self._data: list[int] = [0] * _check_size(size)

    @classmethod
    def filled(cls, default_value: int, size: int) -> DynamicArray:
        """Create an array of ``size`` elements, each set to ``default_value``."""
        array = cls(size)
        array._data = [default_value] * len(array._data)
        return array

    @classmethod
    def moved_from(cls, other: DynamicArray) -> DynamicArray:
        """Take over the storage of ``other``, leaving it empty."""
        array = cls()
        array._data, other._data = other._data, []
        return array

    def copy(self) -> DynamicArray:
        """Return an independent copy with its own storage."""
        duplicate = type(self)()
        duplicate._data = list(self._data)
        return duplicate

    def assign(self, other: DynamicArray) -> DynamicArray:
        """Replace this array's contents with a copy of ``other``; return self."""
        if other is not self:
            self._data = list(other._data)
        return self

    def render(self) -> str:
        """Return the elements separated by single spaces."""
        return " ".join(str(item) for item in self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"DynamicArray({self._data!r})"


class _Cell(Generic[T]):
    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value


class SharedValue(Generic[T]):
    """Holder of a single value stored in a separate cell.

    A shallow copy shares the cell, so a change through one holder is seen by
    the other; a deep copy gets a cell of its own.
    """

    def __init__(self, value: T) -> None:
        self._cell: _Cell[T] = _Cell(value)

    @property
    def value(self) -> T:
        return self._cell.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._cell.value = new_value

    def shallow_copy(self) -> SharedValue[T]:
        """Return a holder that shares this holder's cell."""
        duplicate: SharedValue[T] = SharedValue.__new__(SharedValue)
        duplicate._cell = self._cell
        return duplicate

    def deep_copy(self) -> SharedValue[T]:
        """Return a holder with its own cell holding the same value."""
        return SharedValue(self._cell.value)

    def shares_storage_with(self, other: Any) -> bool:
        """Whether ``other`` is a holder using the same cell."""
        return isinstance(other, SharedValue) and other._cell is self._cell

    def __repr__(self) -> str:
        return f"SharedValue({self._cell.value!r})"