"""Hash containers using separate chaining over a fixed number of buckets."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_BUCKET_COUNT = 10


class SimpleUnorderedMap(Generic[K, V]):
    """Hash map; iteration yields (key, value) by bucket, then insertion order."""

    def __init__(self) -> None:
        self._buckets: list[list[list]] = [[] for _ in range(DEFAULT_BUCKET_COUNT)]
        self._size = 0

    def _bucket(self, key: K) -> list[list]:
        return self._buckets[hash(key) % len(self._buckets)]

    def insert(self, key: K, value: V) -> None:
        """Add the pair, or replace the value if the key is already present."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def __contains__(self, key: object) -> bool:
        return any(entry[0] == key for entry in self._bucket(key))  # type: ignore[arg-type]

    def get(self, key: K) -> V:
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError("Key not found")

    def erase(self, key: K) -> None:
        """Remove the key if present; a missing key is ignored."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[K, V]]:
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def __repr__(self) -> str:
        return f"SimpleUnorderedMap({dict(self)!r})"


class SimpleUnorderedSet(Generic[K]):
    """Hash set; iteration runs by bucket, then insertion order."""

    def __init__(self, items: Iterable[K] = ()) -> None:
        self._buckets: list[list[K]] = [[] for _ in range(DEFAULT_BUCKET_COUNT)]
        self._size = 0
        for item in items:
            self.insert(item)

    def _bucket(self, value: K) -> list[K]:
        return self._buckets[hash(value) % len(self._buckets)]

    def insert(self, value: K) -> None:
        bucket = self._bucket(value)
        if value in bucket:
            return
        bucket.append(value)
        self._size += 1

    def __contains__(self, value: object) -> bool:
        return value in self._bucket(value)  # type: ignore[arg-type]

    def erase(self, value: K) -> None:
        """Remove the value if present; a missing value is ignored."""
        bucket = self._bucket(value)
        if value in bucket:
            bucket.remove(value)
            self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"SimpleUnorderedSet({list(self)!r})"