"""A string-keyed chained hash table with a fixed hash function and growth policy."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Iterator

_MASK = 0xFFFFFFFF
_RESIZE_GROWTH = 2
_RESIZE_TRIGGER = 0.75


def hashmap_hash(data) -> int:
    """Compute the 32-bit one-at-a-time hash of a string or bytes."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    h = 0
    for byte in raw:
        h = (h + byte) & _MASK
        h = (h + h * 1024) & _MASK
        h ^= h >> 6
    h = (h + h * 8) & _MASK
    h ^= h >> 11
    return (h + h * 32768) & _MASK


@dataclass(eq=False)
class _Entry:
    key: str
    value: Any


class HashMap(MutableMapping):
    """A mapping from strings to values.

    New entries go to the head of their bucket; the table doubles whenever a
    lookup finds it more than three quarters full.
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _expand(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * _RESIZE_GROWTH)]
        for bucket in old:
            for entry in bucket:
                self._bucket_for(entry.key).insert(0, entry)

    def _bucket_for(self, key: str) -> list[_Entry]:
        return self._buckets[hashmap_hash(key) % self.capacity]

    def _find(self, key) -> tuple[list[_Entry], _Entry | None]:
        if not isinstance(key, str):
            raise TypeError(f"keys must be strings, not {type(key).__name__}")
        if self._size + 1 > self.capacity * _RESIZE_TRIGGER:
            self._expand()
        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry.key == key:
                return bucket, entry
        return bucket, None

    def __getitem__(self, key):
        _, entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key, value) -> None:
        bucket, entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        bucket.insert(0, _Entry(key, value))
        self._size += 1

    def __delitem__(self, key) -> None:
        bucket, entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        bucket.remove(entry)
        self._size -= 1

    def __contains__(self, key) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key)[1] is not None

    def __iter__(self) -> Iterator[str]:
        return iter([entry.key for bucket in self._buckets for entry in bucket])

    def __len__(self) -> int:
        return self._size

    def items(self) -> list[tuple[str, Any]]:
        """Return the (key, value) pairs in table order."""
        return [(entry.key, entry.value) for bucket in self._buckets for entry in bucket]