"""Small containers: a byte-valued bitset, a fixed ring buffer, a reference count."""

from __future__ import annotations

from typing import Any, Callable, Optional


def _char_code(c) -> int:
    code = ord(c) if isinstance(c, str) else int(c)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"not a byte value: {c!r}")
    return code


class CharBitset:
    """A set of byte values (0-255), given as one-character strings or ints."""

    def __init__(self) -> None:
        self._bits = 0

    def __contains__(self, c) -> bool:
        return bool(self._bits >> _char_code(c) & 1)

    def set(self, c, value: bool = True) -> None:
        mask = 1 << _char_code(c)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask


class RingBuffer:
    """A fixed-capacity FIFO queue."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _index(self, i: int) -> int:
        return (self._start + i) % self.capacity

    def push(self, item) -> None:
        if self._size >= self.capacity:
            raise IndexError("push to a full ring buffer")
        self._slots[self._index(self._size)] = item
        self._size += 1

    def pop(self):
        if self._size == 0:
            raise IndexError("pop from an empty ring buffer")
        index = self._index(0)
        item = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        self._start = (self._start + 1) % self.capacity
        return item

    def __getitem__(self, i: int):
        if i < 0:
            i += self._size
        if not 0 <= i < self._size:
            raise IndexError("ring buffer index out of range")
        return self._slots[self._index(i)]

    def __len__(self) -> int:
        return self._size


class RefCount:
    """A reference count that starts holding one reference.

    The release callback runs when the last reference is put.
    """

    def __init__(self, free: Optional[Callable[["RefCount"], None]] = None) -> None:
        self.count = 0
        self._free = free

    @property
    def released(self) -> bool:
        return self.count < 0

    def get(self) -> None:
        if self.released:
            raise RuntimeError("reference count already released")
        self.count += 1

    def put(self) -> bool:
        """Drop one reference; return True if this released the object."""
        if self.released:
            raise RuntimeError("reference count already released")
        self.count -= 1
        if self.count >= 0:
            return False
        if self._free is not None:
            self._free(self)
        return True