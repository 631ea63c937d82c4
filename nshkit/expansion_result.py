"""Expanded text with per-character quoting metadata."""

from __future__ import annotations

import enum


class ExpansionMeta(enum.IntFlag):
    UNQUOTED = 1


class ExpansionResult:
    """A growing string where every character carries a set of metadata flags."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._meta: list[int] = []

    def push(self, c: str, flags: int = 0) -> None:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._chars.append(c)
        self._meta.append(int(flags))

    def cut(self, i: int) -> None:
        """Truncate to the first i characters."""
        if not 0 <= i <= len(self._chars):
            raise ValueError(f"cannot cut to {i}, size is {len(self._chars)}")
        del self._chars[i:]
        del self._meta[i:]

    def getflag(self, i: int, flag: int) -> bool:
        return bool(self._meta[i] & flag)

    def setflag(self, i: int, flag: int) -> None:
        self._meta[i] |= int(flag)

    def reset(self) -> None:
        self._chars.clear()
        self._meta.clear()

    def last(self) -> str:
        if not self._chars:
            raise IndexError("empty expansion result")
        return self._chars[-1]

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)