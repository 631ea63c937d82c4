"""Path component scanning, canonicalization and colon-separated path lists."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class PathComponent:
    """One component of a path.

    The root component has an empty name and ``root`` set. ``offset`` is where
    the component starts in the scanned path.
    """

    index: int
    name: str
    root: bool
    trailing_slash: bool
    offset: int

    @property
    def valid(self) -> bool:
        return bool(self.name) or self.root

    def same_as(self, other: "PathComponent") -> bool:
        """Compare name and root flag, ignoring position."""
        return self.name == other.name and self.root == other.root

    def __str__(self) -> str:
        return self.name + "/" if self.trailing_slash else self.name


def _scan(path: str) -> Iterator[PathComponent]:
    """Yield every component, then one final invalid component marking the end."""
    size = len(path)
    pos = 0
    root = False
    if path.startswith("/"):
        root = True
        while pos + 1 < size and path[pos + 1] == "/":
            pos += 1
    index = 0
    while True:
        end = pos
        while end < size and path[end] != "/":
            end += 1
        component = PathComponent(index, path[pos:end], root, end < size, pos)
        yield component
        if not component.valid:
            return
        pos = end
        while pos < size and path[pos] == "/":
            pos += 1
        root = False
        index += 1


def path_components(path: str) -> Iterator[PathComponent]:
    """Iterate over the components of a path; a leading slash gives a root component."""
    for component in _scan(path):
        if not component.valid:
            return
        yield component


def home_filepath(filename: str) -> Optional[str]:
    """Return the path of a file in the user's home directory, or None."""
    try:
        import pwd
    except ImportError:
        return None
    try:
        entry = pwd.getpwuid(os.getuid())
    except KeyError:
        return None
    return f"{entry.pw_dir}/{filename}"


def path_canonicalize(path: str) -> str:
    """Lexically simplify a path: drop "." components and resolve ".." ones."""
    parts: list[str] = []
    for component in path_components(path):
        if component.name == ".":
            continue
        if component.name == "..":
            keep = (
                not parts
                or (len(parts) == 1 and parts[0] == "/")
                or parts[-1] == ".."
            )
            if not keep:
                parts.pop()
                continue
        parts.append(str(component))

    result = "".join(parts)
    if len(result) > 1 and result.endswith("/"):
        result = result[:-1]
    return result


def path_join(base: str, relpath: str) -> str:
    """Join two paths with a slash, unless base already ends with one."""
    sep = "" if base.endswith("/") else "/"
    return f"{base}{sep}{relpath}"


def path_count_components(path: str) -> int:
    """Count the components of a path, the root included."""
    return sum(1 for _ in path_components(path))


def path_skip_components(path: str, count: int) -> str:
    """Return the rest of path starting at component number count."""
    last = None
    for component in _scan(path):
        last = component
        if component.valid and component.index == count:
            return path[component.offset:]
    return path[last.offset:] if last is not None else ""


def path_remove_prefix(path: str, prefix_path: str) -> Optional[str]:
    """Strip the components of prefix_path from path, or return None if it is no prefix."""
    components = _scan(path)
    prefix_components = _scan(prefix_path)
    while True:
        component = next(components)
        prefix = next(prefix_components)
        if not prefix.valid:
            return path[component.offset:]
        if not component.valid:
            return None
        if not component.same_as(prefix):
            return None


def iter_pathlist(text: str) -> Iterator[str]:
    """Iterate over the entries of a colon-separated list, skipping empty runs."""
    size = len(text)
    pos = 0
    while pos < size:
        end = text.find(":", pos)
        if end == -1:
            end = size
        yield text[pos:end]
        pos = end
        while pos < size and text[pos] == ":":
            pos += 1