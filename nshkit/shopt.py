"""Shell options and their names."""

from __future__ import annotations

import enum
from typing import Optional


class Shopt(enum.IntEnum):
    AST_PRINT = 0
    DOTGLOB = 1
    EXPAND_ALIASES = 2
    EXTGLOB = 3
    NOCASEGLOB = 4
    NULLGLOB = 5
    SOURCEPATH = 6
    XPG_ECHO = 7

    @property
    def option(self) -> str:
        """The name the option goes by on the command line."""
        return self.name.lower()


SHOPT_COUNT = len(Shopt)


def shopt_from_string(name: str) -> Optional[Shopt]:
    """Return the option with the given name, or None if there is none."""
    for opt in Shopt:
        if opt.option == name:
            return opt
    return None


def string_from_shopt(index) -> Optional[str]:
    """Return the name of an option given by index, or None if out of range."""
    if not 0 <= int(index) < SHOPT_COUNT:
        return None
    return Shopt(int(index)).option