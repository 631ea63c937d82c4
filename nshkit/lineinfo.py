"""Source positions used in diagnostics."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "nsh"


@dataclass
class LineInfo:
    """A position in a source, optionally nested inside a parent position."""

    source: str
    line: int = 1
    column: int = 1
    parent: Optional["LineInfo"] = None

    def format(self) -> str:
        """Render as "source:line:column", parents first, joined by " => "."""
        here = f"{self.source}:{self.line}:{self.column}"
        if self.parent is None:
            return here
        return f"{self.parent.format()} => {here}"

    def __str__(self) -> str:
        return self.format()

    def warn(self, message: str, stream: Optional[TextIO] = None) -> None:
        """Write a diagnostic for this position to stream (stderr by default)."""
        out = sys.stderr if stream is None else stream
        out.write(f"{_program_name()}: {self.format()}: {message}\n")