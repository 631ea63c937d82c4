"""Shell error codes, error exceptions and warning helpers."""

from __future__ import annotations

import enum
import os
import sys


class NshError(enum.IntEnum):
    """Error codes; all but OK are negative, so they never clash with exit statuses."""

    OK = 0
    IO_ERROR = -1
    LEXER_ERROR = -2
    PARSER_ERROR = -3
    EXECUTION_ERROR = -4
    EXPANSION_ERROR = -5
    KEYBOARD_INTERUPT = -6
    BREAK_INTERUPT = -7
    CONTINUE_INTERUPT = -8
    EXIT_INTERUPT = -9


_REPRS = {
    NshError.OK: "no error",
    NshError.IO_ERROR: "IO error",
    NshError.LEXER_ERROR: "lexer error",
    NshError.PARSER_ERROR: "parser error",
    NshError.EXECUTION_ERROR: "execution error",
    NshError.EXPANSION_ERROR: "expansion error",
    NshError.KEYBOARD_INTERUPT: "keyboard interupt",
    NshError.BREAK_INTERUPT: "break interupt",
    NshError.CONTINUE_INTERUPT: "continue interupt",
    NshError.EXIT_INTERUPT: "exit interupt",
}


def error_repr(err) -> str:
    """Return a short description of an error code."""
    try:
        return _REPRS[NshError(err)]
    except (ValueError, TypeError):
        return "unknown error"


class ShellError(Exception):
    """An error that interrupts normal shell operation."""

    def __init__(self, error, message: str = "") -> None:
        self.error = NshError(error)
        super().__init__(message or error_repr(self.error))


class ExecutionError(ShellError):
    """An execution failure carrying the status code the shell should report."""

    def __init__(self, code: int, message: str = "") -> None:
        super().__init__(NshError.EXECUTION_ERROR, message)
        self.code = code


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "nsh"


def warn(err, message: str):
    """Print a warning with the current OS error, if any, and return err."""
    exc = sys.exc_info()[1]
    line = f"{_program_name()}: {message}"
    if isinstance(exc, OSError) and exc.strerror:
        line += f": {exc.strerror}"
    print(line, file=sys.stderr)
    return err


def warnx(err, message: str):
    """Print a warning and return err."""
    print(f"{_program_name()}: {message}", file=sys.stderr)
    return err