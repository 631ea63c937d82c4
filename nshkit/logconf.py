"""Domain-filtered debug logging configured by a settings string."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO

from nshkit.errors import NshError, warn, warnx


class LogLevel(enum.IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    DISABLED = 5


_LEVEL_NAMES = ("TRACE", "DEBUG", "INFO", "WARN", "ERROR")

_GRAY = "\x1b[90m"
_RESET = "\x1b[0m"
_LEVEL_COLORS = ("\x1b[94m", "\x1b[36m", "\x1b[32m", "\x1b[33m", "\x1b[31m")


def parse_level(name: str) -> LogLevel:
    """Parse a level name, ignoring case; unknown names give DISABLED."""
    upper = name.upper()
    for level_name in _LEVEL_NAMES:
        if upper == level_name:
            return LogLevel[level_name]
    return LogLevel.DISABLED


@dataclass
class LogConfig:
    """Per-domain minimum levels, with a default for other domains."""

    domains: dict = field(default_factory=dict)
    default_level: LogLevel = LogLevel.DISABLED

    @classmethod
    def parse(cls, settings: str) -> "LogConfig":
        """Parse settings such as "net:INFO,io,lexer:DEBUG,*:WARN".

        A domain without a level logs at INFO; "*" sets the default level;
        entries with an unknown level are ignored.
        """
        config = cls()
        for entry in settings.split(","):
            if ":" in entry:
                domain, level_name = entry.split(":", 1)
                level = parse_level(level_name)
                if level is LogLevel.DISABLED:
                    continue
            else:
                domain, level = entry, LogLevel.INFO

            if entry.startswith("*"):
                config.default_level = level
                continue
            config.domains.setdefault(domain, level)
        return config

    def should_log(self, level, domain) -> bool:
        threshold = self.domains.get(domain, self.default_level)
        return level >= threshold


def _header_simple(level: LogLevel, file: str, line: int) -> str:
    return f"{os.getpid():<7} {_LEVEL_NAMES[level]:<5} {file}:{line}: "


def _header_color(level: LogLevel, file: str, line: int) -> str:
    return (
        f"{_GRAY}{os.getpid():<7} {_LEVEL_COLORS[level]}{_LEVEL_NAMES[level]:<5}{_RESET}"
        f" {_GRAY}{file}:{line}:{_RESET} "
    )


class Logger:
    """A log sink that is silent until set up."""

    def __init__(self) -> None:
        self.stream: Optional[TextIO] = None
        self.config = LogConfig()
        self._header = _header_simple
        self._needs_close = False

    def setup(self, stream: TextIO, settings: str, enable_colors: bool = False) -> None:
        """Start logging to stream with the given settings."""
        if self.stream is not None:
            warnx(NshError.OK, "tried to setup logging twice")
            return
        self.stream = stream
        self._header = _header_color if enable_colors else _header_simple
        self.config = LogConfig.parse(settings)

    def teardown(self) -> None:
        """Stop logging, closing the sink if this logger opened it."""
        if self.stream is None:
            return
        if self._needs_close:
            self.stream.close()
            self._needs_close = False
        self.stream = None
        self.config = LogConfig()

    def setup_environ(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Set up from the DEBUG and LOGFILE variables; log to stderr without LOGFILE."""
        env = os.environ if environ is None else environ
        settings = env.get("DEBUG")
        if settings is None:
            return
        logfile = env.get("LOGFILE")
        if logfile is None:
            self.setup(sys.stderr, settings, sys.stderr.isatty())
            return
        try:
            stream = open(logfile, "w+")
        except OSError:
            warn(NshError.IO_ERROR, "failed to initialize logger")
            return
        self._needs_close = True
        self.setup(stream, settings, False)

    def log(self, level, domain, file: str, line: int, message: str) -> None:
        """Write one log line if the configuration lets this level and domain through."""
        if self.stream is None:
            return
        level = LogLevel(level)
        if level is LogLevel.DISABLED:
            raise ValueError("cannot log at the DISABLED level")
        if not self.config.should_log(level, domain):
            return
        self.stream.write(self._header(level, file, line) + message + "\n")
        self.stream.flush()