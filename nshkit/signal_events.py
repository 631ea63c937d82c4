"""Signal event collection: a deduplicating signal list, a revision lookup table and a self-pipe."""

from __future__ import annotations

import os
import signal
import sys
import threading
from typing import Callable, Iterator

MAX_SIGNAL_NUMBER = 64
SIGNAL_READ_SIZE = 1024


def _check_signum(signum: int) -> int:
    signum = int(signum)
    if not 0 < signum < MAX_SIGNAL_NUMBER:
        raise ValueError(f"signal number out of range: {signum}")
    return signum


class SignalList:
    """The signals received since the last read, each listed once, in arrival order."""

    def __init__(self) -> None:
        self._signals: list[int] = []

    def add(self, signum: int) -> None:
        signum = _check_signum(signum)
        if signum in self._signals:
            return
        self._signals.append(signum)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._signals))

    def __len__(self) -> int:
        return len(self._signals)

    def __contains__(self, signum) -> bool:
        return signum in self._signals

    def __repr__(self) -> str:
        return f"SignalList({self._signals!r})"


class SignalLut:
    """A lookup table recording which signals arrived since the last read.

    Each signal handler call bumps a global revision and stamps it on the
    signal's slot; reading reports every slot whose stamp changed.
    """

    def __init__(self) -> None:
        # Reentrant so that a handler interrupting another one cannot deadlock.
        self._producer_lock = threading.RLock()
        self._producer_revision = 0
        self._consumer_revision = 0
        self._producer_signal_revision = [0] * MAX_SIGNAL_NUMBER
        self._consumer_signal_revision = [0] * MAX_SIGNAL_NUMBER

    def handler(self, signum: int) -> None:
        """Record the arrival of a signal."""
        signum = _check_signum(signum)
        with self._producer_lock:
            self._producer_revision += 1
            self._producer_signal_revision[signum] = self._producer_revision

    def read(self, events: SignalList) -> int:
        """Add the signals received since the last read to events; return its size."""
        cached_revision = self._producer_revision
        if cached_revision == self._consumer_revision:
            return len(events)

        for signum, (produced, consumed) in enumerate(
            zip(self._producer_signal_revision, self._consumer_signal_revision)
        ):
            if produced == consumed:
                continue
            events.add(signum)
            self._consumer_signal_revision[signum] = produced

        self._consumer_revision = cached_revision
        return len(events)


def _sig_warn(message: str) -> None:
    sys.stderr.write(message)


class SignalPipe:
    """A non-blocking pipe carrying one byte per received signal."""

    def __init__(self) -> None:
        self.consumer_fd = -1
        self.producer_fd = -1

    def open(self) -> int:
        """Create the pipe and return its reading end."""
        consumer, producer = os.pipe()
        for fd in (consumer, producer):
            os.set_inheritable(fd, False)
            os.set_blocking(fd, False)
        self.consumer_fd = consumer
        self.producer_fd = producer
        return consumer

    def write(self, signum: int) -> bool:
        """Queue a signal; return False if it could not be written."""
        signum = _check_signum(signum)
        try:
            wrote = os.write(self.producer_fd, bytes([signum]))
        except BlockingIOError:
            return False
        except OSError:
            _sig_warn("signal_lut_handler: unexpected write error\n")
            return False
        if wrote != 1:
            _sig_warn("signal_lut_handler: write returned an unexpected return value\n")
            return False
        return True

    def read(self, events: SignalList) -> SignalList:
        """Drain the pipe into events and return it; raise OSError on read failure."""
        while True:
            try:
                data = os.read(self.consumer_fd, SIGNAL_READ_SIZE)
            except BlockingIOError:
                break
            for signum in data:
                events.add(signum)
            if len(data) != SIGNAL_READ_SIZE:
                break
        return events

    def fileno(self) -> int:
        return self.consumer_fd

    def reset(self) -> None:
        """Forget the pipe descriptors without closing them."""
        self.consumer_fd = -1
        self.producer_fd = -1

    def close(self) -> None:
        for fd in (self.consumer_fd, self.producer_fd):
            if fd >= 0:
                os.close(fd)
        self.reset()

    def __enter__(self) -> "SignalPipe":
        if self.consumer_fd < 0:
            self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def setup_handler(signum: int, handler: Callable[[int], None]):
    """Install handler(signum) for a signal and return the previous handler.

    Interrupted system calls are retried, as with SA_RESTART.
    """

    def _trampoline(received: int, _frame) -> None:
        handler(received)

    return signal.signal(signum, _trampoline)