"""Dispatch of received signals to registered handlers."""

from __future__ import annotations

import signal
from typing import Callable, Optional

from nshkit.errors import NshError, warn
from nshkit.signal_events import (
    MAX_SIGNAL_NUMBER,
    SignalList,
    SignalLut,
    SignalPipe,
    setup_handler,
)


def _check_signum(signum: int) -> int:
    signum = int(signum)
    if not 0 <= signum < MAX_SIGNAL_NUMBER:
        raise ValueError(f"signal number out of range: {signum}")
    return signum


class SignalHandler:
    """A callback that handles one signal.

    handle(handler) returns a falsy value to let later handlers run, or a
    truthy status that stops dispatch and is returned by it.
    """

    def __init__(self, handle: Callable[["SignalHandler"], int]) -> None:
        self.handle = handle
        self.manager: Optional[SignalManager] = None
        self.signum: Optional[int] = None

    def remove(self) -> None:
        """Unregister from the manager; the last handler of a signal disables it."""
        if self.manager is None or self.signum is None:
            raise RuntimeError("signal handler is not registered")
        manager, signum = self.manager, self.signum
        handlers = manager._handlers[signum]
        handlers.remove(self)
        self.manager = None
        if not handlers:
            manager._signal_disabled(signum)


class SignalManager:
    """Keeps per-signal handler lists and dispatches signals to them.

    The enabled callback runs when a signal gets its first handler and the
    disabled callback when it loses its last one. It does not talk to the
    operating system itself. Process creation is supplied by the caller as
    fork_func, which returns the child's pid in the parent and 0 in the child.
    """

    def __init__(
        self,
        signal_enabled: Optional[Callable[[int], None]] = None,
        signal_disabled: Optional[Callable[[int], None]] = None,
        pre_fork_hook: Optional[Callable[[], None]] = None,
        post_fork_hook: Optional[Callable[[int], None]] = None,
        fork_func: Optional[Callable[[], int]] = None,
    ) -> None:
        self._handlers: list[list[SignalHandler]] = [[] for _ in range(MAX_SIGNAL_NUMBER)]
        self._enabled_cb = signal_enabled
        self._disabled_cb = signal_disabled
        self._pre_fork_cb = pre_fork_hook
        self._post_fork_cb = post_fork_hook
        self._fork_func = fork_func

    def _signal_enabled(self, signum: int) -> None:
        if self._enabled_cb is not None:
            self._enabled_cb(signum)

    def _signal_disabled(self, signum: int) -> None:
        if self._disabled_cb is not None:
            self._disabled_cb(signum)

    def _pre_fork(self) -> None:
        if self._pre_fork_cb is not None:
            self._pre_fork_cb()

    def _post_fork(self, pid: int) -> None:
        if self._post_fork_cb is not None:
            self._post_fork_cb(pid)

    def setup_handler(self, handler: SignalHandler, signum: int, head: bool = False) -> None:
        """Register handler for signum, first in line if head is set."""
        signum = _check_signum(signum)
        handlers = self._handlers[signum]
        handler.signum = signum
        handler.manager = self
        if head:
            handlers.insert(0, handler)
        else:
            handlers.append(handler)
        if len(handlers) == 1:
            self._signal_enabled(signum)

    def dispatch(self, signum: int) -> int:
        """Run the handlers of signum in order; return the first truthy status, or 0."""
        signum = _check_signum(signum)
        for handler in list(self._handlers[signum]):
            rc = handler.handle(handler)
            if rc:
                return rc
        return 0

    def fork(self) -> int:
        """Run the configured fork function with the fork hooks around it."""
        if self._fork_func is None:
            raise RuntimeError("no fork function configured")
        self._pre_fork()
        pid = self._fork_func()
        self._post_fork(pid)
        return pid


def _signal_name(signum: int) -> str:
    return signal.strsignal(signum) or f"signal {signum}"


class PipeSignalManager(SignalManager):
    """A signal manager that installs OS handlers feeding a self-pipe.

    Signals that cannot be written to the pipe are kept in a lookup table,
    so none is lost.
    """

    def __init__(self) -> None:
        super().__init__()
        self._pipe = SignalPipe()
        self._lut = SignalLut()
        self._saved: dict[int, object] = {}
        self._pipe.open()

    def _on_signal(self, signum: int) -> None:
        if self._pipe.write(signum):
            return
        self._lut.handler(signum)

    def _signal_enabled(self, signum: int) -> None:
        try:
            self._saved[signum] = setup_handler(signum, self._on_signal)
        except (OSError, ValueError):
            warn(NshError.IO_ERROR, f"failed to setup the {_signal_name(signum)} handler")

    def _signal_disabled(self, signum: int) -> None:
        if signum not in self._saved:
            return
        old = self._saved.pop(signum)
        try:
            signal.signal(signum, signal.SIG_DFL if old is None else old)
        except (OSError, ValueError):
            warn(NshError.IO_ERROR, f"failed to restore the {_signal_name(signum)} handler")

    def read(self) -> SignalList:
        """Collect the signals received since the last read."""
        events = SignalList()
        self._pipe.read(events)
        self._lut.read(events)
        return events

    def fileno(self) -> int:
        """The descriptor that becomes readable when a signal arrives."""
        return self._pipe.fileno()

    def close(self) -> None:
        """Restore the original OS handlers and close the pipe."""
        for signum in list(self._saved):
            self._signal_disabled(signum)
        self._pipe.close()

    def __enter__(self) -> "PipeSignalManager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()