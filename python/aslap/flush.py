import os
from typing import Any, Callable


class Discard:
    """Write-only sink that accepts everything and keeps nothing."""

    def write(self, data: bytes) -> int:
        return len(data)


def _noop() -> None:
    pass


def make_flush(w: Any) -> Callable[[], None]:
    """
    Pick how to flush `w` once, up front, and return it as a zero-arg callable.

    Tried in order: flush(), sync(), os.fsync(fileno()), nothing.
    Failures are ignored; a flush that fails only affects when bytes show up.
    """
    flush = getattr(w, "flush", None)
    if callable(flush):
        def _flush() -> None:
            try:
                flush()
            except OSError:
                pass
        return _flush

    sync = getattr(w, "sync", None)
    if callable(sync):
        def _sync() -> None:
            try:
                sync()
            except OSError:
                pass
        return _sync

    fileno = getattr(w, "fileno", None)
    if callable(fileno):
        try:
            fd = fileno()
        except (OSError, ValueError):
            fd = None
        if isinstance(fd, int):
            def _fsync() -> None:
                try:
                    os.fsync(fd)
                except OSError:
                    # ttys and pipes refuse fsync
                    pass
            return _fsync

    return _noop
