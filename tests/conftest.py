import io
from types import SimpleNamespace

import pytest

from aslap import copier


@pytest.fixture
def sleeps(monkeypatch):
    """Record requested delays instead of sleeping."""
    slept = []
    monkeypatch.setattr(copier, "time", SimpleNamespace(sleep=slept.append))
    return slept


class RecordingWriter:
    """Keeps every write() call separately so tests can check character boundaries."""

    def __init__(self, fail_on=None):
        self.writes = []
        self.flushes = 0
        self.fail_on = fail_on

    def write(self, data):
        if self.fail_on is not None and self.fail_on in data:
            raise OSError("disk on fire")
        self.writes.append(bytes(data))
        return len(data)

    def flush(self):
        self.flushes += 1

    @property
    def data(self):
        return b"".join(self.writes)


@pytest.fixture
def writer():
    return RecordingWriter()


def text_stream(data: bytes):
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
