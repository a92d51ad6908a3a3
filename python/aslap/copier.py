import time
from typing import BinaryIO, Iterator

from .errors import ShortWriteError
from .flush import make_flush
from .patience import Patience
from .runes import DEFAULT_CHUNK_SIZE, iter_runes


def pace(src: BinaryIO, patience: Patience, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the raw bytes of each character of src, one character at a time.

    The delay for a character is slept when the consumer asks for the next
    one, i.e. after it has written and flushed this one. A consumer that
    stops early (failed write) never waits for the character it failed on.
    """
    for ch, raw in iter_runes(src, chunk_size):
        yield raw
        time.sleep(patience(ch))


def copy_runes_with_patience(dst, src: BinaryIO, patience: Patience,
                             chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """
    Copy src to dst character by character: write, flush, then wait.

    Returns the number of bytes written. Write and read errors propagate
    unchanged and end the copy; nothing is retried.
    """
    flush = make_flush(dst)
    written = 0

    for raw in pace(src, patience, chunk_size):
        n = dst.write(raw)
        if n is not None and n < len(raw):
            raise ShortWriteError(n, len(raw))
        written += len(raw)
        flush()

    return written
