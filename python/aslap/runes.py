from typing import BinaryIO, Iterator, Optional, Tuple

REPLACEMENT = "\ufffd"
REPLACEMENT_BYTES = REPLACEMENT.encode("utf-8")
DEFAULT_CHUNK_SIZE = 4096


def _sequence_shape(lead: int) -> Tuple[int, int, int]:
    """
    (length, lo, hi) for a UTF-8 lead byte, where lo..hi bounds the second byte.
    Length 0 means the byte can never start a character.
    """
    if lead < 0x80:
        return 1, 0, 0
    if 0xC2 <= lead <= 0xDF:
        return 2, 0x80, 0xBF
    if lead == 0xE0:
        return 3, 0xA0, 0xBF
    if lead == 0xED:
        # U+D800..U+DFFF are surrogates
        return 3, 0x80, 0x9F
    if 0xE1 <= lead <= 0xEF:
        return 3, 0x80, 0xBF
    if lead == 0xF0:
        return 4, 0x90, 0xBF
    if 0xF1 <= lead <= 0xF3:
        return 4, 0x80, 0xBF
    if lead == 0xF4:
        return 4, 0x80, 0x8F
    return 0, 0, 0


def decode_rune(buf: bytes, pos: int = 0, eof: bool = True) -> Optional[Tuple[str, int]]:
    """
    Decode the character starting at buf[pos].

    Returns (char, size). Invalid or truncated sequences give (U+FFFD, 1).
    Returns None when the buffered bytes are a valid prefix and more input
    could still complete them (only possible when eof is False).
    """
    lead = buf[pos]
    length, lo, hi = _sequence_shape(lead)
    if length == 0:
        return REPLACEMENT, 1
    if length == 1:
        return chr(lead), 1

    avail = len(buf) - pos
    for i in range(1, min(length, avail)):
        b = buf[pos + i]
        if i == 1:
            ok = lo <= b <= hi
        else:
            ok = 0x80 <= b <= 0xBF
        if not ok:
            return REPLACEMENT, 1

    if avail < length:
        if eof:
            return REPLACEMENT, 1
        return None
    return bytes(buf[pos:pos + length]).decode("utf-8"), length


def iter_runes(src: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[Tuple[str, bytes]]:
    """
    Yield (char, bytes to write) for every character of src, in order.
    Each invalid byte comes out as U+FFFD and its UTF-8 encoding.

    Reads with read1() when available so a pipe is handed over as soon as
    bytes arrive instead of waiting for a full chunk.
    """
    read = getattr(src, "read1", None) or src.read
    buf = bytearray()
    pos = 0
    eof = False

    while True:
        if pos < len(buf):
            decoded = decode_rune(buf, pos, eof)
            if decoded is not None:
                ch, size = decoded
                if ch == REPLACEMENT:
                    # malformed input is written as an encoded U+FFFD, one per bad byte
                    yield ch, REPLACEMENT_BYTES
                else:
                    yield ch, bytes(buf[pos:pos + size])
                pos += size
                continue
        elif eof:
            return

        del buf[:pos]
        pos = 0
        chunk = read(chunk_size)
        if not chunk:
            eof = True
            continue
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        buf += chunk
