from typing import Callable, TextIO

from .config import MAX_BITS, DelayParameters
from .durations import format_duration
from .errors import ConfigError

# a function that decides how long to wait after a character
Patience = Callable[[str], float]


def be_patient(bits: int, base: float, step: float) -> Patience:
    """
    Build the delay function: base + step * (low `bits` bits of the code point).
    The mask covers the whole code point, so characters past U+00FF work too.
    """
    if bits < 0 or bits > MAX_BITS:
        raise ConfigError(f"too many bits: {bits} (must be between 0 and {MAX_BITS})")
    mask = (1 << bits) - 1

    def patience(ch: str) -> float:
        return base + step * (mask & ord(ch))

    return patience


def be_patient_with(params: DelayParameters) -> Patience:
    return be_patient(params.bits, params.base, params.step)


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "\"": "\\\"",
}


def quote_char(ch: str) -> str:
    r"""Double-quoted literal; non-printable characters come out as \x, \u or \U escapes."""
    if ch in _ESCAPES:
        body = _ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    elif ord(ch) < 0x80:
        body = f"\\x{ord(ch):02x}"
    elif ord(ch) < 0x10000:
        body = f"\\u{ord(ch):04x}"
    else:
        body = f"\\U{ord(ch):08x}"
    return f'"{body}"'


def code_point(ch: str) -> str:
    return f"U+{ord(ch):04X}"


def print_impatiently(dst: TextIO, f: Patience) -> Patience:
    """
    Wrap `f` so every call prints `"c" U+XXXX delay` to dst.
    The returned delay is always exactly what `f` returned.
    """

    def patience(ch: str) -> float:
        delay = f(ch)
        print(f"{quote_char(ch)} {code_point(ch)} {format_duration(delay)}", file=dst, flush=True)
        return delay

    return patience
