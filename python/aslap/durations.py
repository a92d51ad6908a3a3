import re

from .errors import ConfigError

# nanoseconds per unit
UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_PLAIN_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_duration(text: str) -> float:
    """
    Parse "1s", "100ms", "1m30s" or a bare number of seconds into seconds.
    Negative durations are rejected since they cannot be slept.
    """
    s = str(text).strip()
    if not s:
        raise ConfigError("empty duration")
    if s.startswith("-"):
        raise ConfigError(f"negative duration {text!r}")
    s = s.lstrip("+")

    if _PLAIN_RE.fullmatch(s):
        return float(s)

    total = 0.0
    pos = 0
    for match in _PART_RE.finditer(s):
        if match.start() != pos:
            break
        value, unit = match.groups()
        total += float(value) * UNITS[unit]
        pos = match.end()
    if pos != len(s) or pos == 0:
        raise ConfigError(f"invalid duration {text!r}")
    return total / UNITS["s"]


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(seconds: float) -> str:
    """Render seconds compactly: 1.3s, 100ms, 2m0.5s."""
    ns = int(round(seconds * UNITS["s"]))
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < UNITS["us"]:
        return f"{sign}{ns}ns"
    if ns < UNITS["ms"]:
        return f"{sign}{_with_fraction(ns, UNITS['us'])}µs"
    if ns < UNITS["s"]:
        return f"{sign}{_with_fraction(ns, UNITS['ms'])}ms"

    hours, rest = divmod(ns, UNITS["h"])
    minutes, rest = divmod(rest, UNITS["m"])
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_with_fraction(rest, UNITS['s'])}s"
