"""
aslap: as slow as possible.

Copies text character by character, sleeping after each one for a delay
derived from the low bits of its code point.
"""

from .config import DelayParameters, parameters_from_env
from .copier import copy_runes_with_patience, pace
from .durations import format_duration, parse_duration
from .errors import AslapError, ConfigError, ShortWriteError
from .flush import Discard, make_flush
from .patience import Patience, be_patient, be_patient_with, print_impatiently
from .runes import iter_runes

__all__ = [
    "AslapError",
    "ConfigError",
    "DelayParameters",
    "Discard",
    "Patience",
    "ShortWriteError",
    "be_patient",
    "be_patient_with",
    "copy_runes_with_patience",
    "format_duration",
    "iter_runes",
    "make_flush",
    "pace",
    "parameters_from_env",
    "parse_duration",
    "print_impatiently",
]
