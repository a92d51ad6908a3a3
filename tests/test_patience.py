import io

import pytest

from aslap import ConfigError, be_patient, be_patient_with, print_impatiently
from aslap.config import DelayParameters
from aslap.patience import quote_char


@pytest.mark.parametrize("bits", range(8))
def test_distinct_delays(bits):
    base, step = 1.0, 0.25
    f = be_patient(bits, base, step)
    delays = {f(chr(cp)) for cp in range(0x300)}
    assert delays == {base + step * k for k in range(2 ** bits)}


@pytest.mark.parametrize("bits", [8, 9, 32, -1])
def test_too_many_bits(bits):
    with pytest.raises(ConfigError):
        be_patient(bits, 1.0, 0.1)


def test_defaults():
    f = be_patient(3, 1.0, 0.1)
    # 'A' is 0x41, low three bits are 1
    assert f("A") == pytest.approx(1.1)
    assert f("@") == 1.0


def test_mask_applies_above_latin1():
    f = be_patient(3, 0.0, 1.0)
    assert f("€") == 0x20AC & 7
    assert f("😀") == 0x1F600 & 7


def test_pure():
    f = be_patient(5, 0.5, 0.01)
    assert [f(c) for c in "hello"] == [f(c) for c in "hello"]


def test_from_parameters():
    params = DelayParameters(base="250ms", step="10ms", bits=2)
    f = be_patient_with(params)
    assert f("C") == pytest.approx(0.25 + 0.01 * 3)


def test_print_impatiently_keeps_delay():
    inner = be_patient(3, 1.0, 0.1)
    out = io.StringIO()
    wrapped = print_impatiently(out, inner)
    for ch in "Az\n€":
        assert wrapped(ch) == inner(ch)
    lines = out.getvalue().splitlines()
    assert lines == [
        '"A" U+0041 1.1s',
        '"z" U+007A 1.2s',
        '"\\n" U+000A 1.2s',
        '"€" U+20AC 1.4s',
    ]


@pytest.mark.parametrize("ch, quoted", [
    ("A", '"A"'),
    ("€", '"€"'),
    ("\t", '"\\t"'),
    ('"', '"\\""'),
    ("\\", '"\\\\"'),
    ("\x00", '"\\x00"'),
    ("\x7f", '"\\x7f"'),
    ("\x85", '"\\u0085"'),
    ("\u2028", '"\\u2028"'),
    ("\U000e0001", '"\\U000e0001"'),
])
def test_quote_char_escapes_unprintable(ch, quoted):
    assert quote_char(ch) == quoted
