import io
import os

import pytest

from structsalad.formatting import printf


def _run(fmt, *args):
    buf = io.StringIO()
    count = printf(fmt, *args, stream=buf)
    return count, buf.getvalue()


def test_plain_text():
    count, out = _run("hello world")
    assert out == "hello world"
    assert count == len(out)


def test_string_conversion():
    count, out = _run("hello %s!", "world")
    assert out == "hello world!"
    assert count == len(out)


def test_null_string():
    count, out = _run("%s", None)
    assert out == "(null)"
    assert count == 6


def test_percent_literal():
    count, out = _run("100%%")
    assert out == "100%"
    assert count == 4


def test_char_conversion_from_int_and_str():
    count, out = _run("%c%c", ord("A"), "b")
    assert out == "Ab"
    assert count == 2


@pytest.mark.parametrize("value", [0, 7, -10, 2147483647, -2147483648])
def test_decimal_round_trip(value):
    count, out = _run("%d", value)
    assert int(out) == value
    assert count == len(out)


def test_integer_i_matches_d():
    assert _run("%i", -42)[1] == _run("%d", -42)[1] == "-42"


def test_decimal_wraps_to_32_bits():
    assert _run("%d", 2**32 + 5)[1] == "5"


def test_small_hex_of_negative():
    count, out = _run("%x", -10)
    assert out == "fffffff6"
    assert count == 8


def test_hex_cases_agree():
    _, low = _run("%x", 48879)
    _, high = _run("%X", 48879)
    assert high == low.upper()
    assert int(low, 16) == 48879


def test_unsigned_wraps_negative():
    _, out = _run("%u", -1)
    assert int(out) == 2**32 - 1


def test_null_pointer():
    count, out = _run("%p", 0)
    assert out == "(nil)"
    assert count == 5


def test_pointer_prefix_and_value():
    count, out = _run("%p", 255)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 255
    assert count == len(out)


def test_unknown_conversion_prints_nothing():
    count, out = _run("a%qb")
    assert out == "ab"
    assert count == 2


def test_trailing_percent_is_dropped():
    count, out = _run("ab%")
    assert out == "ab"
    assert count == 2


def test_none_format():
    assert printf(None) == -1


def test_missing_argument():
    with pytest.raises(TypeError):
        printf("%d %d", 1, stream=io.StringIO())


def test_writes_to_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        count = printf("n=%d", 12, stream=write_end)
        os.close(write_end)
        data = os.read(read_end, 100)
    finally:
        os.close(read_end)
    assert data == b"n=12"
    assert count == 4