import pytest

from aqr_core.errors import InvalidRangeError
from aqr_core.splice import splice_bytes


def test_inclusive_range_is_replaced():
    assert splice_bytes(b"abcdef", b"XY", 1, 3) == b"aXYef"
    assert splice_bytes(b"abcdef", b"", 0, 0) == b"bcdef"
    assert splice_bytes(b"abcdef", b"Z", 5, 5) == b"abcdeZ"


@pytest.mark.parametrize("start,end,replacement", [(0, 0, b""), (2, 7, b"123"), (3, 3, b"longer-than-range"), (0, 9, b"x")])
def test_length_law(start, end, replacement):
    record = b"0123456789"
    out = splice_bytes(record, replacement, start, end)
    assert len(out) == len(record) - (end - start + 1) + len(replacement)
    assert out[:start] == record[:start]
    assert out[start + len(replacement):] == record[end + 1:]


def test_accepts_bytearray():
    assert splice_bytes(bytearray(b"abc"), b"Z", 1, 1) == b"aZc"


@pytest.mark.parametrize("start,end", [(3, 2), (0, 6), (-1, 2), (6, 6)])
def test_invalid_range_is_a_noop(start, end):
    record = b"abcdef"
    with pytest.warns(InvalidRangeError):
        out = splice_bytes(record, b"XY", start, end)
    assert out is record


def test_invalid_range_error_is_value_error():
    assert issubclass(InvalidRangeError, ValueError)
    assert issubclass(InvalidRangeError, UserWarning)
