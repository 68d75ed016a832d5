"""Byte-range replacement, the single mutation primitive."""
from __future__ import annotations

from warnings import warn

from .errors import InvalidRangeError


def splice_bytes(record: bytes, replacement: bytes, start: int, end: int) -> bytes:
    """Replace `record[start..end]` (both bounds inclusive) with `replacement`.

    The inclusive upper bound is relied on by every caller's offset math.
    On bounds violation an InvalidRangeError warning is emitted and `record`
    is returned unchanged; callers detect failure by identity of the output.
    """
    if start < 0 or end >= len(record) or start > end:
        warn(
            InvalidRangeError(f"Invalid splice range [{start}, {end}] for buffer of length {len(record)}"),
            stacklevel=2,
        )
        return record

    return bytes(record[:start]) + bytes(replacement) + bytes(record[end + 1:])
