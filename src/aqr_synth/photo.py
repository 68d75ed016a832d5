"""Photo sub-record location and scrubbing."""
from __future__ import annotations

import secrets

from aqr_core.framing import split_fields
from aqr_core.errors import FieldNotFoundError
from aqr_core.protocol import V2_PHOTO_SENTINELS
from aqr_core.splice import splice_bytes


def locate_photo(record: bytes, total_length: int, sentinel_count: int = V2_PHOTO_SENTINELS) -> tuple[int, int]:
    """Return (start, length) of the photo.

    `start` is the position of the sentinel closing the metadata; the photo
    occupies `record[start + 1:total_length]`.
    """
    _, delimiters = split_fields(record, sentinel_count)
    if len(delimiters) < sentinel_count:
        raise FieldNotFoundError(
            f"Photo boundary needs {sentinel_count} sentinels, record has {len(delimiters)}"
        )
    start = delimiters[-1]
    return start, max(0, total_length - start - 1)


def randomize_photo(
    record: bytes,
    total_length: int | None = None,
    sentinel_count: int = V2_PHOTO_SENTINELS,
) -> bytes:
    """Overwrite the photo with random bytes of the same length."""
    if total_length is None:
        total_length = len(record)
    start, length = locate_photo(record, total_length, sentinel_count)
    if length == 0:
        return record
    return splice_bytes(record, secrets.token_bytes(length), start + 1, start + length)
