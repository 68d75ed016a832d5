"""Sentinel-delimited field framing.

A record is a run of fields separated by SENTINEL. Offsets shift after every
splice, so nothing here caches positions between calls.
"""
from __future__ import annotations

from .errors import FieldNotFoundError
from .fields import FIELD_NAMES, IdField, field_slot
from .protocol import LEGACY_FRAME_SENTINELS, SENTINEL, V2_MARKER, V2_PHOTO_SENTINELS

EMPTY_RANGE = (0, 0)


def split_fields(record: bytes, max_fields: int) -> tuple[list[bytes], list[int]]:
    """Split `record` into the fields closed by its first `max_fields` sentinels.

    Returns the fields and the absolute sentinel positions. Bytes after the
    last consumed sentinel (photo data) are not returned.
    """
    fields: list[bytes] = []
    delimiters: list[int] = []
    start = 0
    while len(delimiters) < max_fields:
        pos = record.find(SENTINEL, start)
        if pos == -1:
            break
        fields.append(bytes(record[start:pos]))
        delimiters.append(pos)
        start = pos + 1
    return fields, delimiters


def find_field_range(record: bytes, index: int) -> tuple[int, int]:
    """Locate the field opened by the `index`-th sentinel (zero-based).

    Returns (start, end): `start` is that sentinel's position and `end` the
    next sentinel's, so the body is `record[start + 1:end]`. A found range is
    never empty; EMPTY_RANGE means the field does not exist.
    """
    if index < 0:
        return EMPTY_RANGE

    seen = -1
    start = -1
    for i, b in enumerate(record):
        if b != SENTINEL:
            continue
        seen += 1
        if seen == index:
            start = i
        elif seen == index + 1:
            return start, i
    return EMPTY_RANGE


def end_of_frame(record: bytes, sentinel_count: int) -> int:
    """Index just after the `sentinel_count`-th sentinel."""
    _, delimiters = split_fields(record, sentinel_count)
    if len(delimiters) < sentinel_count:
        raise FieldNotFoundError(
            f"Record has {len(delimiters)} sentinels, frame needs {sentinel_count}"
        )
    return delimiters[-1] + 1 if delimiters else 0


def read_field(record: bytes, field: IdField, v2: bool = True) -> str:
    slot = field_slot(field, v2)
    fields, _ = split_fields(record, slot + 1)
    if len(fields) <= slot:
        raise FieldNotFoundError(f"Field {FIELD_NAMES[field]} missing: record has {len(fields)} fields")
    return fields[slot].decode("latin-1")


def read_fields(record: bytes, v2: bool = True) -> dict[str, str]:
    """Decode every metadata field present, keyed by display name.

    Legacy records have no phone suffix field, so it is absent from the result.
    """
    count = V2_PHOTO_SENTINELS if v2 else LEGACY_FRAME_SENTINELS
    fields, _ = split_fields(record, count)
    out: dict[str, str] = {}
    for field in IdField:
        slot = field_slot(field, v2)
        if slot < len(fields):
            out[FIELD_NAMES[field]] = fields[slot].decode("latin-1")
    return out


def is_v2(record: bytes) -> bool:
    return bytes(record[: len(V2_MARKER)]) == V2_MARKER
