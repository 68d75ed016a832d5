"""Personal-data field mutations."""
from __future__ import annotations

from dataclasses import dataclass

from aqr_core.errors import FieldNotFoundError, QRFormatError
from aqr_core.fields import FIELD_NAMES, IdField, field_slot
from aqr_core.framing import EMPTY_RANGE, find_field_range
from aqr_core.protocol import SENTINEL
from aqr_core.splice import splice_bytes

ENCODING = "latin-1"


@dataclass(frozen=True)
class Mutations:
    """Requested changes; None (or photo=False) leaves the record as issued."""

    dob: str | None = None  # DD-MM-YYYY
    gender: str | None = None
    pincode: str | None = None
    state: str | None = None
    photo: bool = False

    def field_values(self) -> list[tuple[IdField, str]]:
        wanted = [
            (IdField.DOB, self.dob),
            (IdField.GENDER, self.gender),
            (IdField.PIN_CODE, self.pincode),
            (IdField.STATE, self.state),
        ]
        return [(f, v) for f, v in wanted if v is not None]


def _encode(field: IdField, value: str) -> bytes:
    data = value.encode(ENCODING)
    if SENTINEL in data:
        raise QRFormatError(f"Value for {FIELD_NAMES[field]} contains the sentinel byte")
    return data


def replace_field(record: bytes, field: IdField, value: str, v2: bool = False) -> bytes:
    """Replace the body of `field`, shifting everything after it.

    Positions are looked up on the buffer as it is now, so earlier splices of
    different length are accounted for.
    """
    data = _encode(field, value)
    opening = field_slot(field, v2) - 1

    if opening < 0:
        # Header field has no opening sentinel
        first = record.find(SENTINEL)
        if first == -1:
            raise FieldNotFoundError("Record has no sentinel")
        if first == 0:
            return splice_bytes(record, data + bytes([SENTINEL]), 0, 0)
        return splice_bytes(record, data, 0, first - 1)

    start, end = find_field_range(record, opening)
    if (start, end) == EMPTY_RANGE:
        raise FieldNotFoundError(f"Field {FIELD_NAMES[field]} not found")

    if end - start > 1:
        return splice_bytes(record, data, start + 1, end - 1)
    # Empty body: rewrite the opening sentinel instead
    return splice_bytes(record, bytes([SENTINEL]) + data, start, start)


def apply_field_mutations(record: bytes, mutations: Mutations) -> bytes:
    for field, value in mutations.field_values():
        record = replace_field(record, field, value)
    return record
