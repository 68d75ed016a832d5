"""Issuance timestamp formatting and restamping.

The issuer embeds IST wall-clock time as YYYYMMDDHHMMSSmmm inside the
reference id field.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from aqr_core.errors import FieldNotFoundError, QRFormatError
from aqr_core.protocol import (
    IST_OFFSET_SECONDS,
    SENTINEL,
    TIMESTAMP_LEN,
    TIMESTAMP_OFFSET,
    V2_TIMESTAMP_OFFSET,
    V2_TIMESTAMP_PREFIX_LEN,
)
from aqr_core.splice import splice_bytes


def _as_utc(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def format_timestamp(now: datetime | None = None) -> str:
    local = _as_utc(now) + timedelta(seconds=IST_OFFSET_SECONDS)
    return local.strftime("%Y%m%d%H%M%S") + f"{local.microsecond // 1000:03d}"


def parse_timestamp(text: str | bytes) -> int:
    """Unix seconds for a 17-digit timestamp produced by format_timestamp."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii")
    if len(text) != TIMESTAMP_LEN or not text.isdigit():
        raise ValueError(f"Timestamp must be {TIMESTAMP_LEN} digits, got {text!r}")
    local = datetime.strptime(text[:14], "%Y%m%d%H%M%S").replace(tzinfo=timezone.utc)
    return int((local - timedelta(seconds=IST_OFFSET_SECONDS)).timestamp())


def restamp_record(record: bytes, now: datetime | None = None) -> bytes:
    """Overwrite the embedded timestamp of a legacy record.

    The timestamp window must lie inside the reference id field.
    """
    window = bytes(record[TIMESTAMP_OFFSET:TIMESTAMP_OFFSET + TIMESTAMP_LEN])
    if len(window) < TIMESTAMP_LEN or SENTINEL in window:
        raise FieldNotFoundError(
            f"Reference id does not span timestamp bytes [{TIMESTAMP_OFFSET}, {TIMESTAMP_OFFSET + TIMESTAMP_LEN})"
        )
    stamp = format_timestamp(now).encode("ascii")
    out = splice_bytes(record, stamp, TIMESTAMP_OFFSET, TIMESTAMP_OFFSET + TIMESTAMP_LEN - 1)
    if out is record:
        raise QRFormatError("Timestamp splice was rejected")
    return out


def record_timestamp(record: bytes) -> int:
    """Hour-resolution issuance time of a V2 record, as Unix seconds."""
    raw = bytes(record[V2_TIMESTAMP_OFFSET:V2_TIMESTAMP_OFFSET + V2_TIMESTAMP_PREFIX_LEN]).decode("ascii")
    local = datetime.strptime(raw, "%Y%m%d%H").replace(tzinfo=timezone.utc)
    return int((local - timedelta(seconds=IST_OFFSET_SECONDS)).timestamp())


def parse_date_field(text: str) -> int:
    """Unix seconds for a DD-MM-YYYY date field, shifted by the IST offset."""
    day, month, year = (int(p) for p in text.split("-"))
    midnight = datetime(year, month, day, tzinfo=timezone.utc)
    return int(midnight.timestamp()) + IST_OFFSET_SECONDS
