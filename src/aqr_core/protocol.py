"""Aadhaar QR format constants.

Single source of truth for sentinel values, fixed offsets and record layouts.
Synthesizer and verifier must remain synchronized on these.
"""

from .fields import IdField

# Field delimiter, never a valid content byte
SENTINEL = 0xFF

# RSA-2048 signature appended after the signed record
SIGNATURE_LEN = 256

# Legacy layout: [Header | RefId(4 digits + timestamp) | ... | VTC] then photo
# Header(1) + Sentinel(1) + last 4 digits of the reference id = 6
TIMESTAMP_OFFSET = 6
TIMESTAMP_LEN = 17  # YYYYMMDDHHMMSSmmm

# V2 framing
V2_MARKER = b"V2" + bytes([SENTINEL])
MOCK_PHONE_SUFFIX = b"1234" + bytes([SENTINEL])
V2_GROWTH = len(V2_MARKER) + len(MOCK_PHONE_SUFFIX)

# Hour-resolution timestamp prefix as read back from a V2 record
V2_TIMESTAMP_OFFSET = TIMESTAMP_OFFSET + len(V2_MARKER)
V2_TIMESTAMP_PREFIX_LEN = 10  # YYYYMMDDHH

# Sentinel counts, derived from the field table.
# Legacy records lack both the V2 marker and the phone suffix field.
METADATA_FIELDS = len(IdField)
LEGACY_FRAME_SENTINELS = METADATA_FIELDS - 1
V2_PHOTO_SENTINELS = METADATA_FIELDS + 1
LEGACY_PHOTO_SENTINELS = LEGACY_FRAME_SENTINELS

# Issuance time is India Standard Time
IST_OFFSET_SECONDS = 5 * 3600 + 30 * 60

# Decompression safety bound
DEFAULT_MAX_PAYLOAD_SIZE = 1024 * 1024  # 1 MiB

if V2_MARKER.count(SENTINEL) + MOCK_PHONE_SUFFIX.count(SENTINEL) != V2_PHOTO_SENTINELS - LEGACY_PHOTO_SENTINELS:
    raise RuntimeError("V2 framing must add one field per inserted sentinel")
