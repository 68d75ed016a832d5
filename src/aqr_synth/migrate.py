"""Legacy -> V2 layout upgrade."""
from __future__ import annotations

from aqr_core.framing import end_of_frame
from aqr_core.protocol import LEGACY_FRAME_SENTINELS, MOCK_PHONE_SUFFIX, SENTINEL, V2_MARKER
from aqr_core.splice import splice_bytes


def upgrade_to_v2(record: bytes) -> bytes:
    """Prefix the "V2" marker field and add the mock phone suffix after VTC.

    The suffix offset is taken from the legacy record; the suffix is spliced
    in first so the later prefix cannot shift it.
    """
    frame_end = end_of_frame(record, LEGACY_FRAME_SENTINELS)

    # Rewrite the sentinel closing VTC as sentinel + suffix field
    closing = frame_end - 1
    out = splice_bytes(record, bytes([SENTINEL]) + MOCK_PHONE_SUFFIX, closing, closing)

    # Rewrite byte 0 as marker + byte 0
    return splice_bytes(out, V2_MARKER + out[:1], 0, 0)
