"""Fixture reassembly: mutate, upgrade, sign, recompress."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from aqr_core.codec import decode_qr, encode_qr
from aqr_core.errors import CodecError
from aqr_core.protocol import LEGACY_PHOTO_SENTINELS, SIGNATURE_LEN

from .migrate import upgrade_to_v2
from .mutations import Mutations, apply_field_mutations
from .photo import randomize_photo
from .timestamps import restamp_record


class Signer(Protocol):
    def sign(self, data: bytes) -> bytes: ...


def split_signed_payload(payload: bytes) -> tuple[bytes, bytes]:
    """Split a decompressed QR payload into (record, signature)."""
    if len(payload) <= SIGNATURE_LEN:
        raise CodecError(f"Payload of {len(payload)} bytes is too short to carry a signature")
    return bytes(payload[:-SIGNATURE_LEN]), bytes(payload[-SIGNATURE_LEN:])


def synthesize_fixture(
    seed_record: bytes,
    mutations: Mutations | None,
    signer: Signer,
    now: datetime | None = None,
) -> str:
    """Build a signed V2 fixture from a legacy record and return its QR string.

    Steps run in a fixed order on the legacy layout, then the record is
    upgraded, signed and recompressed. Errors propagate unchanged.
    """
    mutations = mutations or Mutations()
    record = bytes(seed_record)

    record = apply_field_mutations(record, mutations)
    if mutations.photo:
        record = randomize_photo(record, len(record), LEGACY_PHOTO_SENTINELS)
    record = restamp_record(record, now)
    record = upgrade_to_v2(record)

    signature = signer.sign(record)
    return encode_qr(record + bytes(signature))


def synthesize_from_qr(
    qr_data: str,
    mutations: Mutations | None,
    signer: Signer,
    now: datetime | None = None,
) -> str:
    """Re-issue a signed legacy QR string as a V2 fixture signed by `signer`."""
    record, _ = split_signed_payload(decode_qr(qr_data))
    return synthesize_fixture(record, mutations, signer, now)
