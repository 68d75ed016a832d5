"""AQR Synth - re-issue Aadhaar QR payloads as signed V2 test fixtures."""
from .assemble import synthesize_fixture, synthesize_from_qr, split_signed_payload
from .migrate import upgrade_to_v2
from .mutations import Mutations, replace_field
from .photo import locate_photo, randomize_photo
from .signer import RsaSigner
from .timestamps import format_timestamp, parse_timestamp, restamp_record, record_timestamp, parse_date_field

__all__ = [
    "synthesize_fixture",
    "synthesize_from_qr",
    "split_signed_payload",
    "upgrade_to_v2",
    "Mutations",
    "replace_field",
    "locate_photo",
    "randomize_photo",
    "RsaSigner",
    "format_timestamp",
    "parse_timestamp",
    "restamp_record",
    "record_timestamp",
    "parse_date_field",
]
