"""AQR Core - Aadhaar QR framing, codec and splice primitives."""
from .codec import bytes_to_int, int_to_bytes, compress, decompress, decode_qr, encode_qr
from .errors import CodecError, FieldNotFoundError, InvalidRangeError, QRFormatError
from .fields import IdField
from .framing import split_fields, find_field_range, end_of_frame, read_field, read_fields, is_v2
from .splice import splice_bytes

__all__ = [
    "bytes_to_int",
    "int_to_bytes",
    "compress",
    "decompress",
    "decode_qr",
    "encode_qr",
    "CodecError",
    "FieldNotFoundError",
    "InvalidRangeError",
    "QRFormatError",
    "IdField",
    "split_fields",
    "find_field_range",
    "end_of_frame",
    "read_field",
    "read_fields",
    "is_v2",
    "splice_bytes",
]
