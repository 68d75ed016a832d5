"""Big-integer and DEFLATE codec for QR payloads."""
from __future__ import annotations

import zlib

from .errors import CodecError
from .protocol import DEFAULT_MAX_PAYLOAD_SIZE

# Accept both zlib and gzip headers on inflate
_AUTO_WBITS = zlib.MAX_WBITS | 32


def bytes_to_int(data: bytes) -> int:
    """Read `data` as an unsigned big-endian base-256 number."""
    return int.from_bytes(data, "big", signed=False)


def int_to_bytes(n: int) -> bytes:
    """Minimal big-endian encoding of `n`. Leading zero bytes are not recovered."""
    if n < 0:
        raise CodecError(f"Cannot encode negative integer {n}")
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


def compress(data: bytes) -> bytes:
    return zlib.compress(bytes(data))


def decompress(data: bytes, max_size: int = DEFAULT_MAX_PAYLOAD_SIZE) -> bytes:
    d = zlib.decompressobj(_AUTO_WBITS)
    try:
        out = d.decompress(bytes(data), max_size)
        if d.unconsumed_tail:
            raise CodecError(f"Decompressed payload exceeds limit {max_size}")
        out += d.flush()
    except zlib.error as e:
        raise CodecError(f"Corrupt compressed payload: {e}") from e
    if not d.eof:
        raise CodecError("Truncated compressed payload")
    return out


# Decimal text is converted in blocks so the interpreter's
# int/str digit limit (4300 by default) never applies.
_DIGIT_BLOCK = 1000
_BLOCK_BASE = 10 ** _DIGIT_BLOCK


def _decimal_to_int(text: str) -> int:
    head = len(text) % _DIGIT_BLOCK or _DIGIT_BLOCK
    chunks = [text[:head]] + [text[i:i + _DIGIT_BLOCK] for i in range(head, len(text), _DIGIT_BLOCK)]
    n = 0
    for chunk in chunks:
        n = n * 10 ** len(chunk) + int(chunk)
    return n


def _int_to_decimal(n: int) -> str:
    blocks: list[str] = []
    while n >= _BLOCK_BASE:
        n, low = divmod(n, _BLOCK_BASE)
        blocks.append(f"{low:0{_DIGIT_BLOCK}d}")
    blocks.append(str(n))
    return "".join(reversed(blocks))


def decode_qr(text: str) -> bytes:
    """Decimal QR string -> decompressed payload (record + signature)."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise CodecError("QR data must be a decimal integer string")
    return decompress(int_to_bytes(_decimal_to_int(text)))


def encode_qr(payload: bytes) -> str:
    """Payload -> compressed -> decimal string, the form printed on the QR."""
    return _int_to_decimal(bytes_to_int(compress(payload)))
