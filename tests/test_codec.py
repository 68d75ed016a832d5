import gzip
import os
import zlib

import pytest

from aqr_core.codec import (
    _decimal_to_int,
    _int_to_decimal,
    bytes_to_int,
    compress,
    decode_qr,
    decompress,
    encode_qr,
    int_to_bytes,
)
from aqr_core.errors import CodecError
from aqr_core.framing import split_fields
from aqr_core.protocol import LEGACY_FRAME_SENTINELS, SIGNATURE_LEN
from aqr_synth.sample import SAMPLE_QR_DATA


def test_big_endian_conversion():
    assert bytes_to_int(b"\x01\x00") == 256
    assert int_to_bytes(256) == b"\x01\x00"
    assert int_to_bytes(0) == b"\x00"
    assert bytes_to_int(b"") == 0


def test_leading_zero_bytes_are_not_recovered():
    n = bytes_to_int(b"\x00\x00\x07abc")
    assert int_to_bytes(n) == b"\x07abc"
    assert bytes_to_int(int_to_bytes(n)) == n


def test_large_integer_round_trip():
    data = b"\x01" + bytes(range(256)) * 3
    assert int_to_bytes(bytes_to_int(data)) == data


def test_negative_integer_rejected():
    with pytest.raises(CodecError):
        int_to_bytes(-1)


def test_compress_round_trip():
    data = b"hello\xffworld\xff" * 50
    assert decompress(compress(data)) == data
    assert compress(data)[:1] == b"\x78"  # zlib header


def test_decompress_accepts_gzip():
    assert decompress(gzip.compress(b"payload")) == b"payload"


def test_decompress_corrupt_input():
    with pytest.raises(CodecError):
        decompress(b"definitely not deflate")


def test_decompress_truncated_input():
    blob = zlib.compress(bytes(range(256)) * 20)
    with pytest.raises(CodecError):
        decompress(blob[: len(blob) // 2])


def test_decompress_size_limit():
    with pytest.raises(CodecError):
        decompress(compress(b"\x00" * 5000), max_size=1000)


def test_qr_string_round_trip():
    payload = b"3\xff1234\xffName\xff" + b"\x00" * 10
    text = encode_qr(payload)
    assert text.isdigit()
    assert decode_qr(text) == payload
    assert decode_qr(f"  {text}\n") == payload


@pytest.mark.parametrize("text", ["", "12a4", "-123", "１２３"])
def test_decode_qr_rejects_non_decimal(text):
    with pytest.raises(CodecError):
        decode_qr(text)


def test_sample_decodes_to_legacy_record():
    payload = decode_qr(SAMPLE_QR_DATA)
    assert len(payload) > SIGNATURE_LEN
    _, delimiters = split_fields(payload[:-SIGNATURE_LEN], LEGACY_FRAME_SENTINELS)
    assert len(delimiters) == LEGACY_FRAME_SENTINELS


def test_qr_string_beyond_default_digit_limit():
    payload = bytes((i * 7919 + 13) % 256 for i in range(2000)) + os.urandom(2000)
    text = encode_qr(payload)
    assert len(text) > 4300
    assert decode_qr(text) == payload


@pytest.mark.parametrize("digits", [2, 999, 1000, 1001, 2500, 4301])
def test_block_conversion_keeps_every_digit(digits):
    text = "9" + "0" * (digits - 2) + "7"
    n = _decimal_to_int(text)
    assert n == 9 * 10 ** (digits - 1) + 7
    assert _int_to_decimal(n) == text


def test_block_conversion_small_values():
    assert _int_to_decimal(0) == "0"
    assert _decimal_to_int("000123") == 123


def test_oversized_garbage_is_codec_error():
    with pytest.raises(CodecError):
        decode_qr("1" * 5000)
