from aqr_core.codec import decode_qr
from aqr_core.errors import QRFormatError
from aqr_core.framing import is_v2, read_fields, split_fields
from aqr_core.protocol import SIGNATURE_LEN, V2_MARKER, V2_PHOTO_SENTINELS
from .const import ERRORS
from .crypto import verify_rsa_sha256


def _fail(errors: list, code: str, **extra) -> dict:
    errors.append({"code": code, "message": ERRORS[code], **extra})
    return {"status": "FAIL", "error_count": len(errors), "errors": errors, "fields": {}}


def verify_fixture(qr_data: str, public_key_pem: bytes | None = None) -> dict:
    errors = []
    try:
        payload = decode_qr(qr_data)
    except QRFormatError as e:
        return _fail(errors, "E_QR_DECODE", detail=str(e))

    if len(payload) <= SIGNATURE_LEN:
        return _fail(errors, "E_PAYLOAD_SHORT", length=len(payload))
    record, signature = payload[:-SIGNATURE_LEN], payload[-SIGNATURE_LEN:]

    if not is_v2(record):
        return _fail(errors, "E_V2_MARKER", prefix=record[: len(V2_MARKER)].hex())

    _, delimiters = split_fields(record, V2_PHOTO_SENTINELS)
    if len(delimiters) < V2_PHOTO_SENTINELS:
        return _fail(errors, "E_LAYOUT_FIELDS", expected=V2_PHOTO_SENTINELS, found=len(delimiters))

    # Without a key only the layout is checked.
    if public_key_pem is not None and not verify_rsa_sha256(public_key_pem, record, signature):
        return _fail(errors, "E_SIG_INVALID")

    return {"status": "PASS", "error_count": 0, "errors": [], "fields": read_fields(record)}
