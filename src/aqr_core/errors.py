"""Error kinds raised or emitted by the QR transcoder."""


class QRFormatError(ValueError):
    """Base class for malformed QR payloads and framing failures."""


class CodecError(QRFormatError):
    """Big-integer text or compressed payload could not be decoded."""


class FieldNotFoundError(QRFormatError):
    """Record has fewer sentinels than the requested field needs."""


class InvalidRangeError(QRFormatError, UserWarning):
    """Splice bounds fall outside the buffer.

    Emitted through `warnings.warn`; the splice returns its input unchanged.
    """
