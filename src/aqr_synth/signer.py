"""Test-key signing of synthesized records."""
from __future__ import annotations

from pathlib import Path

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from aqr_core.protocol import SIGNATURE_LEN


class RsaSigner:
    """RSA PKCS#1 v1.5 over SHA-256, the issuer's signature scheme.

    Consumers strip a fixed SIGNATURE_LEN trailer, so only keys producing
    signatures of exactly that size are accepted.
    """

    def __init__(self, private_key: rsa.RSAPrivateKey):
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise ValueError("Signing key must be an RSA private key")
        if private_key.key_size // 8 != SIGNATURE_LEN:
            raise ValueError(
                f"RSA key of {private_key.key_size} bits gives {private_key.key_size // 8}-byte "
                f"signatures, format requires {SIGNATURE_LEN}"
            )
        self._key = private_key

    @classmethod
    def from_pem(cls, pem: bytes, password: bytes | None = None) -> "RsaSigner":
        return cls(serialization.load_pem_private_key(pem, password=password))

    @classmethod
    def from_pem_file(cls, path: Path, password: bytes | None = None) -> "RsaSigner":
        return cls.from_pem(Path(path).read_bytes(), password=password)

    def public_key_pem(self) -> bytes:
        return self._key.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def sign(self, data: bytes) -> bytes:
        return self._key.sign(bytes(data), padding.PKCS1v15(), hashes.SHA256())
