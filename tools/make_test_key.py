"""Generate the RSA-2048 test key pair used to re-sign fixtures.

Writes testPrivateKey.pem, testPublicKey.pem and a self-signed
testCertificate.pem into OUT_DIR. Never use these keys outside tests.
"""
from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

KEY_SIZE = 2048  # 256-byte signatures, as the QR format expects
CERT_DAYS = 3650


def generate_keys(out_dir: Path) -> Path:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    sk = rsa.generate_private_key(public_exponent=65537, key_size=KEY_SIZE)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "AQR Test Issuer")])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(sk.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + timedelta(days=CERT_DAYS))
        .sign(sk, hashes.SHA256())
    )

    (out / "testPrivateKey.pem").write_bytes(
        sk.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    (out / "testPublicKey.pem").write_bytes(
        sk.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )
    (out / "testCertificate.pem").write_bytes(cert.public_bytes(serialization.Encoding.PEM))

    print(f"GENERATED: {out}")
    return out


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if a]
    generate_keys(Path(args[0]) if args else Path("keys"))
