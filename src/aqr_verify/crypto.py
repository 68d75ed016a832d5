from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding


def load_public_key(pem: bytes):
    # Certificates are only unwrapped for their key, never chain-validated.
    if b"BEGIN CERTIFICATE" in pem:
        return x509.load_pem_x509_certificate(pem).public_key()
    return serialization.load_pem_public_key(pem)


def verify_rsa_sha256(public_key_pem: bytes, message: bytes, signature: bytes) -> bool:
    pk = load_public_key(public_key_pem)
    try:
        pk.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
        return True
    except InvalidSignature:
        return False
