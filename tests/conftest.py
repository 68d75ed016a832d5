import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from aqr_synth.signer import RsaSigner

SENTINEL = b"\xff"

LEGACY_VALUES = [
    "3",                      # email/mobile indicator
    "1234" + "20190308114407437",
    "Sample Person",
    "01-01-1985",
    "M",
    "S/O Test Parent",
    "Bengaluru Urban",
    "",                       # landmark left empty on purpose
    "12",
    "Sector 5",
    "560001",
    "MG Road",
    "Karnataka",
    "Brigade Road",
    "",
    "Bengaluru",
]

# JPEG 2000 style header, so the photo itself carries sentinel-valued bytes
PHOTO = bytes([0xFF, 0x4F, 0xFF, 0x51]) + bytes(i % 255 for i in range(400))


def build_legacy_record(values=None, photo=PHOTO) -> bytes:
    values = LEGACY_VALUES if values is None else values
    return b"".join(v.encode("latin-1") + SENTINEL for v in values) + photo


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def signer(rsa_key):
    return RsaSigner(rsa_key)


@pytest.fixture(scope="session")
def public_pem(signer):
    return signer.public_key_pem()


@pytest.fixture
def legacy_record():
    return build_legacy_record()
