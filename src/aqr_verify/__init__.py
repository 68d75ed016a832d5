"""AQR Verify - signature and layout checks for synthesized fixtures."""
from .logic import verify_fixture
from .crypto import verify_rsa_sha256

__all__ = ["verify_fixture", "verify_rsa_sha256"]
