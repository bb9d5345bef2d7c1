# Description: Derives the shared TOTP seed from an ECDH secret using HKDF-SHA256.

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from realitycheck.encoding import base32_encode
from realitycheck.errors import CryptoUnavailable, DerivationFailure
from realitycheck.key_exchange import derive_shared_secret

HKDF_SALT = b"RealityCheck"
TOTP_SECRET_BYTES = 20  # 160 bits, standard TOTP secret length


def build_context(my_public_key_b64: str, their_public_key_b64: str) -> str:
    """Order-independent HKDF info string: both sides build the same one."""
    lower, higher = sorted([my_public_key_b64, their_public_key_b64])
    return f"TOTP:{lower}:{higher}"


def derive_totp_secret(shared_secret: bytes, context: str) -> bytes:
    """Derive the raw 20-byte TOTP secret with HKDF-SHA256."""
    try:
        kdf = HKDF(
            algorithm=hashes.SHA256(),
            length=TOTP_SECRET_BYTES,
            salt=HKDF_SALT,
            info=context.encode("utf-8"),
        )
        return kdf.derive(shared_secret)
    except UnsupportedAlgorithm as e:
        raise CryptoUnavailable(f"HKDF-SHA256 is not supported by this backend: {e}") from e
    except (TypeError, ValueError) as e:
        raise DerivationFailure(f"HKDF failed: {e}") from e


def derive_totp_seed(shared_secret: bytes, my_public_key_b64: str, their_public_key_b64: str) -> str:
    """Base32 TOTP seed for manual entry into an authenticator app."""
    context = build_context(my_public_key_b64, their_public_key_b64)
    return base32_encode(derive_totp_secret(shared_secret, context))


def generate_totp_secret(my_private_key, their_public_key, my_public_key_b64: str, their_public_key_b64: str) -> str:
    """ECDH with the peer, then derive the shared Base32 TOTP seed."""
    shared_secret = derive_shared_secret(my_private_key, their_public_key)
    return derive_totp_seed(shared_secret, my_public_key_b64, their_public_key_b64)
