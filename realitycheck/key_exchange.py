# Description: Ephemeral ECDH (P-256) keypairs, raw-point public key transport and shared-secret derivation.

from typing import NamedTuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from realitycheck.encoding import b64decode, b64encode
from realitycheck.errors import CryptoUnavailable, CurvePointError, DerivationFailure, FormatError

CURVE = ec.SECP256R1
RAW_PUBLIC_KEY_BYTES = 65  # 0x04 || X || Y
SHARED_SECRET_BYTES = 32


class Keypair(NamedTuple):
    private_key: ec.EllipticCurvePrivateKey
    public_key: ec.EllipticCurvePublicKey


def generate_keypair() -> Keypair:
    """Generate a fresh P-256 keypair from the OpenSSL CSPRNG."""
    try:
        private_key = ec.generate_private_key(CURVE())
    except UnsupportedAlgorithm as e:
        raise CryptoUnavailable(f"P-256 is not supported by this backend: {e}") from e
    return Keypair(private_key, private_key.public_key())


def export_public_key(public_key: ec.EllipticCurvePublicKey) -> str:
    """Serialize a public key as Base64 of its uncompressed X9.62 point."""
    raw = public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    return b64encode(raw)


def import_public_key(public_key_b64: str) -> ec.EllipticCurvePublicKey:
    """
    Load a peer's Base64 raw-point public key.

    Raises FormatError if the text is not Base64 or does not decode to
    exactly 65 bytes, and CurvePointError if the bytes are not a point on P-256.
    """
    raw = b64decode(public_key_b64)
    if len(raw) != RAW_PUBLIC_KEY_BYTES:
        raise FormatError(
            f"Public key must be {RAW_PUBLIC_KEY_BYTES} bytes, got {len(raw)}"
        )
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE(), raw)
    except ValueError as e:
        raise CurvePointError(f"Not a valid P-256 point: {e}") from e


def derive_shared_secret(private_key, peer_public_key) -> bytes:
    """ECDH: returns the 32-byte x-coordinate of private * peer_public."""
    try:
        shared_secret = private_key.exchange(ec.ECDH(), peer_public_key)
    except UnsupportedAlgorithm as e:
        raise CryptoUnavailable(f"ECDH is not supported by this backend: {e}") from e
    except (ValueError, TypeError) as e:
        raise DerivationFailure(f"ECDH failed: {e}") from e
    if len(shared_secret) != SHARED_SECRET_BYTES:
        raise DerivationFailure(f"Unexpected shared secret length {len(shared_secret)}")
    return shared_secret
