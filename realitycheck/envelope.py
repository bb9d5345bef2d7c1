# Description: The QR payload format exchanged between devices: REALITYCHECK:v1:<base64 public key>

from realitycheck.errors import FormatError

ENVELOPE_TAG = "REALITYCHECK"
ENVELOPE_VERSION = "v1"
ENVELOPE_PREFIX = f"{ENVELOPE_TAG}:{ENVELOPE_VERSION}:"


def encode_envelope(public_key_b64: str) -> str:
    return ENVELOPE_PREFIX + public_key_b64


def decode_envelope(text: str) -> str:
    """
    Extract the Base64 public key from a scanned payload.

    Only the exact v1 prefix is accepted; other versions are rejected rather
    than downgraded.
    """
    if not isinstance(text, str) or not text.startswith(ENVELOPE_PREFIX):
        raise FormatError("Invalid QR code format")
    parts = text.split(":")
    if len(parts) != 3:
        raise FormatError("Invalid QR code format")
    return parts[2]
