# Description: Base64 transport encoding for public keys and Base32 encoding for TOTP seeds.

import base64
import binascii

from realitycheck.errors import FormatError


def b64encode(data: bytes) -> str:
    """Standard Base64 with padding, as carried in the QR envelope."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """Strict Base64 decode. Raises FormatError on anything that is not Base64."""
    if not isinstance(text, str):
        raise FormatError("Base64 input must be a string")
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise FormatError(f"Invalid Base64: {e}") from e


def base32_encode(data: bytes, pad: bool = False) -> str:
    """
    RFC 4648 Base32 (A-Z, 2-7), most significant bit first.

    A trailing group shorter than 5 bits is filled with zero bits on the
    right. Padding characters are stripped unless pad=True.
    """
    encoded = base64.b32encode(bytes(data)).decode("ascii")
    if pad:
        return encoded
    return encoded.rstrip("=")
