# Description: SHA-256 helpers and the public-key fingerprint used for verbal verification.

import hashlib

from realitycheck.encoding import b64decode, b64encode

FINGERPRINT_LENGTH = 16


def sha256_hash(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def calculate_fingerprint(public_key_b64: str) -> str:
    """First 16 chars of Base64(SHA-256(raw key)), uppercased. Advisory only."""
    digest = hashlib.sha256(b64decode(public_key_b64)).digest()
    return b64encode(digest)[:FINGERPRINT_LENGTH].upper()
