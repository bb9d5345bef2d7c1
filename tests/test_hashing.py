import hashlib

import pytest

from realitycheck.errors import FormatError
from realitycheck.hashing import calculate_fingerprint, sha256_hash
from realitycheck.key_exchange import export_public_key

from conftest import G_B64, TWO_G_B64


def test_fingerprint_known_keys():
    assert calculate_fingerprint(G_B64) == "AYVQY9XEO0RMP/FC"
    assert calculate_fingerprint(TWO_G_B64) == "QFMA61LG6JEZR3NI"


def test_fingerprint_shape(alice):
    fingerprint = calculate_fingerprint(export_public_key(alice.public_key))
    assert len(fingerprint) == 16
    assert fingerprint == fingerprint.upper()
    assert set(fingerprint) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+/")


def test_fingerprint_deterministic(alice):
    b64 = export_public_key(alice.public_key)
    assert calculate_fingerprint(b64) == calculate_fingerprint(b64)


def test_fingerprint_rejects_bad_base64():
    with pytest.raises(FormatError):
        calculate_fingerprint("%%%")


def test_sha256_hash():
    assert sha256_hash(b"abc") == hashlib.sha256(b"abc").hexdigest()
