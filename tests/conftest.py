import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from realitycheck.key_exchange import Keypair, generate_keypair

# Base64 raw points of 1*G and 2*G on P-256
G_B64 = "BGsX0fLhLEJH+Lzm5WOkQPJ3A32BLeszoPShOUXYmMKWT+NC4v4af5uO5+tKfA+eFivOM1drMV7Oy7ZAaDe/UfU="
TWO_G_B64 = "BHzyexiNA09+ilI4AwS1GsPAiWnid/IbNaYLSPxHZpl4B3dVENuO0EApPZrGn3Qw27p9reY86YIpngS3nSJ4c9E="


def _fixed_keypair(scalar):
    private_key = ec.derive_private_key(scalar, ec.SECP256R1())
    return Keypair(private_key, private_key.public_key())


@pytest.fixture
def alice():
    return generate_keypair()


@pytest.fixture
def bob():
    return generate_keypair()


@pytest.fixture
def scalar_one():
    return _fixed_keypair(1)


@pytest.fixture
def scalar_two():
    return _fixed_keypair(2)
