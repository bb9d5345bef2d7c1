# Description: Exceptions raised by the key-exchange protocol.


class RealityCheckError(Exception):
    """Base class for all protocol errors."""


class FormatError(RealityCheckError, ValueError):
    """Malformed envelope, bad Base64 or wrong decoded key length."""


class CurvePointError(RealityCheckError, ValueError):
    """Decoded bytes are not a valid point on P-256."""


class CryptoUnavailable(RealityCheckError):
    """The installed crypto backend does not support a required primitive."""


class DerivationFailure(RealityCheckError):
    """ECDH, HKDF or digest rejected its inputs."""
