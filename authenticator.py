# Description: Authenticator-app helpers for a derived TOTP seed (otpauth URI, current code, verification).

import os

import pyotp

ISSUER_NAME = os.environ.get("REALITYCHECK_ISSUER", "RealityCheck")


def get_totp_uri(secret: str, name: str, issuer: str = ISSUER_NAME) -> str:
    """Generates the TOTP URI for the Authenticator App."""
    return pyotp.totp.TOTP(secret).provisioning_uri(name=name, issuer_name=issuer)


def current_code(secret: str, for_time=None) -> str:
    """The 6-digit code both parties should be seeing right now."""
    totp = pyotp.TOTP(secret)
    if for_time is None:
        return totp.now()
    return totp.at(for_time)


def seconds_remaining(secret: str, for_time: int) -> int:
    totp = pyotp.TOTP(secret)
    return totp.interval - (int(for_time) % totp.interval)


def verify_code(secret: str, code: str, valid_window: int = 1, for_time=None) -> bool:
    """Check a code read out by the other party, allowing one step of clock drift."""
    return pyotp.TOTP(secret).verify(code, for_time=for_time, valid_window=valid_window)
