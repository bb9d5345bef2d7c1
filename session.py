# Description: Holds the ephemeral keypair for one session and drives the exchange flow.
# Keys exist only in memory; nothing here is written to disk.

import logging
from enum import Enum
from typing import Iterable, NamedTuple, Optional

from realitycheck.envelope import decode_envelope, encode_envelope
from realitycheck.errors import RealityCheckError
from realitycheck.hashing import calculate_fingerprint
from realitycheck.key_derivation import generate_totp_secret
from realitycheck.key_exchange import export_public_key, generate_keypair, import_public_key


class SessionState(str, Enum):
    IDLE = "idle"
    KEYPAIR_READY = "keypair_ready"
    DISPLAYING_KEY = "displaying_key"
    SCANNING = "scanning"
    SECRET_REVEALED = "secret_revealed"


class KeyDisplay(NamedTuple):
    envelope: str
    fingerprint: str


class Session:
    def __init__(self):
        """Start idle with no keypair; one is generated on first need."""
        self.keypair = None
        self.public_key_b64 = None
        self.state = SessionState.IDLE

    @property
    def has_keypair(self) -> bool:
        return self.keypair is not None

    def ensure_keypair(self):
        """Generate the session keypair once and reuse it afterwards."""
        if self.keypair is None:
            keypair = generate_keypair()
            public_key_b64 = export_public_key(keypair.public_key)
            # Assigned together so a failed export leaves no half-set state
            self.keypair = keypair
            self.public_key_b64 = public_key_b64
            self.state = SessionState.KEYPAIR_READY
            logging.info("Ephemeral keypair generated")
        return self.keypair

    def show_my_key(self) -> KeyDisplay:
        """Envelope to render as a QR code plus the fingerprint to read aloud."""
        try:
            self.ensure_keypair()
            display = KeyDisplay(
                envelope=encode_envelope(self.public_key_b64),
                fingerprint=calculate_fingerprint(self.public_key_b64),
            )
        except RealityCheckError as e:
            self._fail("Error generating key", e)
            raise
        self.state = SessionState.DISPLAYING_KEY
        logging.info(f"Displaying key with fingerprint {display.fingerprint}")
        return display

    def start_scanning(self):
        try:
            self.ensure_keypair()
        except RealityCheckError as e:
            self._fail("Error generating key", e)
            raise
        self.state = SessionState.SCANNING

    def handle_scanned(self, payload: str) -> str:
        """
        Process one scanned payload and return the Base32 TOTP secret.

        Any failure resets the session to idle and is re-raised to the caller.
        The keypair is kept either way.
        """
        try:
            self.ensure_keypair()
            their_public_key_b64 = decode_envelope(payload)
            their_public_key = import_public_key(their_public_key_b64)
            totp_secret = generate_totp_secret(
                self.keypair.private_key,
                their_public_key,
                self.public_key_b64,
                their_public_key_b64,
            )
        except RealityCheckError as e:
            self._fail("Error processing QR code", e)
            raise
        self.state = SessionState.SECRET_REVEALED
        logging.info("TOTP secret generated")
        return totp_secret

    def scan(self, payloads: Iterable[str]) -> Optional[str]:
        """
        Consume decoded payloads from a scanner until the first one arrives.

        Like a camera scan, the first decoded code ends the scan whether or not
        it is valid. Returns None if the source ends without producing anything.
        """
        self.start_scanning()
        for payload in payloads:
            return self.handle_scanned(payload)
        logging.info("Scan ended without a code")
        self.done()
        return None

    def done(self):
        """Back to idle. The keypair stays for further exchanges this session."""
        self.state = SessionState.IDLE

    def _fail(self, message: str, error: Exception):
        logging.error(f"{message}: {error}")
        self.state = SessionState.IDLE
