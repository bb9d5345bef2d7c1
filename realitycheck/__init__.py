# Description: Core key-exchange protocol for Reality Check (ECDH P-256 -> HKDF -> TOTP seed).
