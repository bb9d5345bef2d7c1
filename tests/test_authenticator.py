from authenticator import current_code, get_totp_uri, seconds_remaining, verify_code

# RFC 6238 SHA-1 seed "12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
SEED = "4GSSMUPWY7FKXMNSZUQK7XTLX3Y2QIS5"


def test_current_code_rfc6238_vector():
    assert current_code(RFC_SECRET, 59) == "287082"
    assert current_code(RFC_SECRET, 1111111109) == "081804"


def test_current_code_now_is_six_digits():
    code = current_code(SEED)
    assert len(code) == 6
    assert code.isdigit()


def test_both_parties_see_same_code():
    assert current_code(SEED, 1700000000) == current_code(SEED, 1700000000)


def test_verify_code_with_drift():
    code = current_code(SEED, 1700000000)
    assert verify_code(SEED, code, for_time=1700000000)
    assert verify_code(SEED, code, for_time=1700000030)
    assert not verify_code(SEED, code, for_time=1700000000 + 300)


def test_seconds_remaining():
    assert seconds_remaining(SEED, 60) == 30
    assert seconds_remaining(SEED, 89) == 1


def test_totp_uri():
    uri = get_totp_uri(SEED, "alice", issuer="RealityCheck")
    assert uri.startswith("otpauth://totp/RealityCheck:alice?")
    assert f"secret={SEED}" in uri
    assert "issuer=RealityCheck" in uri
