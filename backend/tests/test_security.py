# backend/tests/test_security.py
from inquiry_desk.core.security import (
    DUMMY_PASSWORD_HASH,
    generate_session_token,
    hash_password,
    hash_token,
    verify_password,
)


def test_hash_password_is_salted():
    first = hash_password("correct horse")
    second = hash_password("correct horse")
    assert first != second
    assert first.startswith("$2")


def test_verify_password_matches():
    stored = hash_password("correct horse")
    assert verify_password("correct horse", stored) is True


def test_verify_password_rejects_wrong_password():
    stored = hash_password("correct horse")
    assert verify_password("battery staple", stored) is False


def test_verify_password_rejects_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_verify_password_long_passwords_use_first_72_bytes():
    password = "a" * 100
    stored = hash_password(password)
    assert verify_password(password, stored) is True


def test_dummy_hash_is_valid_bcrypt():
    assert DUMMY_PASSWORD_HASH.startswith("$2")
    assert verify_password("guess", DUMMY_PASSWORD_HASH) is False


def test_generate_session_token_returns_string():
    token = generate_session_token()
    assert isinstance(token, str)
    assert len(token) == 43  # base64 of 32 bytes


def test_generate_session_token_unique():
    assert generate_session_token() != generate_session_token()


def test_hash_token_is_stable_sha256():
    assert hash_token("abc") == hash_token("abc")
    assert len(hash_token("abc")) == 64
    assert hash_token("abc") != hash_token("abd")
