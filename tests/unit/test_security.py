"""
Unit tests for healense.core.security
"""
from healense.core.security import (
    generate_salt,
    generate_session_token,
    hash_password,
    verify_password,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword", generate_salt())
        assert isinstance(result, str)
        assert len(result) > 0

    def test_same_salt_same_hash(self):
        salt = generate_salt()
        assert hash_password("same", salt) == hash_password("same", salt)

    def test_different_salts_differ(self):
        assert hash_password("same", generate_salt()) != hash_password("same", generate_salt())

    def test_hash_not_equal_to_plain(self):
        assert hash_password("secret123", generate_salt()) != "secret123"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        salt = generate_salt()
        assert verify_password("correct", salt, hash_password("correct", salt)) is True

    def test_wrong_password_returns_false(self):
        salt = generate_salt()
        assert verify_password("wrong", salt, hash_password("correct", salt)) is False

    def test_wrong_salt_returns_false(self):
        salt = generate_salt()
        hashed = hash_password("correct", salt)
        assert verify_password("correct", generate_salt(), hashed) is False

    def test_corrupt_salt_returns_false(self):
        salt = generate_salt()
        hashed = hash_password("correct", salt)
        assert verify_password("correct", "not-a-salt", hashed) is False

    def test_long_password_round_trip(self):
        salt = generate_salt()
        password = "p" * 100
        hashed = hash_password(password, salt)
        assert verify_password(password, salt, hashed) is True

    def test_long_passwords_differing_after_72_bytes(self):
        salt = generate_salt()
        hashed = hash_password("p" * 72 + "a", salt)
        assert verify_password("p" * 72 + "b", salt, hashed) is False

    def test_multibyte_password_round_trip(self):
        salt = generate_salt()
        password = "\u00e9\u00e8\u4f60\u597d" * 30
        hashed = hash_password(password, salt)
        assert verify_password(password, salt, hashed) is True
        assert verify_password(password[:-1], salt, hashed) is False


class TestSessionToken:
    """Tests for generate_session_token"""

    def test_tokens_are_unique(self):
        tokens = {generate_session_token() for _ in range(50)}
        assert len(tokens) == 50

    def test_token_is_url_safe(self):
        token = generate_session_token()
        assert len(token) >= 43
        assert all(c.isalnum() or c in "-_" for c in token)
