"""
Covid Portal Backend - Password & Token Unit Tests
====================================================

What:  Tests for the pure functions in covid_portal.auth.security.
How:   No database, no HTTP; secrets are passed explicitly.

What we test:
    ✅ bcrypt hashes verify against the right password only
    ✅ Unreadable stored hashes count as a mismatch
    ✅ A token issued for U verifies to exactly U
    ✅ Tokens carry no expiry
    ✅ Wrong secret, garbage, blank, unsigned and username-less tokens are rejected
"""

import jwt
import pytest

from covid_portal.auth.security import hash_password, issue_token, verify_password, verify_token
from covid_portal.exceptions import InvalidTokenError

SECRET = "unit-test-secret"


class TestPasswordHashing:
    """Tests for hash_password / verify_password."""

    def test_hash_is_not_plaintext(self):
        digest = hash_password("s3cret!")
        assert digest != "s3cret!"
        assert digest.startswith("$2")

    def test_same_password_gets_different_salts(self):
        assert hash_password("s3cret!") != hash_password("s3cret!")

    def test_verify_matching_password(self):
        digest = hash_password("s3cret!")
        assert verify_password("s3cret!", digest) is True

    def test_verify_wrong_password(self):
        digest = hash_password("s3cret!")
        assert verify_password("wrong", digest) is False

    def test_unreadable_hash_is_mismatch(self):
        """A stored value that is not a bcrypt digest should not raise."""
        assert verify_password("s3cret!", "plaintext-in-the-db") is False

    def test_blank_inputs_are_mismatch(self):
        assert verify_password("", hash_password("x")) is False
        assert verify_password("x", "") is False

    def test_blank_password_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_password("")


class TestTokens:
    """Tests for issue_token / verify_token."""

    def test_round_trip_identity(self):
        """A token issued for alice verifies to alice, exactly."""
        token = issue_token(secret=SECRET, username="alice")
        payload = verify_token(secret=SECRET, token=token)
        assert payload["username"] == "alice"

    def test_token_has_no_expiry(self):
        token = issue_token(secret=SECRET, username="alice")
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert "exp" not in claims
        assert "iat" in claims

    def test_wrong_secret_rejected(self):
        token = issue_token(secret="another-secret", username="alice")
        with pytest.raises(InvalidTokenError):
            verify_token(secret=SECRET, token=token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            verify_token(secret=SECRET, token="not.a.jwt")

    def test_blank_rejected(self):
        with pytest.raises(InvalidTokenError):
            verify_token(secret=SECRET, token="")

    def test_missing_username_rejected(self):
        token = jwt.encode({"sub": "alice"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            verify_token(secret=SECRET, token=token)

    def test_unsigned_token_rejected(self):
        """alg=none must never pass, even with a valid-looking payload."""
        token = jwt.encode({"username": "alice"}, None, algorithm="none")
        with pytest.raises(InvalidTokenError):
            verify_token(secret=SECRET, token=token)

    def test_error_message_is_uniform(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            verify_token(secret=SECRET, token="garbage")
        assert exc_info.value.message == "Invalid JWT Token"
        assert exc_info.value.status_code == 401

    def test_blank_secret_is_a_configuration_error(self):
        with pytest.raises(ValueError):
            issue_token(secret="", username="alice")
