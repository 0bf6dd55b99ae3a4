"""Unit tests for JWT token generation and validation

Tests cover:
- Token creation with valid claims
- Token decoding and validation
- Token expiration handling
- Invalid token handling
- Environment configuration
"""

import time
from uuid import uuid4

import jwt
import pytest

from lostify.auth.jwt import (
    DEFAULT_EXPIRY_MINUTES,
    create_access_token,
    decode_token,
    get_jwt_expiry_minutes,
)

SECRET = "test-secret-key-256-bits-minimum-length-required-for-security"


def _token(**overrides) -> str:
    claims = {
        "user_id": uuid4(),
        "username": "alice",
        "role": "USER",
        "email": "alice@sst.scaler.com",
    }
    claims.update(overrides)
    return create_access_token(**claims)


class TestCreateAccessToken:
    """Test JWT token creation"""

    def test_token_contains_correct_claims(self, monkeypatch):
        """Test token payload contains all expected claims"""
        monkeypatch.setenv('JWT_SECRET', SECRET)
        user_id = uuid4()

        token = _token(user_id=user_id, role="ADMIN")

        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload['sub'] == str(user_id)
        assert payload['username'] == "alice"
        assert payload['role'] == "ADMIN"
        assert payload['email'] == "alice@sst.scaler.com"
        assert 'iat' in payload
        assert 'exp' in payload

    def test_default_expiry_is_seven_days(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)
        monkeypatch.delenv('JWT_EXPIRY_MINUTES', raising=False)

        payload = jwt.decode(_token(), options={"verify_signature": False})

        assert payload['exp'] - payload['iat'] == 7 * 24 * 60 * 60
        assert DEFAULT_EXPIRY_MINUTES == 10080

    def test_custom_expiry(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)
        monkeypatch.setenv('JWT_EXPIRY_MINUTES', '60')

        payload = jwt.decode(_token(), options={"verify_signature": False})

        assert payload['exp'] - payload['iat'] == 3600

    def test_invalid_expiry_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv('JWT_EXPIRY_MINUTES', 'soon')

        assert get_jwt_expiry_minutes() == DEFAULT_EXPIRY_MINUTES

    def test_missing_secret_raises(self, monkeypatch):
        monkeypatch.delenv('JWT_SECRET', raising=False)

        with pytest.raises(ValueError, match="JWT_SECRET"):
            _token()


class TestDecodeToken:
    """Test JWT token decoding and validation"""

    def test_round_trip(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)
        user_id = uuid4()

        payload = decode_token(_token(user_id=user_id))

        assert payload['sub'] == str(user_id)

    def test_expired_token_rejected(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)
        now = int(time.time())
        token = jwt.encode(
            {"sub": str(uuid4()), "iat": now - 120, "exp": now - 60},
            SECRET,
            algorithm='HS256'
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            decode_token(token)

    def test_wrong_secret_rejected(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)
        token = _token()

        monkeypatch.setenv('JWT_SECRET', 'another-secret-key-that-is-long-enough-for-hs256')
        with pytest.raises(jwt.InvalidSignatureError):
            decode_token(token)

    def test_garbage_token_rejected(self, monkeypatch):
        monkeypatch.setenv('JWT_SECRET', SECRET)

        with pytest.raises(jwt.InvalidTokenError):
            decode_token("not-a-jwt")
