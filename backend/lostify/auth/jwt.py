"""JWT token generation and validation

Access tokens are signed with HS256 using JWT_SECRET and carry:

- sub: User ID as UUID string
- username: Login name, shown in the UI
- role: "USER" | "ADMIN"
- email: Institutional email address
- iat / exp: Issue and expiry timestamps (JWT_EXPIRY_MINUTES, default 7 days)

Validation is stateless; `get_current_user` still loads the user so that
disabled accounts are rejected immediately.
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
from uuid import UUID

import jwt

DEFAULT_EXPIRY_MINUTES = 7 * 24 * 60


def _get_jwt_secret() -> str:
    """Get JWT_SECRET from environment.

    Raises:
        ValueError: If JWT_SECRET is not set
    """
    secret = os.getenv('JWT_SECRET')
    if not secret:
        raise ValueError("JWT_SECRET environment variable is not set")
    return secret


def get_jwt_expiry_minutes() -> int:
    """Token lifetime in minutes from JWT_EXPIRY_MINUTES (default 7 days)."""
    expiry = os.getenv('JWT_EXPIRY_MINUTES', str(DEFAULT_EXPIRY_MINUTES))
    try:
        return int(expiry)
    except ValueError:
        return DEFAULT_EXPIRY_MINUTES


def create_access_token(
    user_id: UUID,
    username: str,
    role: str,
    email: str
) -> str:
    """Create a signed access token for an authenticated user.

    Raises:
        ValueError: If JWT_SECRET is not set
    """
    secret = _get_jwt_secret()

    now = datetime.now(timezone.utc)
    expiration = now + timedelta(minutes=get_jwt_expiry_minutes())

    payload = {
        'sub': str(user_id),
        'username': username,
        'role': role,
        'email': email,
        'iat': int(now.timestamp()),
        'exp': int(expiration.timestamp())
    }

    return jwt.encode(payload, secret, algorithm='HS256')


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Returns:
        dict: Decoded token payload with claims

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or tampered
        ValueError: If JWT_SECRET is not set
    """
    secret = _get_jwt_secret()
    return jwt.decode(token, secret, algorithms=['HS256'])
