"""Password hashing (Argon2id with a server-side pepper) and strength rules.

The pepper comes from PASSWORD_PEPPER and is never stored alongside the hash,
so a leaked database alone is not enough to brute-force passwords.
"""

import os
import re

from argon2 import PasswordHasher, Type
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHashError


# OWASP recommended parameters for Argon2id
_hasher = PasswordHasher(
    memory_cost=65536,  # 64 MB
    time_cost=3,
    parallelism=4,
    hash_len=32,
    salt_len=16,
    type=Type.ID
)

_STRENGTH_RULES = (
    (r'[A-Z]', "Password must contain at least one uppercase letter"),
    (r'[a-z]', "Password must contain at least one lowercase letter"),
    (r'\d', "Password must contain at least one digit"),
    (r'[^A-Za-z0-9]', "Password must contain at least one special character"),
)

MIN_PASSWORD_LENGTH = 8


def _get_pepper() -> str:
    """Read PASSWORD_PEPPER from the environment.

    Raises:
        ValueError: If PASSWORD_PEPPER is not set
    """
    pepper = os.getenv('PASSWORD_PEPPER')
    if not pepper:
        raise ValueError("PASSWORD_PEPPER environment variable is not set")
    return pepper


def hash_password(password: str) -> str:
    """Hash a password with Argon2id after appending the pepper.

    Returns:
        str: Encoded hash ($argon2id$v=19$m=65536,t=3,p=4$...)

    Raises:
        ValueError: If PASSWORD_PEPPER is not set or password is empty
    """
    if not password:
        raise ValueError("Password cannot be empty")

    return _hasher.hash(password + _get_pepper())


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored hash. Never raises on mismatch."""
    if not password or not password_hash:
        return False

    try:
        return _hasher.verify(password_hash, password + _get_pepper())
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def validate_password_strength(password: str) -> tuple[bool, str]:
    """Validate a new password.

    Requirements: at least 8 characters with an uppercase letter, a lowercase
    letter, a digit and a special character.

    Returns:
        (True, "") when valid, otherwise (False, first failing rule)

    Example:
        >>> validate_password_strength("weak")
        (False, 'Password must be at least 8 characters long')
        >>> validate_password_strength("SecureP@ss123")
        (True, '')
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"

    for pattern, message in _STRENGTH_RULES:
        if not re.search(pattern, password):
            return False, message

    return True, ""
