"""
JWT Security utilities for WTE admin authentication.
Handles token creation, verification, and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from wte_backend.core.config import settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token for an admin user.

    Args:
        user_id: The admin's ID, stored in the 'sub' claim
        expires_delta: Optional custom lifetime (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token string
    """
    issued_at = _utcnow()

    if expires_delta is not None:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(user_id),
        "exp": expire,
        "iat": issued_at,
        "type": "access",
    }

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def verify_token(token: str, token_type: str = "access") -> Optional[dict]:
    """
    Verify and decode a JWT token.

    Never raises: malformed, tampered, expired or wrong-type tokens all
    return None.

    Args:
        token: The JWT token to verify
        token_type: Expected token type

    Returns:
        Decoded payload if valid, None if invalid
    """
    if not token or not isinstance(token, str):
        return None

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    if payload.get("type") != token_type:
        return None

    # jose checks exp, but only when the claim is present
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or _utcnow() > datetime.fromtimestamp(exp, timezone.utc):
        return None

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub.isdigit():
        return None

    return payload


# =============================================================================
# Password Hashing (bcrypt)
# =============================================================================
import bcrypt

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes and newer releases reject longer input
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt with salt.

    Args:
        password: The plaintext password to hash

    Returns:
        The bcrypt hash string (includes salt and work factor)
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its bcrypt hash.

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False
