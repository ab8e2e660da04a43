"""
Security utilities for JWT authentication and password hashing.

Tokens are signed with the configured secret (HS256 by default) and carry
the claims {"username", "isAdmin", "exp"}. Passwords are hashed with bcrypt.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError
from app.core.config import Settings, settings


class TokenPayload(BaseModel):
    """Identity decoded from a verified token."""
    username: str
    isAdmin: bool = False


# Password hashing context (bcrypt)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_WORK_FACTOR,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Passwords longer than 72 bytes are truncated to fit bcrypt's limit.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def create_token(
    username: str,
    is_admin: bool,
    config: Settings = settings,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed JWT for a user.

    Args:
        username: Username claim
        is_admin: isAdmin claim
        config: Settings holding SECRET_KEY and ALGORITHM
        expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "username": username,
        "isAdmin": is_admin,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_token(token: str, config: Settings = settings) -> TokenPayload:
    """
    Verify a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is invalid, expired, or missing claims
    """
    payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    try:
        return TokenPayload.model_validate(payload)
    except ValidationError as e:
        raise JWTError(f"Invalid token claims: {e}") from e
