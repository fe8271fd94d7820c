"""
Password hashing and JWT issuing/verification
"""
import logging
import uuid
from datetime import timedelta

import jwt
from passlib.context import CryptContext

from app.config.environments import (
    ACCESS_TOKEN_SECRET,
    REFRESH_TOKEN_SECRET,
    ACCESS_TOKEN_EXPIRY,
    REFRESH_TOKEN_EXPIRY,
    JWT_ALGORITHM,
)
from app.utility.exception import UnauthorizedError
from app.utility.time import utc_now

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    if not password or not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        # Unknown or corrupted hash format
        return False


def new_session_id() -> str:
    return uuid.uuid4().hex


def issue_access_token(user, session_id: str) -> str:
    now = utc_now()
    payload = {
        "sub": user.id,
        "email": user.email,
        "username": user.username,
        "fullName": user.full_name,
        "sid": session_id,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(seconds=ACCESS_TOKEN_EXPIRY),
    }
    return jwt.encode(payload, ACCESS_TOKEN_SECRET, algorithm=JWT_ALGORITHM)


def issue_refresh_token(user, session_id: str) -> str:
    now = utc_now()
    payload = {
        "sub": user.id,
        "sid": session_id,
        "jti": uuid.uuid4().hex,
        "type": REFRESH_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(seconds=REFRESH_TOKEN_EXPIRY),
    }
    return jwt.encode(payload, REFRESH_TOKEN_SECRET, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str, token_type: str) -> dict:
    """
    Decode and validate a signed token

    Args:
        token: Encoded JWT
        secret: Secret the token must be signed with
        token_type: Expected "type" claim ("access" or "refresh")

    Returns:
        dict: Decoded claims

    Raises:
        UnauthorizedError: TokenInvalid for expired, malformed, mis-signed
            or wrong-type tokens
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["sub", "exp", "sid"]}
        )
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected {token_type} token: {e}")
        raise UnauthorizedError(f"Invalid or expired {token_type} token", code="TokenInvalid")

    if claims.get("type") != token_type:
        raise UnauthorizedError(f"Invalid or expired {token_type} token", code="TokenInvalid")

    return claims


def verify_access_token(token: str) -> dict:
    return verify_token(token, ACCESS_TOKEN_SECRET, ACCESS_TOKEN_TYPE)


def verify_refresh_token(token: str) -> dict:
    return verify_token(token, REFRESH_TOKEN_SECRET, REFRESH_TOKEN_TYPE)


def read_session_id(refresh_token: str | None) -> str | None:
    """Session id of a stored refresh token, ignoring its expiry."""
    if not refresh_token:
        return None
    try:
        claims = jwt.decode(
            refresh_token,
            REFRESH_TOKEN_SECRET,
            algorithms=[JWT_ALGORITHM],
            options={"verify_exp": False}
        )
    except jwt.InvalidTokenError:
        return None
    return claims.get("sid")
