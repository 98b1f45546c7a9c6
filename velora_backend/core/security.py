# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import MalformedTokenError, TokenExpiredError


# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    settings = get_settings()
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any], issued_at: Optional[int] = None) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (userId, name, email)
        issued_at: Unix timestamp to issue the token at, defaults to now

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    if issued_at is None:
        issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        TokenExpiredError: If the signature is valid but the token has expired
        MalformedTokenError: If the token cannot be decoded or verified
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError(str(e)) from e
    except InvalidTokenError as e:
        raise MalformedTokenError(str(e)) from e
