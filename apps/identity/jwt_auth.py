"""
JWT utilities for the task tracker.

Provides token generation and validation for stateless bearer
authentication. The signing secret is always passed in by the caller
(the auth gate owns it); nothing here reads settings.
"""
import logging
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional


logger = logging.getLogger(__name__)

# JWT Configuration
JWT_ALGORITHM = 'HS256'
ACCESS_TOKEN_EXPIRE_HOURS = 12


def create_access_token(subject: str, secret: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token.

    Carries only the subject (the login username) and the validity window.
    Expires in 12 hours unless `expires_delta` says otherwise.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    payload = {
        'sub': subject,
        'exp': expire,
        'iat': now,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: str) -> Optional[dict]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None if invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            options={'require': ['exp', 'sub']},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid token: {e.__class__.__name__}")
        return None


def extract_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an `Authorization: Bearer <token>` header value.

    Returns None when the header is missing or uses another scheme.
    """
    if not header_value:
        return None
    scheme, _, token = header_value.partition(' ')
    if scheme != 'Bearer' or not token.strip():
        return None
    return token.strip()
