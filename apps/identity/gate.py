"""
Auth gate - decides per request whether it may proceed.

The gate runs in one of two modes fixed at process start:

- AuthDisabled: every request is authorized.
- AuthEnabled: protected routes need `Authorization: Bearer <token>`.
  With read_only_without_jwt, GET requests pass without a token while
  POST/PUT/DELETE always need one.

Tokens are verified cryptographically; no session state is kept.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from django.http import HttpRequest

from apps.core.config import AuthEnabled, AuthMode, auth_mode_from_settings
from apps.core.errors import Unauthorized, ValidationError
from .jwt_auth import (
    ACCESS_TOKEN_EXPIRE_HOURS,
    create_access_token,
    decode_token,
    extract_bearer_token,
)

logger = logging.getLogger(__name__)

READ_METHODS = frozenset({'GET'})

# SHA-256 digest size; shorter HS256 keys get a startup warning
MIN_SECRET_BYTES = 32


@dataclass(frozen=True)
class Identity:
    """Who made the request. `subject` is None for anonymous access."""
    subject: Optional[str]
    authenticated: bool


ANONYMOUS = Identity(subject=None, authenticated=False)


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_in_hours: int


class AuthGate:
    def __init__(self, mode: AuthMode):
        self.mode = mode
        if self.enabled and len(mode.secret.encode('utf-8')) < MIN_SECRET_BYTES:
            logger.warning(
                f"JWT_SECRET is shorter than {MIN_SECRET_BYTES} bytes; use a longer random secret"
            )

    @property
    def enabled(self) -> bool:
        return isinstance(self.mode, AuthEnabled)

    def login(self, username: str, password: str) -> IssuedToken:
        """
        Exchange a credential pair for a signed token.

        Any pair whose parts are non-empty after trimming is accepted;
        there is no user store behind this check.
        """
        if not self.enabled:
            raise ValidationError("JWT not enabled on server (set JWT_SECRET to enable)")

        if not username or not username.strip() or not password or not password.strip():
            raise Unauthorized()

        token = create_access_token(username, self.mode.secret)
        logger.debug("Issued access token")
        return IssuedToken(token=token, expires_in_hours=ACCESS_TOKEN_EXPIRE_HOURS)

    def verify(self, authorization: Optional[str]) -> Identity:
        """Validate an Authorization header value and return the caller."""
        token = extract_bearer_token(authorization)
        if token is None:
            raise Unauthorized()

        payload = decode_token(token, self.mode.secret)
        if payload is None:
            raise Unauthorized()

        return Identity(subject=payload['sub'], authenticated=True)

    def authorize(self, request: HttpRequest) -> Identity:
        """Apply the read/write policy to an incoming request."""
        if not self.enabled:
            return ANONYMOUS

        if self.mode.read_only_without_jwt and request.method in READ_METHODS:
            return ANONYMOUS

        return self.verify(request.headers.get('Authorization'))


@lru_cache(maxsize=1)
def get_auth_gate() -> AuthGate:
    """The process-wide gate, built once from settings."""
    gate = AuthGate(auth_mode_from_settings())
    logger.debug(f"Auth gate initialised: {gate.mode!r}")
    return gate


def task_access(request: HttpRequest) -> Identity:
    """django-ninja auth callback for the task routes."""
    return get_auth_gate().authorize(request)
