"""
Identity API endpoints.

Provides the login endpoint that exchanges a username/password pair
for a bearer token. Only meaningful when JWT_SECRET is configured.
"""
from django.http import HttpRequest
from ninja import Router

from .dtos import LoginIn, TokenOut
from .gate import get_auth_gate

router = Router(tags=["Identity"])


@router.post("/login", response=TokenOut, auth=None)
def login_user(request: HttpRequest, payload: LoginIn):
    """
    Issue a signed token valid for 12 hours.

    Returns 400 when the server runs without JWT_SECRET, 401 when the
    credential pair is rejected.
    """
    return get_auth_gate().login(payload.username, payload.password)
