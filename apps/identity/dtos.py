"""DTOs for Identity app."""
from ninja import Schema


class LoginIn(Schema):
    username: str
    password: str


class TokenOut(Schema):
    token: str
    expires_in_hours: int
