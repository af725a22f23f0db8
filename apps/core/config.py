"""
Startup configuration values.

Settings are read from the environment exactly once (config/settings.py).
This module turns the relevant settings into immutable values that are
passed into component constructors, so business logic never reads
os.environ or django.conf.settings ad hoc.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from django.conf import settings


@dataclass(frozen=True)
class AuthDisabled:
    """Every request is authorized; login is not available."""


@dataclass(frozen=True)
class AuthEnabled:
    """Bearer tokens signed with `secret` are required on protected routes."""
    secret: str
    read_only_without_jwt: bool = True

    def __repr__(self) -> str:
        return f"AuthEnabled(secret='***', read_only_without_jwt={self.read_only_without_jwt})"


AuthMode = Union[AuthDisabled, AuthEnabled]


def auth_mode_from_settings(source=None) -> AuthMode:
    """Select the auth mode from JWT_SECRET / READ_ONLY_WITHOUT_JWT."""
    source = source or settings
    secret = getattr(source, 'JWT_SECRET', None)
    if not secret:
        return AuthDisabled()
    return AuthEnabled(
        secret=secret,
        read_only_without_jwt=bool(getattr(source, 'READ_ONLY_WITHOUT_JWT', True)),
    )


def parse_bind_addr(bind_addr: str) -> Tuple[str, int]:
    """
    Split 'host:port' into its parts.

    IPv6 hosts must be bracketed: '[::]:8080'.
    """
    host, sep, port = bind_addr.strip().rpartition(':')
    if not sep or not host or not port.isdigit():
        raise ValueError(f"Invalid bind address: {bind_addr!r} (expected host:port)")

    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"Invalid port in bind address: {bind_addr!r}")

    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    return host, port_number
