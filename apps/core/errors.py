"""
Domain error taxonomy.

Lower layers raise these; the NinjaAPI exception handler in config/urls.py
is the single place they become HTTP responses. `message` is what the
client sees, so it must never carry internal detail.
"""


class DomainError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Client sent structurally or semantically invalid input."""
    status_code = 400
    message = "Bad Request"


class Unauthorized(DomainError):
    """Missing, malformed, expired or badly signed credential."""
    status_code = 401
    message = "Unauthorized"


class NotFound(DomainError):
    """Referenced task id does not exist."""
    status_code = 404
    message = "Not Found"


class StorageError(DomainError):
    """
    Any unrecoverable persistence failure.

    The underlying cause is chained (raise ... from exc) and logged by the
    store; the public message stays generic.
    """
    status_code = 500
    message = "Internal Server Error"
