"""
URL configuration for the task tracker.

The NinjaAPI exception handlers below are the single place domain
outcomes become HTTP error responses.
"""
import logging

from django.urls import path
from ninja import NinjaAPI
from ninja.errors import AuthenticationError, HttpError, ValidationError as RequestValidationError

from apps.core.errors import DomainError
from apps.core.parsers import JSONObjectParser

logger = logging.getLogger(__name__)

api = NinjaAPI(
    title="Task Tracker API",
    version="1.0.0",
    description="Create, list, fetch, update and delete tasks",
    docs_url="/docs",
    parser=JSONObjectParser(),
)

from apps.identity.api import router as identity_router
from apps.tasks.api import router as tasks_router

api.add_router("", identity_router)
api.add_router("/tasks", tasks_router)


def error_response(request, message: str, status: int):
    return api.create_response(request, {"error": message}, status=status)


@api.exception_handler(DomainError)
def on_domain_error(request, exc: DomainError):
    return error_response(request, exc.message, exc.status_code)


@api.exception_handler(RequestValidationError)
def on_request_validation_error(request, exc: RequestValidationError):
    """Malformed bodies and wrong field types are client errors (400, not 422)."""
    return error_response(request, _describe_validation_errors(exc.errors), 400)


@api.exception_handler(AuthenticationError)
def on_authentication_error(request, exc: AuthenticationError):
    return error_response(request, "Unauthorized", 401)


@api.exception_handler(HttpError)
def on_http_error(request, exc: HttpError):
    return error_response(request, str(exc.message), exc.status_code)


@api.exception_handler(Exception)
def on_unexpected_error(request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.path}: {exc}")
    return error_response(request, "Internal Server Error", 500)


def _describe_validation_errors(errors) -> str:
    """Turn pydantic error dicts into one readable line."""
    parts = []
    for error in errors:
        # loc looks like ('body', 'payload', 'title'); keep the field name
        loc = [str(p) for p in error.get('loc', ()) if p not in ('body', 'payload', 'path', 'query')]
        field = '.'.join(loc)
        message = error.get('msg', 'invalid value')
        parts.append(f"{field}: {message}" if field else message)
    return '; '.join(parts) or "Invalid request"


urlpatterns = [
    path('api/', api.urls),
]
