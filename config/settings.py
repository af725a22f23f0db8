"""
Django settings for the task tracker.

This is the one place the process environment is read. Values are loaded
once at startup (optionally from a .env file) and handed to the apps
through django.conf.settings.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from .database import get_database_config

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean env var. Only '1' and 'true' (any case) count as true."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true')


# ---------------------------------------------------------
# Core
# ---------------------------------------------------------
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-task-tracker-dev-key')
DEBUG = env_flag('DJANGO_DEBUG', False)
ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', '*').split(',') if h.strip()]

INSTALLED_APPS = [
    'apps.core',
    'apps.identity',
    'apps.tasks',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
]

ROOT_URLCONF = 'config.urls'

# Only used to render the /api/docs page and Django's error pages
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': False,
        'OPTIONS': {},
    },
]
ASGI_APPLICATION = 'config.asgi.application'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

# ---------------------------------------------------------
# Database
# ---------------------------------------------------------
DATABASES = {
    'default': get_database_config(BASE_DIR),
}

# ---------------------------------------------------------
# Service
# ---------------------------------------------------------
BIND_ADDR = os.getenv('BIND_ADDR', '0.0.0.0:8080')

# Presence of JWT_SECRET switches the auth gate on
JWT_SECRET = os.getenv('JWT_SECRET') or None
READ_ONLY_WITHOUT_JWT = env_flag('READ_ONLY_WITHOUT_JWT', True)

# ---------------------------------------------------------
# Logging
# ---------------------------------------------------------
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime}] {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'uvicorn': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
