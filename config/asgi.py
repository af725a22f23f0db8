"""
ASGI config for the task tracker.

Served by uvicorn through `manage.py serve`; any other ASGI server can
point at `config.asgi:application` directly.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at import time (process startup), not per request
application = get_asgi_application()
