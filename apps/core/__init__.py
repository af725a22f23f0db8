"""
Core app - Shared abstractions and utilities.

This app provides the pieces every other app leans on:
- Domain error taxonomy (errors.py)
- Startup configuration values derived from settings (config.py)
- The `serve` management command (schema bootstrap + HTTP server)
"""
