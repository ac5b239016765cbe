"""
Panelhub Server Package.

This package contains the web server that exposes the Panelhub stores over HTTP.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Translation of store errors into HTTP responses.
    services: Request-scoped dependencies.
"""
