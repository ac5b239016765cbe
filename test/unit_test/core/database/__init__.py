"""Unit tests for centralized database layer.

This package contains unit tests for panelhub/core/database, including:

- Entity model default and table definition tests (SQLModel)
- Store tests against in-memory SQLite
- Session scope and engine helper tests

All tests use in-memory SQLite or mocks to ensure fast execution
without requiring external database services.
"""
