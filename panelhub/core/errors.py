"""Error types raised by the panelhub stores.

Each error carries a fixed default message so callers can match on the class
and the HTTP layer can translate it into a status code without inspecting the
text.
"""

from __future__ import annotations

from typing import Optional


class PanelhubError(Exception):
    """Base error for all store exceptions."""

    message = "panelhub error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class CommandValidationError(PanelhubError):
    """Raised when a command or query is missing required fields."""

    message = "command missing required fields"


class NotFoundError(PanelhubError):
    """Base class for lookups that matched nothing."""

    message = "not found"


class SourceDataSourceDoesNotExistError(NotFoundError):
    message = "source data source does not exist"


class TargetDataSourceDoesNotExistError(NotFoundError):
    message = "target data source does not exist"


class DataSourceNotFoundError(NotFoundError):
    message = "data source not found"


class CorrelationNotFoundError(NotFoundError):
    message = "correlation not found"


class PlaylistNotFoundError(NotFoundError):
    message = "playlist not found"


class SourceDataSourceReadOnlyError(PanelhubError):
    """Raised when a provisioned (read-only) data source would be modified."""

    message = "source data source is read only"


class UpdateCorrelationEmptyParamsError(CommandValidationError):
    message = "not enough parameters to edit correlation"


class DataSourceAlreadyExistsError(PanelhubError):
    message = "data source with the same uid or name already exists"


class PlaylistFailedGenerateUniqueUidError(PanelhubError):
    message = "failed to generate unique playlist UID"
