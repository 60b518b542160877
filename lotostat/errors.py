"""Application errors, each carrying the HTTP status it maps to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """A draw id that the store does not hold."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """A category token, ball number or payload that fails validation."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class ResetFailedError(AppError):
    """The store reported that some draws of a category were not removed."""

    def __init__(self, category: str) -> None:
        super().__init__(
            code="reset_failed",
            message="Failed to delete all draws",
            status_code=500,
            details={"category": category},
        )
