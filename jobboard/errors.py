"""Exception hierarchy shared by the repository, integrity and router layers.

Only the application's exception handlers translate these into HTTP responses.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class JobBoardError(Exception):
    """Base application exception."""


class NotFoundError(JobBoardError):
    """Raised when an id does not parse, or no row matches it."""


class DeleteBlockedError(NotFoundError):
    """Raised when a delete would orphan rows that still reference the target."""


class ReferenceNotFoundError(JobBoardError):
    """Raised when a foreign key on a new entity does not resolve."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class DomainValidationError(JobBoardError):
    """Raised for cross-field rule violations found after structural validation."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


class StoreError(JobBoardError):
    """Raised when the database driver fails."""


__all__ = [
    "DeleteBlockedError",
    "DomainValidationError",
    "FieldError",
    "JobBoardError",
    "NotFoundError",
    "ReferenceNotFoundError",
    "StoreError",
]
