"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    SKILL_NOT_FOUND = "SKILL_NOT_FOUND"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INDEX = "INVALID_INDEX"
    DUPLICATE_SKILL = "DUPLICATE_SKILL"

    # Conflict errors (409)
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """A field failed a validation rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=[{"field": field, "message": message}],
        )
        self.field = field


class ProfileNotFoundError(AppException):
    """No profile has been created yet."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="No profile found",
            status_code=404,
        )


class SkillNotFoundError(AppException):
    """Skill not present on the profile."""

    def __init__(self, skill: str) -> None:
        super().__init__(
            error_code=ErrorCode.SKILL_NOT_FOUND,
            message=f"Skill not found: {skill}",
            status_code=404,
            details={"skill": skill},
        )


class InvalidIndexError(AppException):
    """List index outside the bounds of an embedded collection."""

    def __init__(self, collection: str, index: int, length: int) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INDEX,
            message=f"Invalid {collection} index: {index}",
            status_code=400,
            details={"collection": collection, "index": index, "length": length},
        )


class DuplicateSkillError(AppException):
    """Skill already exists (case-insensitive)."""

    def __init__(self, skill: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_SKILL,
            message=f"Skill already exists: {skill}",
            status_code=400,
            details={"skill": skill},
        )


class ConcurrentUpdateError(AppException):
    """The profile was modified by another request since it was read."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.CONCURRENT_UPDATE,
            message="Profile was modified concurrently, retry the request",
            status_code=409,
        )


class StoreError(AppException):
    """Underlying persistence failure."""

    def __init__(self, message: str = "Profile store error", details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
            status_code=500,
            details=details,
        )
