"""
Custom exception classes for the listing draft engine.

Field-level validation failures are reported through ValidationReport and are
never raised. Exceptions here signal contract mismatches between the calling
UI layer and the engine, or a blocked submission.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all engine errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "INVALID_FIELD_PATH")
        message: Human-readable message
        status_code: HTTP-style status code for the hosting layer
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            status_code=404,
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ContractError(AppError):
    """Caller broke the engine contract (400). Never shown to end users."""

    def __init__(
        self,
        message: str,
        code: str = "CONTRACT_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details
        )


# ===================
# MUTATOR ERRORS
# ===================

class InvalidFieldPathError(ContractError):
    """Field path is not part of the draft addressing grammar."""

    def __init__(self, path: str, reason: str = "Unknown field"):
        super().__init__(
            code="INVALID_FIELD_PATH",
            message=f"Invalid field path '{path}': {reason}",
            details={"path": path, "reason": reason}
        )


class InvalidFieldValueError(ContractError):
    """Value does not fit the type of the addressed field."""

    def __init__(self, path: str, errors: list[dict]):
        super().__init__(
            code="INVALID_FIELD_VALUE",
            message=f"Value rejected for field '{path}'",
            details={"path": path, "errors": errors}
        )


# ===================
# DRAFT ARRAY ERRORS
# ===================

class DraftNotFoundError(NotFoundError):
    """Draft index outside the draft array."""

    def __init__(self, draft_index: int):
        super().__init__(
            resource="Draft",
            identifier=str(draft_index),
            code="DRAFT_NOT_FOUND"
        )


class SubSkuIndexError(ContractError):
    """Sub-SKU instance index outside the instance list."""

    def __init__(self, draft_index: int, instance_index: int, size: int):
        super().__init__(
            code="SUB_SKU_INDEX_OUT_OF_RANGE",
            message=f"Sub-SKU instance {instance_index} does not exist",
            details={
                "draft_index": draft_index,
                "instance_index": instance_index,
                "instance_count": size,
            }
        )


class GalleryIndexError(ContractError):
    """Negative gallery slot index."""

    def __init__(self, draft_index: int, slot_index: int):
        super().__init__(
            code="GALLERY_INDEX_INVALID",
            message=f"Gallery slot {slot_index} is not addressable",
            details={"draft_index": draft_index, "slot_index": slot_index}
        )


# ===================
# SUBMISSION ERRORS
# ===================

class SubmissionBlockedError(ValidationError):
    """Draft array is not submission-ready."""

    def __init__(self, errors: list[dict]):
        super().__init__(
            code="SUBMISSION_BLOCKED",
            message=f"Listings have {len(errors)} validation errors",
            details={"errors": errors}
        )
