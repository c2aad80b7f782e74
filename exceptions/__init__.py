"""
Custom exceptions module.

Validation failures on draft fields are reported, not raised.
These exceptions cover contract mismatches and blocked submissions.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    ContractError,

    # Mutator
    InvalidFieldPathError,
    InvalidFieldValueError,

    # Draft array
    DraftNotFoundError,
    SubSkuIndexError,
    GalleryIndexError,

    # Submission
    SubmissionBlockedError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "ContractError",

    # Mutator
    "InvalidFieldPathError",
    "InvalidFieldValueError",

    # Draft array
    "DraftNotFoundError",
    "SubSkuIndexError",
    "GalleryIndexError",

    # Submission
    "SubmissionBlockedError",
]
