"""
Single-value field validators.

Three validator kinds, each returning a FieldCheck:
1. validate_sku: pattern check for the custom SKU prefix
2. validate_numeric_field: price-like fields, relaxed to >= 0 when pre-filled
3. validate_required_field: presence check dispatched on the value's type

validate_numeric_field and validate_required_field disagree on zero when the
field is pre-filled (numeric accepts it, required rejects it). Call sites pick
one per field; keep them separate.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

SKU_PATTERN = re.compile(r"[A-Z0-9-]+")


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of one validator call."""
    is_valid: bool
    error: Optional[str] = None


VALID = FieldCheck(is_valid=True)


def _invalid(message: str) -> FieldCheck:
    return FieldCheck(is_valid=False, error=message)


def validate_sku(sku: str) -> FieldCheck:
    """
    Validate a SKU against ^[A-Z0-9-]+$ with at least one dash.

    - "ABC-123" → valid
    - "abc-123" → invalid (lowercase)
    - "ABC123" → invalid (no dash)
    - "" → invalid (required)
    """
    if not sku or not sku.strip():
        return _invalid("SKU is required")
    if not SKU_PATTERN.fullmatch(sku):
        return _invalid("SKU must contain only A-Z, 0-9, and dashes")
    if "-" not in sku:
        return _invalid("SKU must contain at least one dash (-)")
    return VALID


def validate_numeric_field(
    value: Any,
    field_name: str,
    is_pre_filled: bool = False
) -> FieldCheck:
    """
    Validate a price-like number.

    Rules:
    - Not a number (or NaN) → invalid
    - Pre-filled: negative → invalid, zero accepted
    - User-entered: zero or negative → invalid
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return _invalid(f"{field_name} must be a valid number")

    if is_pre_filled:
        if value < 0:
            return _invalid(f"{field_name} cannot be negative")
        return VALID

    if value <= 0:
        return _invalid(f"{field_name} must be a positive number")

    return VALID


def validate_required_field(
    value: Any,
    field_name: str,
    is_pre_filled: bool = False
) -> FieldCheck:
    """
    Validate that a required value is present.

    Rules by type:
    - str: blank after trimming → invalid
    - number: zero or NaN → invalid, pre-filled or not
    - None → invalid
    - anything else (bool, lists) → valid

    is_pre_filled is accepted so call sites stay uniform; it does not relax
    this rule.
    """
    if isinstance(value, str):
        if not value.strip():
            return _invalid(f"{field_name} is required")
    elif isinstance(value, bool):
        return VALID
    elif isinstance(value, (int, float)):
        if value == 0 or math.isnan(value):
            return _invalid(f"{field_name} is required")
    elif value is None:
        return _invalid(f"{field_name} is required")
    return VALID
