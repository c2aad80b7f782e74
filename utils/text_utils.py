"""
Text utilities for SKU lists and free-text draft fields.
"""

import math
from typing import Any, Iterable, Optional


def split_sku_list(raw: Optional[str]) -> list[str]:
    """
    Split an upstream comma-separated sub-SKU list.

    - "A-1, B-2" → ["A-1", "B-2"]
    - "A-1,,B-2" → ["A-1", "B-2"]
    - None / "" → []

    Order and duplicates are preserved.
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def join_present(values: Iterable[Any], separator: str) -> str:
    """Join the truthy values, skipping None and empty strings."""
    return separator.join(str(v) for v in values if v)


def parse_number(value: Any) -> float:
    """
    Parse a price-like value.

    - None / "" → 0.0 (an untouched field counts as zero)
    - "12.5" / 12.5 → 12.5
    - "abc", "inf" → NaN

    Returns:
        float, NaN when the text is not a finite number
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return float("nan")
    if math.isinf(number):
        return float("nan")
    return number
