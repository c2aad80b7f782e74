"""
Pre-filled classification for draft fields.

A field is pre-filled when it currently holds a non-null, non-empty value, or
when it is the group SKU of a draft that carries an originalGroupSku.

The answer is derived from the draft as it is right now. Clearing a field
that came from upstream makes it user-entered on the next validation pass,
and the stricter rule applies from then on.
"""

from typing import Any, Union

from models.field_path import (
    AttributePath,
    FieldPath,
    TopLevelPath,
    attribute_name_for,
    parse_field_path,
)
from models.listing_draft import ListingDraft

GROUP_SKU_FIELD = "group_sku"


def resolve_value(draft: ListingDraft, path: Union[str, FieldPath]) -> Any:
    """
    Read the value a field path points at.

    Missing attributes resolve to None.
    """
    path = parse_field_path(path)
    if isinstance(path, AttributePath):
        return draft.attributes.get(path.name)
    return getattr(draft, attribute_name_for(path))


def is_pre_filled(draft: ListingDraft, path: Union[str, FieldPath]) -> bool:
    """
    Classify a field as pre-filled.

    Args:
        draft: Draft being validated
        path: Field path ("groupSku", "msrp", "attributes.color" ...)

    Returns:
        True if the value looks like upstream data right now
    """
    path = parse_field_path(path)

    if (
        isinstance(path, TopLevelPath)
        and attribute_name_for(path) == GROUP_SKU_FIELD
        and draft.original_group_sku
    ):
        return True

    value = resolve_value(draft, path)
    return value is not None and value != ""
