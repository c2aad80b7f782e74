"""
Path-addressed draft mutation.

set_field() applies one edit to one draft and returns a new draft:
    attributes.<name>   merged into the attributes bag
    subSkuInstances     replaces the whole instance sequence
    any other field     replaces the top-level value

update_draft() does the same inside a draft array. Only the edited element is
replaced; every other draft keeps its identity so the host UI can detect
which draft changed by reference.
"""

from typing import Any, Sequence, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from exceptions import DraftNotFoundError, InvalidFieldValueError
from models.field_path import (
    AttributePath,
    FieldPath,
    attribute_name_for,
    parse_field_path,
)
from models.listing_draft import ListingDraft

logger = structlog.get_logger(__name__)


def set_field(
    draft: ListingDraft,
    path: Union[str, FieldPath],
    value: Any
) -> ListingDraft:
    """
    Return a copy of draft with one field changed.

    Args:
        draft: Source draft (left untouched)
        path: Field path, parsed with parse_field_path()
        value: New value

    Returns:
        New ListingDraft

    Raises:
        InvalidFieldPathError: If the path is outside the grammar
        InvalidFieldValueError: If the value does not fit the field's type
    """
    path = parse_field_path(path)
    data = draft.model_dump()

    if isinstance(path, AttributePath):
        data["attributes"] = {**draft.attributes, path.name: value}
    else:
        data[attribute_name_for(path)] = value

    try:
        updated = type(draft).model_validate(data)
    except PydanticValidationError as e:
        logger.warning(
            "draft_field_rejected",
            path=str(path),
            error_count=e.error_count(),
        )
        raise InvalidFieldValueError(
            str(path),
            e.errors(include_url=False, include_context=False)
        ) from e

    logger.debug("draft_field_set", path=str(path))
    return updated


def get_draft(drafts: Sequence[ListingDraft], draft_index: int) -> ListingDraft:
    """
    Fetch one draft by position.

    Raises:
        DraftNotFoundError: If draft_index is negative or past the end
    """
    if draft_index < 0 or draft_index >= len(drafts):
        raise DraftNotFoundError(draft_index)
    return drafts[draft_index]


def replace_draft(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    draft: ListingDraft
) -> list[ListingDraft]:
    """Return a new draft array with one element swapped."""
    get_draft(drafts, draft_index)
    updated = list(drafts)
    updated[draft_index] = draft
    return updated


def update_draft(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    path: Union[str, FieldPath],
    value: Any
) -> list[ListingDraft]:
    """
    Apply set_field() to one draft of the array.

    Args:
        drafts: Current draft array (left untouched)
        draft_index: Position of the draft to edit
        path: Field path
        value: New value

    Returns:
        New draft array; all other elements are the same objects
    """
    draft = get_draft(drafts, draft_index)
    return replace_draft(drafts, draft_index, set_field(draft, path, value))
