"""
Field path addressing for listing drafts.

Two path kinds exist:
    TopLevelPath("brandName")   -> a ListingDraft field, replaced wholesale
    AttributePath("color")      -> one key of the attributes bag, merged

Raw strings from the UI ("brandName", "attributes.color") are parsed once by
parse_field_path(); unknown names are a contract error, not a user error.
"""

import re
from dataclasses import dataclass
from typing import Union

from exceptions import InvalidFieldPathError
from models.listing_draft import ListingDraft

ATTRIBUTES_PREFIX = "attributes."

_ATTRIBUTE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True)
class TopLevelPath:
    """A ListingDraft field, by camelCase alias."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AttributePath:
    """A single key inside ListingDraft.attributes."""
    name: str

    def __str__(self) -> str:
        return f"{ATTRIBUTES_PREFIX}{self.name}"


FieldPath = Union[TopLevelPath, AttributePath]


def _top_level_names() -> dict[str, str]:
    """Map camelCase alias and snake_case name to the model attribute name."""
    names = {}
    for attr_name, info in ListingDraft.model_fields.items():
        names[attr_name] = attr_name
        if info.alias:
            names[info.alias] = attr_name
    return names


TOP_LEVEL_FIELDS = _top_level_names()


def attribute_name_for(path: TopLevelPath) -> str:
    """Resolve a top-level path to the ListingDraft attribute name."""
    return TOP_LEVEL_FIELDS[path.name]


def parse_field_path(raw: Union[str, TopLevelPath, AttributePath]) -> FieldPath:
    """
    Parse a dotted path into a FieldPath.

    Args:
        raw: "attributes.<name>", a top-level field name, or an already parsed path

    Returns:
        TopLevelPath or AttributePath

    Raises:
        InvalidFieldPathError: If the path is empty, nests deeper than one
            attribute level, or names an unknown top-level field
    """
    if isinstance(raw, (TopLevelPath, AttributePath)):
        if isinstance(raw, TopLevelPath) and raw.name not in TOP_LEVEL_FIELDS:
            raise InvalidFieldPathError(str(raw))
        return raw

    if not isinstance(raw, str) or not raw:
        raise InvalidFieldPathError(str(raw), "Path must be a non-empty string")

    if raw.startswith(ATTRIBUTES_PREFIX):
        name = raw[len(ATTRIBUTES_PREFIX):]
        if not _ATTRIBUTE_NAME.fullmatch(name):
            raise InvalidFieldPathError(raw, "Attribute name must be a single identifier")
        return AttributePath(name)

    if raw not in TOP_LEVEL_FIELDS:
        raise InvalidFieldPathError(raw)

    return TopLevelPath(raw)
