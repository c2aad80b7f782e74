"""
Pydantic models for listing drafts and their upstream sources.
"""

from models.base import BaseSchema, FrozenSchema
from models.listing_draft import (
    AttributeValue,
    PriceValue,
    ImageReference,
    SubSkuInstance,
    ListingDraft,
    SkuGroup,
    GalleryEntry,
)
from models.field_path import (
    TopLevelPath,
    AttributePath,
    FieldPath,
    parse_field_path,
)
from models.source_product import (
    SourceBrand,
    SourceProduct,
    CombinationBundle,
)

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",

    # Drafts
    "AttributeValue",
    "PriceValue",
    "ImageReference",
    "SubSkuInstance",
    "ListingDraft",
    "SkuGroup",
    "GalleryEntry",

    # Paths
    "TopLevelPath",
    "AttributePath",
    "FieldPath",
    "parse_field_path",

    # Upstream
    "SourceBrand",
    "SourceProduct",
    "CombinationBundle",
]
