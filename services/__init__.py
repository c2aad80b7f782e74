"""
Listing draft engine services.

Each module handles one concern of the bulk listing workflow; the
ListingDraftService ties them together for the UI layer.
"""

from services.draft_mutator import set_field, update_draft
from services.sku_group_service import (
    build_sku_groups,
    add_sub_sku_instance,
    add_duplicate_instance,
    remove_instance,
    rename_group,
    adjust_instance_quantity,
)
from services.gallery_service import (
    build_gallery_entries,
    set_gallery_image,
    remove_gallery_image,
    append_gallery_images,
    set_main_image,
)
from services.validation_service import (
    validate_all,
    validate_draft,
    ValidationIssue,
    ValidationReport,
)
from services.submission_service import prepare_submission, build_listing_payload
from services.listing_draft_service import ListingDraftService, get_listing_draft_service

__all__ = [
    # Mutator
    "set_field",
    "update_draft",

    # Sub-SKU groups
    "build_sku_groups",
    "add_sub_sku_instance",
    "add_duplicate_instance",
    "remove_instance",
    "rename_group",
    "adjust_instance_quantity",

    # Gallery
    "build_gallery_entries",
    "set_gallery_image",
    "remove_gallery_image",
    "append_gallery_images",
    "set_main_image",

    # Validation
    "validate_all",
    "validate_draft",
    "ValidationIssue",
    "ValidationReport",

    # Submission
    "prepare_submission",
    "build_listing_payload",

    # Facade
    "ListingDraftService",
    "get_listing_draft_service",
]
