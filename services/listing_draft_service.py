"""
Listing draft service.

Single entry point for the UI layer. Every operation takes the current draft
array and returns a new one; the host keeps the state and re-runs
validate_all() after each change.
"""

from typing import Any, Optional, Sequence

import structlog

from models.listing_draft import GalleryEntry, ListingDraft, SkuGroup
from models.source_product import CombinationBundle, SourceProduct
from services import (
    draft_builder_service,
    draft_mutator,
    gallery_service,
    sku_group_service,
    submission_service,
    validation_service,
)
from services.validation_service import ValidationReport

logger = structlog.get_logger(__name__)


class ListingDraftService:
    """
    Draft array operations for the bulk "Add to Listings" workflow.

    Stateless; safe to share. Callers serialize writes per draft array.
    """

    # ===================
    # SESSION
    # ===================

    def start_session(self, products: Sequence[SourceProduct]) -> list[ListingDraft]:
        return draft_builder_service.start_session(products)

    def accept_bundle(self, bundle: CombinationBundle) -> list[ListingDraft]:
        return draft_builder_service.accept_bundle(bundle)

    # ===================
    # FIELDS
    # ===================

    def set_field(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        path: str,
        value: Any
    ) -> list[ListingDraft]:
        return draft_mutator.update_draft(drafts, draft_index, path, value)

    # ===================
    # SUB-SKUS
    # ===================

    def sku_groups(self, drafts: Sequence[ListingDraft], draft_index: int) -> list[SkuGroup]:
        draft = draft_mutator.get_draft(drafts, draft_index)
        return sku_group_service.build_sku_groups(draft.sub_sku_instances)

    def add_sub_sku_instance(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int
    ) -> list[ListingDraft]:
        return sku_group_service.add_sub_sku_instance(drafts, draft_index)

    def add_duplicate_instance(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        sku: str
    ) -> list[ListingDraft]:
        return sku_group_service.add_duplicate_instance(drafts, draft_index, sku)

    def remove_instance(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        sku: str
    ) -> list[ListingDraft]:
        return sku_group_service.remove_instance(drafts, draft_index, sku)

    def rename_group(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        new_sku: str,
        indices: Sequence[int]
    ) -> list[ListingDraft]:
        return sku_group_service.rename_group(drafts, draft_index, new_sku, indices)

    def adjust_instance_quantity(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        instance_index: int,
        delta: int
    ) -> list[ListingDraft]:
        return sku_group_service.adjust_instance_quantity(
            drafts, draft_index, instance_index, delta
        )

    # ===================
    # IMAGES
    # ===================

    def gallery_entries(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int
    ) -> list[GalleryEntry]:
        draft = draft_mutator.get_draft(drafts, draft_index)
        return gallery_service.build_gallery_entries(draft)

    def set_gallery_image(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        slot_index: int,
        image: str
    ) -> list[ListingDraft]:
        return gallery_service.set_gallery_image(drafts, draft_index, slot_index, image)

    def remove_gallery_image(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        slot_index: int
    ) -> list[ListingDraft]:
        return gallery_service.remove_gallery_image(drafts, draft_index, slot_index)

    def set_main_image(
        self,
        drafts: Sequence[ListingDraft],
        draft_index: int,
        image: Optional[str]
    ) -> list[ListingDraft]:
        return gallery_service.set_main_image(drafts, draft_index, image)

    # ===================
    # VALIDATION / SUBMISSION
    # ===================

    def validate_all(self, drafts: Sequence[ListingDraft]) -> ValidationReport:
        return validation_service.validate_all(drafts)

    def prepare_submission(self, drafts: Sequence[ListingDraft]) -> Optional[dict]:
        return submission_service.prepare_submission(drafts)


# Singleton instance
_listing_draft_service: Optional[ListingDraftService] = None


def get_listing_draft_service() -> ListingDraftService:
    """Get or create listing draft service instance."""
    global _listing_draft_service
    if _listing_draft_service is None:
        _listing_draft_service = ListingDraftService()
    return _listing_draft_service
