"""
Submission gate for validated drafts.

Builds the listing payload the REST client sends. The engine does no I/O:
prepare_submission() either returns the payload or raises
SubmissionBlockedError when any draft still has validation errors.
"""

from typing import Optional, Sequence

import structlog

from exceptions import SubmissionBlockedError
from models.listing_draft import ListingDraft
from services.validation_service import validate_all

logger = structlog.get_logger(__name__)


def submitted_sub_skus(draft: ListingDraft) -> str:
    """
    Comma-joined sub-SKUs for the payload.

    Instances with quantity 0 are left out; if that leaves nothing, every
    instance is sent.
    """
    selected = [i.sku for i in draft.sub_sku_instances if i.quantity > 0]
    if selected:
        return ",".join(selected)
    return ",".join(i.sku for i in draft.sub_sku_instances)


def build_listing_payload(draft: ListingDraft) -> dict:
    """Convert one draft to the listing API payload (camelCase keys)."""
    return {
        "Sku": draft.final_sku,
        "subSku": submitted_sub_skus(draft),
        "brandName": draft.brand_name,
        "title": draft.title,
        "description": draft.description,
        "category": draft.category,
        "collectionName": draft.collection_name,
        "shipTypes": draft.ship_types,
        "singleSetItem": draft.single_set_item,
        "brandRealPrice": draft.brand_real_price,
        "brandMiscellaneous": draft.brand_miscellaneous,
        "msrp": draft.msrp,
        "shippingPrice": draft.shipping_price,
        "commissionPrice": draft.commission_price,
        "profitMarginPrice": draft.profit_margin_price,
        "ecommerceMiscellaneous": draft.ecommerce_miscellaneous,
        "mainImageUrl": draft.main_image,
        "galleryImages": list(draft.gallery_images),
        "attributes": {**draft.attributes, "features": list(draft.features)},
    }


def prepare_submission(drafts: Sequence[ListingDraft]) -> Optional[dict]:
    """
    Validate the draft array and build the request body.

    Args:
        drafts: Current draft array

    Returns:
        A single listing payload for one draft, {"listings": [...]} for
        several, None for an empty array

    Raises:
        SubmissionBlockedError: If validate_all() reports any error
    """
    report = validate_all(drafts)
    if not report.is_valid:
        logger.warning(
            "submission_blocked",
            draft_count=len(drafts),
            error_count=len(report.errors),
        )
        raise SubmissionBlockedError(report.to_dict()["errors"])

    if not drafts:
        return None

    payload = [build_listing_payload(draft) for draft in drafts]
    logger.info("submission_prepared", draft_count=len(payload))

    if len(payload) == 1:
        return payload[0]
    return {"listings": payload}
