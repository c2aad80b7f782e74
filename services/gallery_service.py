"""
Gallery/SKU mapping.

Gallery slots are paired with unique sub-SKU values, not with instances:
the n-th distinct SKU (in instance order) shows gallery_images[n]. Extra
quantities of a SKU never consume a slot. Images past the last unique SKU
stay stored but are only reachable by slot index.

Blank instances have no value to share, so each one is its own slot,
labelled "Sub SKU <position>".

Slots follow distinct SKUs, not instance positions. Removing the only
instance of a group removes its slot, so every later group shifts to the
next-lower image even though remove_instance() only drops a tail instance.
"""

from typing import Optional, Sequence

import structlog

from exceptions import GalleryIndexError
from models.listing_draft import GalleryEntry, ImageReference, ListingDraft
from services.draft_mutator import get_draft, update_draft

logger = structlog.get_logger(__name__)

GALLERY_FIELD = "galleryImages"
MAIN_IMAGE_FIELD = "mainImage"
MAIN_IMAGE_LABEL = "Main Image"


def _slot_key(sku: str, instance_index: int) -> str:
    return sku or f"Sub SKU {instance_index + 1}"


def build_gallery_entries(draft: ListingDraft) -> list[GalleryEntry]:
    """
    Build the gallery display list for one draft.

    Order: the main image (if set), then one entry per distinct sub-SKU in
    first-occurrence order. Duplicated SKUs are labelled "<sku> (<count>)".

    Example:
        instances [A, A, B], gallery ["img0", "img1"]
        → [A (2) → img0, B → img1]
    """
    entries: list[GalleryEntry] = []

    if draft.main_image:
        entries.append(GalleryEntry(
            kind="main",
            sub_sku=MAIN_IMAGE_LABEL,
            image_url=draft.main_image,
        ))

    instances = draft.sub_sku_instances
    counts: dict[str, int] = {}
    for index, instance in enumerate(instances):
        key = _slot_key(instance.sku, index)
        counts[key] = counts.get(key, 0) + 1

    gallery = draft.gallery_images
    seen: set[str] = set()
    for index, instance in enumerate(instances):
        key = _slot_key(instance.sku, index)
        if key in seen:
            continue
        seen.add(key)

        slot = len(seen) - 1
        count = counts[key]
        entries.append(GalleryEntry(
            kind="gallery",
            sub_sku=f"{key} ({count})" if count > 1 else key,
            image_url=gallery[slot] if slot < len(gallery) else None,
            slot_index=slot,
            instance_index=index,
            count=count,
        ))

    return entries


def unmapped_images(draft: ListingDraft) -> list[ImageReference]:
    """Stored gallery images with no sub-SKU slot pointing at them."""
    mapped = sum(1 for entry in build_gallery_entries(draft) if entry.kind == "gallery")
    return list(draft.gallery_images[mapped:])


def set_gallery_image(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    slot_index: int,
    image: ImageReference
) -> list[ListingDraft]:
    """
    Write an image into a gallery slot.

    A slot at or past the end of gallery_images appends the image instead,
    so the sequence never has holes.

    Raises:
        GalleryIndexError: If slot_index is negative
    """
    if slot_index < 0:
        raise GalleryIndexError(draft_index, slot_index)

    draft = get_draft(drafts, draft_index)
    images = list(draft.gallery_images)

    if slot_index >= len(images):
        images.append(image)
        action = "append"
    else:
        images[slot_index] = image
        action = "replace"

    logger.debug(
        "gallery_image_set",
        draft_index=draft_index,
        slot_index=slot_index,
        action=action,
    )
    return update_draft(drafts, draft_index, GALLERY_FIELD, images)


def append_gallery_images(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    images: Sequence[ImageReference]
) -> list[ListingDraft]:
    """Append uploaded or pasted images; blank references are skipped."""
    draft = get_draft(drafts, draft_index)
    added = [image.strip() for image in images if image and image.strip()]
    return update_draft(
        drafts,
        draft_index,
        GALLERY_FIELD,
        [*draft.gallery_images, *added],
    )


def remove_gallery_image(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    slot_index: int
) -> list[ListingDraft]:
    """
    Remove one gallery image and shift later images down by one.

    Every sub-SKU slot after slot_index now shows the next image.
    Removing a slot past the end is a no-op.

    Raises:
        GalleryIndexError: If slot_index is negative
    """
    if slot_index < 0:
        raise GalleryIndexError(draft_index, slot_index)

    draft = get_draft(drafts, draft_index)
    images = list(draft.gallery_images)
    if slot_index >= len(images):
        logger.debug(
            "gallery_remove_skipped",
            draft_index=draft_index,
            slot_index=slot_index,
        )
        return list(drafts)

    del images[slot_index]
    return update_draft(drafts, draft_index, GALLERY_FIELD, images)


def set_main_image(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    image: Optional[ImageReference]
) -> list[ListingDraft]:
    """Set or clear the main image. Blank references clear it."""
    if image is not None and not image.strip():
        image = None
    return update_draft(drafts, draft_index, MAIN_IMAGE_FIELD, image)
