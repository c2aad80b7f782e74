"""
Unit tests for gallery/SKU mapping.

Tests:
1. Entry building
2. Slot writes and removals
3. Main image
"""

import pytest

from exceptions import GalleryIndexError
from services.gallery_service import (
    append_gallery_images,
    build_gallery_entries,
    remove_gallery_image,
    set_gallery_image,
    set_main_image,
    unmapped_images,
)
from services.sku_group_service import remove_instance
from tests.factories import DraftFactory


def gallery_pairs(draft):
    return [
        (entry.sub_sku, entry.image_url)
        for entry in build_gallery_entries(draft)
        if entry.kind == "gallery"
    ]


# ===================
# TEST 1: ENTRIES
# ===================

class TestBuildGalleryEntries:
    """Tests for build_gallery_entries."""

    def test_slots_follow_unique_skus(self):
        """[A, A, B] with [img0, img1] maps A (2) → img0 and B → img1."""
        draft = DraftFactory.create(sub_skus=["A", "A", "B"], gallery_images=["img0", "img1"])
        assert gallery_pairs(draft) == [("A (2)", "img0"), ("B", "img1")]

    def test_main_image_first(self, valid_draft):
        entries = build_gallery_entries(valid_draft)
        assert entries[0].kind == "main"
        assert entries[0].sub_sku == "Main Image"
        assert entries[0].image_url == valid_draft.main_image

    def test_no_main_image(self):
        draft = DraftFactory.create(main_image=None)
        assert all(entry.kind == "gallery" for entry in build_gallery_entries(draft))

    def test_missing_image_is_none(self):
        draft = DraftFactory.create(sub_skus=["A", "B", "C"], gallery_images=["img0"])
        assert gallery_pairs(draft) == [("A", "img0"), ("B", None), ("C", None)]

    def test_blank_instances_get_own_slots(self):
        draft = DraftFactory.create(sub_skus=["A", "", ""], gallery_images=["img0", "img1"])
        assert gallery_pairs(draft) == [
            ("A", "img0"),
            ("Sub SKU 2", "img1"),
            ("Sub SKU 3", None),
        ]

    def test_entry_indices(self):
        draft = DraftFactory.create(sub_skus=["A", "B", "A", "C"])
        entries = [e for e in build_gallery_entries(draft) if e.kind == "gallery"]
        assert [(e.slot_index, e.instance_index, e.count) for e in entries] == [
            (0, 0, 2),
            (1, 1, 1),
            (2, 3, 1),
        ]

    def test_unmapped_images(self):
        draft = DraftFactory.create(sub_skus=["A", "A"], gallery_images=["img0", "img1", "img2"])
        assert unmapped_images(draft) == ["img1", "img2"]

    def test_payload_shape(self):
        draft = DraftFactory.create(main_image=None, sub_skus=["A"], gallery_images=["img0"])
        payload = build_gallery_entries(draft)[0].model_dump(by_alias=True)
        assert payload["subSku"] == "A"
        assert payload["imageUrl"] == "img0"


# ===================
# TEST 2: SLOT WRITES
# ===================

class TestGalleryEdits:
    """Tests for gallery array edits."""

    def test_replace_slot(self):
        drafts = [DraftFactory.create(gallery_images=["img0", "img1"])]
        updated = set_gallery_image(drafts, 0, 1, "new")
        assert updated[0].gallery_images == ["img0", "new"]

    def test_set_past_end_appends(self):
        drafts = [DraftFactory.create(gallery_images=["img0"])]
        updated = set_gallery_image(drafts, 0, 5, "new")
        assert updated[0].gallery_images == ["img0", "new"]

    def test_negative_slot(self):
        drafts = [DraftFactory.create()]
        with pytest.raises(GalleryIndexError):
            set_gallery_image(drafts, 0, -1, "new")
        with pytest.raises(GalleryIndexError):
            remove_gallery_image(drafts, 0, -1)

    def test_append_skips_blank(self):
        drafts = [DraftFactory.create(gallery_images=["img0"])]
        updated = append_gallery_images(drafts, 0, [" img1 ", "", "  "])
        assert updated[0].gallery_images == ["img0", "img1"]

    def test_remove_shifts_later_slots(self):
        """Removing slot 0 moves every later image down one slot."""
        drafts = [DraftFactory.create(sub_skus=["A", "B"], gallery_images=["img0", "img1"])]
        updated = remove_gallery_image(drafts, 0, 0)

        assert updated[0].gallery_images == ["img1"]
        assert gallery_pairs(updated[0]) == [("A", "img1"), ("B", None)]

    def test_remove_past_end_is_noop(self):
        drafts = [DraftFactory.create(gallery_images=["img0"])]
        updated = remove_gallery_image(drafts, 0, 3)
        assert updated[0] is drafts[0]

    def test_removing_single_instance_group_shifts_slots(self):
        """Dropping a group's only instance moves later groups down one image."""
        drafts = [DraftFactory.create(sub_skus=["A", "B", "C"], gallery_images=["img0", "img1", "img2"])]
        updated = remove_instance(drafts, 0, "B")

        assert gallery_pairs(updated[0]) == [("A", "img0"), ("C", "img1")]
        assert unmapped_images(updated[0]) == ["img2"]

    def test_removing_duplicate_keeps_slots(self):
        drafts = [DraftFactory.create(sub_skus=["A", "A", "B"], gallery_images=["img0", "img1"])]
        updated = remove_instance(drafts, 0, "A")

        assert gallery_pairs(updated[0]) == [("A", "img0"), ("B", "img1")]


# ===================
# TEST 3: MAIN IMAGE
# ===================

class TestSetMainImage:
    """Tests for set_main_image."""

    def test_set(self):
        drafts = [DraftFactory.create(main_image=None)]
        assert set_main_image(drafts, 0, "blob:abc")[0].main_image == "blob:abc"

    @pytest.mark.parametrize("image", [None, "", "   "])
    def test_clear(self, image):
        drafts = [DraftFactory.create()]
        assert set_main_image(drafts, 0, image)[0].main_image is None
