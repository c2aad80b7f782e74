"""
Unit tests for the submission gate.
"""

import pytest

from exceptions import SubmissionBlockedError
from services.submission_service import (
    build_listing_payload,
    prepare_submission,
    submitted_sub_skus,
)
from services.sku_group_service import adjust_instance_quantity
from tests.factories import DraftFactory


class TestFinalSku:
    """final_sku is the prefix followed by the group SKU."""

    def test_prefix_and_group(self):
        draft = DraftFactory.create(custom_sku_prefix="BRD-", group_sku="GS-9")
        assert draft.final_sku == "BRD-GS-9"

    def test_no_prefix(self):
        draft = DraftFactory.create(custom_sku_prefix="", group_sku="GS-9")
        assert draft.final_sku == "GS-9"


class TestBuildListingPayload:
    """Tests for build_listing_payload."""

    def test_payload_keys(self, valid_draft):
        payload = build_listing_payload(valid_draft)

        assert payload["Sku"] == valid_draft.final_sku
        assert payload["subSku"] == "A-1,A-1,B-2"
        assert payload["mainImageUrl"] == valid_draft.main_image
        assert payload["msrp"] == 250.0
        assert payload["attributes"]["features"] == ["Solid wood"]
        assert payload["attributes"]["color"] == "color value"

    def test_zero_quantity_left_out(self):
        drafts = [DraftFactory.create(sub_skus=["A-1", "B-2"])]
        drafts = adjust_instance_quantity(drafts, 0, 0, -1)
        assert submitted_sub_skus(drafts[0]) == "B-2"

    def test_all_zero_sends_everything(self):
        drafts = [DraftFactory.create(sub_skus=["A-1"])]
        drafts = adjust_instance_quantity(drafts, 0, 0, -1)
        assert submitted_sub_skus(drafts[0]) == "A-1"


class TestPrepareSubmission:
    """Tests for prepare_submission."""

    def test_single_draft(self, valid_draft):
        payload = prepare_submission([valid_draft])
        assert payload["Sku"] == valid_draft.final_sku

    def test_several_drafts(self, draft_array):
        payload = prepare_submission(draft_array)
        assert [p["Sku"] for p in payload["listings"]] == [d.final_sku for d in draft_array]

    def test_empty_array(self):
        assert prepare_submission([]) is None

    def test_blocked(self, valid_draft):
        broken = DraftFactory.create(title="")

        with pytest.raises(SubmissionBlockedError) as exc_info:
            prepare_submission([valid_draft, broken])

        error = exc_info.value
        assert error.code == "SUBMISSION_BLOCKED"
        assert error.status_code == 422
        assert error.details["errors"] == [
            {"draft_index": 1, "field_path": "title", "message": "title is required"},
        ]
