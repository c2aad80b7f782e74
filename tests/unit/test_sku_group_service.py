"""
Unit tests for sub-SKU group synchronization.
"""

import pytest

from exceptions import DraftNotFoundError, SubSkuIndexError
from services.sku_group_service import (
    add_duplicate_instance,
    add_sub_sku_instance,
    adjust_instance_quantity,
    build_sku_groups,
    remove_instance,
    rename_group,
)
from tests.factories import DraftFactory, instances


def skus(draft):
    return [instance.sku for instance in draft.sub_sku_instances]


class TestBuildSkuGroups:
    """Tests for build_sku_groups."""

    def test_groups_in_first_seen_order(self):
        groups = build_sku_groups(instances("A", "A", "B"))

        assert [(g.sku, g.count, g.instance_indices) for g in groups] == [
            ("A", 2, [0, 1]),
            ("B", 1, [2]),
        ]

    def test_interleaved_duplicates(self):
        groups = build_sku_groups(instances("A", "B", "A"))
        assert groups[0].instance_indices == [0, 2]
        assert groups[1].instance_indices == [1]

    def test_counts_sum_to_instances(self):
        items = instances("A", "B", "A", "C", "", "")
        assert sum(g.count for g in build_sku_groups(items)) == len(items)

    def test_empty(self):
        assert build_sku_groups([]) == []


class TestGroupEdits:
    """Edits write the full instance list back through update_draft."""

    def test_add_blank_instance(self):
        drafts = [DraftFactory.create(sub_skus=["A-1"])]
        updated = add_sub_sku_instance(drafts, 0)

        added = updated[0].sub_sku_instances[-1]
        assert added.sku == ""
        assert added.quantity == 1
        assert added.is_custom

    def test_add_duplicate(self):
        drafts = [DraftFactory.create(sub_skus=["A-1", "B-2"])]
        updated = add_duplicate_instance(drafts, 0, "A-1")

        assert skus(updated[0]) == ["A-1", "B-2", "A-1"]
        assert build_sku_groups(updated[0].sub_sku_instances)[0].count == 2

    def test_add_then_remove_restores_instances(self):
        """[A, A, B]: adding one A then removing one A gives back the same list."""
        drafts = [DraftFactory.create(sub_skus=["A", "A", "B"])]

        added = add_duplicate_instance(drafts, 0, "A")
        assert build_sku_groups(added[0].sub_sku_instances)[0].count == 3
        assert len(added[0].sub_sku_instances) == 4

        restored = remove_instance(added, 0, "A")
        assert restored[0].sub_sku_instances == drafts[0].sub_sku_instances

    def test_remove_then_add_restores_group(self):
        """[A, A, B]: removing one A then adding one back gives A a count of 2."""
        drafts = [DraftFactory.create(sub_skus=["A", "A", "B"])]

        removed = remove_instance(drafts, 0, "A")
        assert skus(removed[0]) == ["A", "B"]

        restored = add_duplicate_instance(removed, 0, "A")
        assert [(g.sku, g.count) for g in build_sku_groups(restored[0].sub_sku_instances)] == [
            ("A", 2),
            ("B", 1),
        ]

    def test_remove_takes_last_occurrence(self):
        drafts = [DraftFactory.create(sub_skus=["A", "B", "A"])]
        assert skus(remove_instance(drafts, 0, "A")[0]) == ["A", "B"]

    def test_remove_unknown_sku_is_noop(self):
        drafts = [DraftFactory.create(sub_skus=["A"])]
        updated = remove_instance(drafts, 0, "Z")
        assert updated[0] is drafts[0]

    def test_rename_group(self):
        drafts = [DraftFactory.create(sub_skus=["A", "A", "B"])]
        group = build_sku_groups(drafts[0].sub_sku_instances)[0]

        updated = rename_group(drafts, 0, " NEW-1 ", group.instance_indices)

        assert skus(updated[0]) == ["NEW-1", "NEW-1", "B"]
        assert skus(drafts[0]) == ["A", "A", "B"]

    def test_rename_bad_index(self):
        drafts = [DraftFactory.create(sub_skus=["A"])]
        with pytest.raises(SubSkuIndexError):
            rename_group(drafts, 0, "B", [0, 3])

    def test_rename_leaves_other_drafts(self, draft_array):
        updated = rename_group(draft_array, 1, "X-1", [0])
        assert updated[0] is draft_array[0]

    def test_unknown_draft(self, draft_array):
        with pytest.raises(DraftNotFoundError):
            add_sub_sku_instance(draft_array, 9)


class TestAdjustQuantity:
    """Tests for adjust_instance_quantity."""

    def test_increment(self):
        drafts = [DraftFactory.create(sub_skus=["A"])]
        updated = adjust_instance_quantity(drafts, 0, 0, 2)
        assert updated[0].sub_sku_instances[0].quantity == 3

    def test_clamped_at_zero(self):
        drafts = [DraftFactory.create(sub_skus=["A"])]
        updated = adjust_instance_quantity(drafts, 0, 0, -5)
        assert updated[0].sub_sku_instances[0].quantity == 0

    def test_bad_instance_index(self):
        drafts = [DraftFactory.create(sub_skus=["A"])]
        with pytest.raises(SubSkuIndexError):
            adjust_instance_quantity(drafts, 0, 1, 1)
