"""
Sub-SKU group synchronization.

A draft's sub_sku_instances may repeat a SKU value; each repeat is one more
unit of that SKU. The UI edits instances group by group:
    add blank       -> new custom instance with an empty SKU
    add duplicate   -> one more instance of an existing SKU
    remove instance -> drop the last instance holding a SKU
    rename group    -> every instance of the group takes the new SKU

Each operation writes the complete new instance list through set_field(), so
validation never sees a half-renamed group.
"""

from typing import Sequence

import structlog

from exceptions import SubSkuIndexError
from models.listing_draft import ListingDraft, SkuGroup, SubSkuInstance
from services.draft_mutator import get_draft, update_draft

logger = structlog.get_logger(__name__)

SUB_SKU_FIELD = "subSkuInstances"


def build_sku_groups(instances: Sequence[SubSkuInstance]) -> list[SkuGroup]:
    """
    Group instances by SKU value in first-seen order.

    is_custom comes from the first instance of each group.

    Example:
        [A, A, B] → [SkuGroup(sku="A", count=2, indices=[0, 1]),
                     SkuGroup(sku="B", count=1, indices=[2])]
    """
    groups: dict[str, SkuGroup] = {}
    for index, instance in enumerate(instances):
        group = groups.get(instance.sku)
        if group is None:
            groups[instance.sku] = SkuGroup(
                sku=instance.sku,
                count=1,
                is_custom=instance.is_custom,
                instance_indices=[index],
            )
        else:
            group.count += 1
            group.instance_indices.append(index)
    return list(groups.values())


def _write_instances(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    instances: list[SubSkuInstance],
    action: str
) -> list[ListingDraft]:
    updated = update_draft(drafts, draft_index, SUB_SKU_FIELD, instances)
    logger.debug(
        "sub_sku_instances_updated",
        action=action,
        draft_index=draft_index,
        instance_count=len(instances),
    )
    return updated


def add_sub_sku_instance(
    drafts: Sequence[ListingDraft],
    draft_index: int
) -> list[ListingDraft]:
    """Append a blank custom instance."""
    draft = get_draft(drafts, draft_index)
    instances = [
        *draft.sub_sku_instances,
        SubSkuInstance(sku="", quantity=1, is_custom=True),
    ]
    return _write_instances(drafts, draft_index, instances, "add_blank")


def add_duplicate_instance(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    sku: str
) -> list[ListingDraft]:
    """Append one more instance of sku, growing its group by one."""
    draft = get_draft(drafts, draft_index)
    instances = [
        *draft.sub_sku_instances,
        SubSkuInstance(sku=sku, quantity=1, is_custom=False),
    ]
    return _write_instances(drafts, draft_index, instances, "add_duplicate")


def remove_instance(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    sku: str
) -> list[ListingDraft]:
    """
    Remove the last instance holding sku.

    Earlier instances keep their positions. While the group keeps at least
    one instance its gallery slot is unaffected; removing a group's only
    instance drops its slot and every later group moves up one image.

    Returns:
        New draft array; its drafts are unchanged when no instance holds sku
    """
    draft = get_draft(drafts, draft_index)
    instances = list(draft.sub_sku_instances)

    last_index = next(
        (i for i in range(len(instances) - 1, -1, -1) if instances[i].sku == sku),
        None
    )
    if last_index is None:
        logger.debug("sub_sku_remove_skipped", draft_index=draft_index, sku=sku)
        return list(drafts)

    del instances[last_index]
    return _write_instances(drafts, draft_index, instances, "remove_instance")


def rename_group(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    new_sku: str,
    indices: Sequence[int]
) -> list[ListingDraft]:
    """
    Give every instance in a group the same new SKU.

    Args:
        drafts: Current draft array
        draft_index: Draft owning the group
        new_sku: New SKU value (surrounding whitespace is stripped)
        indices: Instance indices of the group (SkuGroup.instance_indices)

    Raises:
        SubSkuIndexError: If an index is outside the instance list
    """
    draft = get_draft(drafts, draft_index)
    instances = list(draft.sub_sku_instances)
    new_sku = new_sku.strip()

    for index in indices:
        if index < 0 or index >= len(instances):
            raise SubSkuIndexError(draft_index, index, len(instances))

    for index in indices:
        instances[index] = instances[index].model_copy(update={"sku": new_sku})

    return _write_instances(drafts, draft_index, instances, "rename_group")


def adjust_instance_quantity(
    drafts: Sequence[ListingDraft],
    draft_index: int,
    instance_index: int,
    delta: int
) -> list[ListingDraft]:
    """
    Change one instance's quantity by delta, never below zero.

    Instances left at zero are kept in the draft but dropped from the
    submitted sub-SKU list.
    """
    draft = get_draft(drafts, draft_index)
    instances = list(draft.sub_sku_instances)
    if instance_index < 0 or instance_index >= len(instances):
        raise SubSkuIndexError(draft_index, instance_index, len(instances))

    current = instances[instance_index]
    instances[instance_index] = current.model_copy(
        update={"quantity": max(0, current.quantity + delta)}
    )
    return _write_instances(drafts, draft_index, instances, "adjust_quantity")
