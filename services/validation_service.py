"""
Validation aggregator for the draft array.

Runs the full rule set over every draft and keys each failure by
(draft_index, field_path). Every call re-derives pre-filled status and
re-validates every field; nothing is carried over from a previous pass.

Field rules:
- customSkuPrefix: SKU pattern
- groupSku: required, pre-filled when originalGroupSku is set
- brandName, category, collectionName, title, description: required
- seven price fields: numeric (zero allowed only when pre-filled)
- twelve attributes: required
- every sub-SKU instance: required
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import structlog

from models.field_path import AttributePath, TopLevelPath
from models.listing_draft import ListingDraft
from services.field_validators import (
    FieldCheck,
    validate_numeric_field,
    validate_required_field,
    validate_sku,
)
from services.prefill_service import is_pre_filled, resolve_value
from utils.text_utils import parse_number

logger = structlog.get_logger(__name__)

CUSTOM_SKU_FIELD = "customSkuPrefix"
GROUP_SKU_FIELD = "groupSku"
GROUP_SKU_LABEL = "Group SKU"
SUB_SKU_FIELD = "subSkuInstances"

REQUIRED_SCALAR_FIELDS = (
    "brandName",
    "category",
    "collectionName",
    "title",
    "description",
)

NUMERIC_PRICE_FIELDS = (
    "brandRealPrice",
    "brandMiscellaneous",
    "msrp",
    "shippingPrice",
    "commissionPrice",
    "profitMarginPrice",
    "ecommerceMiscellaneous",
)

REQUIRED_ATTRIBUTES = (
    "color",
    "style",
    "material",
    "origin",
    "weight",
    "volume",
    "shippingLength",
    "shippingWidth",
    "shippingHeight",
    "productDimension",
    "shortDescription",
    "fullDescription",
)


@dataclass(frozen=True)
class ValidationIssue:
    """Single field failure."""
    draft_index: int
    field_path: str
    message: str


@dataclass
class ValidationReport:
    """Result of validating a whole draft array."""
    errors: dict[tuple[int, str], str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if no draft has any error."""
        return len(self.errors) == 0

    @property
    def issues(self) -> list[ValidationIssue]:
        return [
            ValidationIssue(draft_index=index, field_path=path, message=message)
            for (index, path), message in self.errors.items()
        ]

    def errors_for(self, draft_index: int) -> dict[str, str]:
        """Errors of one draft, keyed by field path."""
        return {
            path: message
            for (index, path), message in self.errors.items()
            if index == draft_index
        }

    def message_for(self, draft_index: int, field_path: str) -> Optional[str]:
        return self.errors.get((draft_index, field_path))

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "is_valid": self.is_valid,
            "errors": [
                {
                    "draft_index": issue.draft_index,
                    "field_path": issue.field_path,
                    "message": issue.message,
                }
                for issue in self.issues
            ],
        }


def _record(
    issues: list[ValidationIssue],
    draft_index: int,
    field_path: str,
    check: FieldCheck
) -> None:
    if not check.is_valid:
        issues.append(ValidationIssue(draft_index, field_path, check.error))


def validate_draft(draft: ListingDraft, draft_index: int) -> list[ValidationIssue]:
    """
    Validate every field of one draft.

    Args:
        draft: Draft to check
        draft_index: Position used in the error keys

    Returns:
        List of failures, empty when the draft is submission-ready
    """
    issues: list[ValidationIssue] = []

    _record(
        issues, draft_index, CUSTOM_SKU_FIELD,
        validate_sku(draft.custom_sku_prefix or "")
    )

    _record(
        issues, draft_index, GROUP_SKU_FIELD,
        validate_required_field(
            draft.group_sku or "",
            GROUP_SKU_LABEL,
            is_pre_filled(draft, TopLevelPath(GROUP_SKU_FIELD)),
        )
    )

    for name in REQUIRED_SCALAR_FIELDS:
        path = TopLevelPath(name)
        value = resolve_value(draft, path)
        _record(
            issues, draft_index, name,
            validate_required_field(
                value if value is not None else "",
                name,
                is_pre_filled(draft, path),
            )
        )

    for name in NUMERIC_PRICE_FIELDS:
        path = TopLevelPath(name)
        _record(
            issues, draft_index, name,
            validate_numeric_field(
                parse_number(resolve_value(draft, path)),
                name,
                is_pre_filled(draft, path),
            )
        )

    for name in REQUIRED_ATTRIBUTES:
        path = AttributePath(name)
        value = resolve_value(draft, path)
        _record(
            issues, draft_index, str(path),
            validate_required_field(
                value if value is not None else "",
                name,
                is_pre_filled(draft, path),
            )
        )

    for instance_index, instance in enumerate(draft.sub_sku_instances):
        _record(
            issues, draft_index, f"{SUB_SKU_FIELD}.{instance_index}",
            validate_required_field(
                instance.sku or "",
                f"Sub SKU {instance_index + 1}",
            )
        )

    return issues


def validate_all(drafts: Sequence[ListingDraft]) -> ValidationReport:
    """
    Validate the whole draft array.

    Calling it twice on the same array yields identical reports.

    Returns:
        ValidationReport; is_valid is True only when no draft has errors
    """
    report = ValidationReport()
    for draft_index, draft in enumerate(drafts):
        for issue in validate_draft(draft, draft_index):
            report.errors[(issue.draft_index, issue.field_path)] = issue.message

    logger.debug(
        "drafts_validated",
        draft_count=len(drafts),
        error_count=len(report.errors),
    )
    return report
