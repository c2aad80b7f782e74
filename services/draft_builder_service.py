"""
Draft construction for the bulk listing workflow.

A session starts either from raw product selections (one draft per product)
or from an accepted combination bundle (one merged draft). Values copied from
upstream become the draft's pre-filled data.
"""

import math
from typing import Any, Sequence

import structlog

from models.listing_draft import ListingDraft, SubSkuInstance
from models.source_product import CombinationBundle, SourceProduct
from utils.text_utils import join_present, parse_number, split_sku_list

logger = structlog.get_logger(__name__)

FEATURE_KEYS = tuple(f"feature_{n}" for n in range(1, 8))

# Draft attribute name -> (catalog attribute key, default)
ATTRIBUTE_SOURCES = {
    "subCategory": ("sub_category", ""),
    "shortDescription": ("short_description", ""),
    "origin": ("origin", ""),
    "shippingLength": ("shipping_length_in", 0),
    "shippingWidth": ("shipping_width_in", 0),
    "shippingHeight": ("shipping_height_in", 0),
    "volume": ("volume_cuft", 0),
    "weight": ("weight_lb", 0),
    "productDimension": ("product_dimension_inch", ""),
    "style": ("style", ""),
    "material": ("material", ""),
    "color": ("color", ""),
}

BUNDLE_SET_LABEL = "Set"


def _amount(value: Any) -> float:
    """Numeric value with missing or unparseable input counted as zero."""
    number = parse_number(value)
    return 0.0 if math.isnan(number) else number


def _sum(products: Sequence[SourceProduct], name: str) -> float:
    return sum(_amount(getattr(product, name)) for product in products)


def _attr(product: SourceProduct, key: str) -> Any:
    return product.attributes.get(key)


def _features(product: SourceProduct) -> list[str]:
    return [str(_attr(product, key)) for key in FEATURE_KEYS if _attr(product, key)]


def _instances(skus: Sequence[str]) -> list[SubSkuInstance]:
    return [SubSkuInstance(sku=sku, quantity=1) for sku in skus]


def draft_from_product(product: SourceProduct) -> ListingDraft:
    """
    Build a draft from one catalog product.

    groupSku and originalGroupSku both take the product's group SKU; the
    comma-separated sub-SKU list becomes one instance per entry.
    """
    attributes = {
        name: _attr(product, key) or default
        for name, (key, default) in ATTRIBUTE_SOURCES.items()
    }

    return ListingDraft(
        product_id=str(product.id),
        group_sku=product.group_sku or "",
        original_group_sku=product.group_sku or "",
        custom_sku_prefix="",
        sub_sku_instances=_instances(split_sku_list(product.sub_sku)),
        brand_name=product.brand.name if product.brand else "",
        title=product.title or "",
        category=product.category or "",
        collection_name=product.collection_name or "",
        description=product.description or "",
        ship_types=product.ship_types or "",
        single_set_item=product.single_set_item or "",
        brand_real_price=product.brand_real_price or 0,
        brand_miscellaneous=product.brand_miscellaneous or 0,
        msrp=product.msrp or 0,
        shipping_price=product.shipping_price or 0,
        commission_price=product.commission_price or 0,
        profit_margin_price=product.profit_margin_price or 0,
        ecommerce_miscellaneous=product.ecommerce_miscellaneous or 0,
        main_image=product.main_image_url or None,
        gallery_images=list(product.gallery_images or []),
        attributes=attributes,
        features=_features(product),
    )


def draft_from_bundle(bundle: CombinationBundle) -> ListingDraft:
    """
    Build one merged draft from an accepted combination bundle.

    Merge rules:
    - prices: bundle aggregates, remaining prices summed over members
    - shipping length/width: largest member; height, volume, weight: summed
    - descriptive attributes: first member; descriptions joined
    - images: first member's main image, every member's gallery in order
    """
    products = bundle.products
    first = products[0]

    def attr_values(key: str) -> list[Any]:
        return [_attr(product, key) for product in products]

    attributes = {
        "subCategory": join_present(attr_values("sub_category"), ", "),
        "shortDescription": join_present(attr_values("short_description"), " + "),
        "origin": _attr(first, "origin") or "",
        "shippingLength": max(_amount(v) for v in attr_values("shipping_length_in")),
        "shippingWidth": max(_amount(v) for v in attr_values("shipping_width_in")),
        "shippingHeight": sum(_amount(v) for v in attr_values("shipping_height_in")),
        "volume": sum(_amount(v) for v in attr_values("volume_cuft")),
        "weight": sum(_amount(v) for v in attr_values("weight_lb")),
        "productDimension": join_present(attr_values("product_dimension_inch"), " + "),
        "style": _attr(first, "style") or "",
        "material": _attr(first, "material") or "",
        "color": _attr(first, "color") or "",
    }

    draft = ListingDraft(
        product_id="-".join(str(product.id) for product in products),
        group_sku=bundle.group_sku,
        original_group_sku=bundle.group_sku,
        custom_sku_prefix="",
        sub_sku_instances=_instances(bundle.sub_skus),
        brand_name=first.brand.name if first.brand else "",
        title=bundle.title,
        category=first.category or "",
        collection_name=first.collection_name or "",
        description=join_present((p.description for p in products), " + "),
        ship_types=first.ship_types or "",
        single_set_item=BUNDLE_SET_LABEL,
        brand_real_price=_amount(bundle.brand_real_price),
        brand_miscellaneous=_amount(bundle.brand_miscellaneous),
        msrp=_amount(bundle.msrp),
        shipping_price=_amount(bundle.shipping_price),
        commission_price=_sum(products, "commission_price"),
        profit_margin_price=_sum(products, "profit_margin_price"),
        ecommerce_miscellaneous=_sum(products, "ecommerce_miscellaneous"),
        main_image=first.main_image_url or None,
        gallery_images=[
            image for product in products for image in (product.gallery_images or [])
        ],
        attributes=attributes,
        features=[feature for product in products for feature in _features(product)],
    )

    logger.info(
        "bundle_draft_built",
        bundle_id=bundle.id,
        product_count=len(products),
        sub_sku_count=len(bundle.sub_skus),
    )
    return draft


def start_session(products: Sequence[SourceProduct]) -> list[ListingDraft]:
    """One draft per selected product, in selection order."""
    drafts = [draft_from_product(product) for product in products]
    logger.info("listing_session_started", draft_count=len(drafts))
    return drafts


def accept_bundle(bundle: CombinationBundle) -> list[ListingDraft]:
    """Replace the session's drafts with the single merged bundle draft."""
    return [draft_from_bundle(bundle)]
