"""
Upstream shapes the engine consumes when a listing session starts.

SourceProduct mirrors the product records the catalog API returns.
CombinationBundle is one accepted suggestion from the combination generator;
the engine never generates bundles, it only turns an accepted one into a draft.
"""

from pydantic import Field
from typing import Any, Optional, Union

from models.base import BaseSchema

PriceInput = Optional[Union[float, str]]


class SourceBrand(BaseSchema):
    """Brand reference embedded in a product record."""
    id: Optional[int] = None
    name: str = ""


class SourceProduct(BaseSchema):
    """
    Product record as returned by the catalog API.

    Prices arrive as numbers or numeric strings. attributes keeps the API's
    snake_case keys (weight_lb, shipping_length_in, feature_1 ...).
    """

    id: Union[int, str] = Field(..., description="Product id")
    title: str = ""
    group_sku: Optional[str] = None
    sub_sku: Optional[str] = Field(
        None,
        description="Comma-separated sub-SKU list, e.g. 'A-1, B-2'"
    )
    category: Optional[str] = None
    collection_name: Optional[str] = None
    ship_types: Optional[str] = None
    single_set_item: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[SourceBrand] = None

    brand_real_price: PriceInput = None
    brand_miscellaneous: PriceInput = None
    msrp: PriceInput = None
    shipping_price: PriceInput = None
    commission_price: PriceInput = None
    profit_margin_price: PriceInput = None
    ecommerce_miscellaneous: PriceInput = None

    main_image_url: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    attributes: dict[str, Any] = Field(default_factory=dict)


class CombinationBundle(BaseSchema):
    """
    Accepted combination suggestion.

    Aggregate prices are computed by the suggestion generator and used as-is.
    """

    id: int = 0
    products: list[SourceProduct] = Field(..., min_length=1)
    group_sku: str = ""
    sub_skus: list[str] = Field(default_factory=list)
    title: str = ""
    product_count: int = 0
    brand_real_price: PriceInput = None
    brand_miscellaneous: PriceInput = None
    msrp: PriceInput = None
    shipping_price: PriceInput = None
