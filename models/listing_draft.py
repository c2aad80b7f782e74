"""
Listing draft schemas.

A draft is one product pending onboarding in the bulk "Add to Listings"
workflow. Drafts are immutable; every edit produces a new draft.
"""

from pydantic import Field
from typing import Optional, Union

from models.base import BaseSchema, FrozenSchema


# Closed set of attribute value kinds: text, number, or absent
AttributeValue = Optional[Union[int, float, str]]

# Prices hold either a number or the raw text the user typed
PriceValue = Optional[Union[float, str]]

# URL or same-session object reference, treated alike
ImageReference = str


class SubSkuInstance(FrozenSchema):
    """
    One quantity-unit entry in a draft's sub-SKU list.

    Duplicates by value are allowed; each element is an instance.
    """

    sku: str = Field(
        "",
        description="Sub-SKU value (may repeat across instances)"
    )
    quantity: int = Field(
        1,
        ge=0,
        description="Units of this instance included in the listing"
    )
    is_custom: bool = Field(
        False,
        description="True when the user added the instance by hand"
    )


class ListingDraft(FrozenSchema):
    """
    One in-progress listing awaiting validation and submission.

    Required for submission: customSkuPrefix, groupSku, the required scalar
    fields, positive prices and the required attributes.
    """

    product_id: Optional[str] = Field(
        None,
        description="Upstream product id, dash-joined for bundles"
    )

    # ===================
    # SKU
    # ===================
    custom_sku_prefix: str = Field(
        "",
        description="User-chosen prefix, e.g. 'BRD-'"
    )
    group_sku: str = Field(
        "",
        description="Suffix appended to the prefix to form the final SKU"
    )
    original_group_sku: str = Field(
        "",
        description="Upstream group SKU the user may extend but not truncate"
    )
    sub_sku_instances: list[SubSkuInstance] = Field(
        default_factory=list,
        description="Ordered sub-SKU instances; first occurrence anchors the gallery slot"
    )

    # ===================
    # IMAGES
    # ===================
    main_image: Optional[ImageReference] = Field(
        None,
        description="Main listing image"
    )
    gallery_images: list[ImageReference] = Field(
        default_factory=list,
        description="Gallery images, positionally aligned to unique sub-SKUs"
    )

    # ===================
    # DESCRIPTIVE
    # ===================
    brand_name: str = Field("", description="Brand display name")
    category: str = Field("", description="Catalog category")
    collection_name: str = Field("", description="Brand collection")
    title: str = Field("", description="Listing title")
    description: str = Field("", description="Listing description")
    ship_types: str = Field("", description="Shipping type code")
    single_set_item: str = Field("", description="'Single' or 'Set'")
    features: list[str] = Field(
        default_factory=list,
        description="Bullet features, in display order"
    )
    attributes: dict[str, AttributeValue] = Field(
        default_factory=dict,
        description="Flat attribute bag addressed as attributes.<name>"
    )

    # ===================
    # PRICING
    # ===================
    brand_real_price: PriceValue = Field(None, description="Brand cost")
    brand_miscellaneous: PriceValue = Field(None, description="Brand-side extra cost")
    msrp: PriceValue = Field(None, description="Manufacturer suggested retail price")
    shipping_price: PriceValue = Field(None, description="Shipping cost")
    commission_price: PriceValue = Field(None, description="Marketplace commission")
    profit_margin_price: PriceValue = Field(None, description="Target profit")
    ecommerce_miscellaneous: PriceValue = Field(None, description="E-commerce extra cost")

    @property
    def final_sku(self) -> str:
        """Prefix + group SKU, or the group SKU alone when no prefix is set."""
        if self.custom_sku_prefix:
            return f"{self.custom_sku_prefix}{self.group_sku}"
        return self.group_sku


class SkuGroup(BaseSchema):
    """
    Instances sharing one SKU value.

    Derived from sub_sku_instances, never stored.
    """

    sku: str
    count: int
    is_custom: bool
    instance_indices: list[int]


class GalleryEntry(BaseSchema):
    """
    One row of the gallery/SKU display list.

    kind is "main" for the leading main-image entry and "gallery" for a
    sub-SKU slot. slot_index addresses gallery_images for gallery entries.
    """

    kind: str
    sub_sku: str
    image_url: Optional[ImageReference] = None
    slot_index: Optional[int] = None
    instance_index: Optional[int] = None
    count: int = 1
