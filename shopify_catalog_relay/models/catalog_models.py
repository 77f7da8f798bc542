"""Pydantic models for Shopify Storefront catalog data."""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class Money(BaseModel):
    """Storefront MoneyV2 value."""
    amount: str
    currency_code: str = Field(alias="currencyCode")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PriceRange(BaseModel):
    """Lowest and highest variant price of a product."""
    min_variant_price: Money = Field(alias="minVariantPrice")
    max_variant_price: Money = Field(alias="maxVariantPrice")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def is_single_price(self) -> bool:
        return self.min_variant_price.amount == self.max_variant_price.amount


class Image(BaseModel):
    """Storefront image data."""
    url: str
    alt_text: Optional[str] = Field(None, alias="altText")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SelectedOption(BaseModel):
    """Option chosen by a variant, e.g. Size=Small."""
    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class Variant(BaseModel):
    """Storefront product variant."""
    id: str
    title: str
    price: Money
    quantity_available: Optional[int] = Field(None, alias="quantityAvailable")
    selected_options: List[SelectedOption] = Field(default_factory=list, alias="selectedOptions")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Product(BaseModel):
    """Storefront product with its images and variants."""
    id: str
    title: str
    handle: str
    description: Optional[str] = None
    price_range: PriceRange = Field(alias="priceRange")
    total_inventory: Optional[int] = Field(None, alias="totalInventory")
    images: List[Image] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def first_image(self) -> Optional[Image]:
        return self.images[0] if self.images else None


class Collection(BaseModel):
    """Storefront collection with its products."""
    id: str
    title: str
    handle: str
    description: Optional[str] = None
    image: Optional[Image] = None
    products: List[Product] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)
