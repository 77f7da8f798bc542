"""Data models for Shopify Storefront catalog data."""

from .catalog_models import (
    Collection,
    Product,
    Variant,
    Image,
    Money,
    PriceRange,
    SelectedOption,
)

__all__ = [
    "Collection",
    "Product",
    "Variant",
    "Image",
    "Money",
    "PriceRange",
    "SelectedOption",
]
