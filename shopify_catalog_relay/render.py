"""HTML rendering for the catalog browser.

Every function here is a pure function of its input and returns an HTML
fragment. Class names match the page template: ``collection-title``,
``collection-description``, ``collection-image``, ``product-title``,
``product-description``, ``product-image``, ``product-price``,
``product-inventory``, ``product-variants``, ``no-image`` and ``no-products``.
"""

from enum import Enum
from html import escape
from typing import Optional, Sequence

from .models.catalog_models import Collection, Image, PriceRange, Product, Variant


NO_DESCRIPTION = "No description"
NO_IMAGE = "No image"
NO_PRODUCTS = "No products in this collection"
NO_COLLECTIONS = "No collections found"
LOADING = "Loading collections..."


class RenderMode(str, Enum):
    """How a loaded collection list is displayed."""
    FLAT = "flat"
    NESTED = "nested"


def format_price(price_range: PriceRange) -> str:
    """
    Format a product price range for display.

    Amounts are shown exactly as the API returned them.

    Args:
        price_range: Product price range

    Returns:
        "$19.99 USD" for a single price, "$10.00 - $15.00 USD" for a range
    """
    low = price_range.min_variant_price
    high = price_range.max_variant_price
    if price_range.is_single_price:
        return f"${low.amount} {low.currency_code}"
    return f"${low.amount} - ${high.amount} {low.currency_code}"


def format_inventory(product: Product) -> str:
    return f"Stock: {product.total_inventory or 0} units"


def format_variant(variant: Variant) -> str:
    return f"{variant.title} - ${variant.price.amount} ({variant.quantity_available or 0} available)"


def loading_message() -> str:
    return f'<p class="loading">{LOADING}</p>'


def empty_message() -> str:
    return f'<p class="error">{NO_COLLECTIONS}</p>'


def error_message(message: str) -> str:
    return f'<p class="error">Error: {escape(message)}</p>'


def _render_image(image: Optional[Image], fallback_alt: str, css_class: str) -> str:
    if image is None:
        return f'<div class="{css_class}"><div class="no-image">{NO_IMAGE}</div></div>'
    alt = image.alt_text or fallback_alt
    return f'<div class="{css_class}"><img src="{escape(image.url)}" alt="{escape(alt)}"></div>'


def render_product(product: Product, show_inventory: bool = False) -> str:
    """Render one product card."""
    parts = [
        '<div class="product-card">',
        _render_image(product.first_image, product.title, "product-image"),
        f'<h3 class="product-title">{escape(product.title)}</h3>',
        f'<p class="product-description">{escape(product.description or NO_DESCRIPTION)}</p>',
        f'<p class="product-price">{escape(format_price(product.price_range))}</p>',
    ]
    if show_inventory:
        parts.append(f'<p class="product-inventory">{format_inventory(product)}</p>')
    if product.variants:
        items = "".join(f"<li>{escape(format_variant(v))}</li>" for v in product.variants)
        parts.append(f'<ul class="product-variants">{items}</ul>')
    parts.append("</div>")
    return "".join(parts)


def render_product_grid(products: Sequence[Product], show_inventory: bool = False) -> str:
    """Render a grid of products, or the empty-collection message."""
    if not products:
        return f'<p class="no-products">{NO_PRODUCTS}</p>'
    cards = "".join(render_product(p, show_inventory) for p in products)
    return f'<div class="products-grid">{cards}</div>'


def render_collection_list(collections: Sequence[Collection]) -> str:
    """Render collection titles as clickable elements keyed by index."""
    items = "".join(
        '<div class="collection-card">'
        f'<h2 class="collection-title" data-collection-index="{index}">{escape(c.title)}</h2>'
        "</div>"
        for index, c in enumerate(collections)
    )
    return f'<div class="collections-grid">{items}</div>'


def render_collection_products(collection: Collection, show_inventory: bool = False) -> str:
    """Render one collection's product grid with a back control."""
    return (
        '<div class="collection-products">'
        '<button class="back-button" data-action="back">&larr; Back to collections</button>'
        f'<h2 class="collection-title">{escape(collection.title)}</h2>'
        f"{render_product_grid(collection.products, show_inventory)}"
        "</div>"
    )


def render_collection_card(collection: Collection, show_inventory: bool = False) -> str:
    """Render a collection card with its products inline."""
    return (
        '<div class="collection-card">'
        f'<h2 class="collection-title">{escape(collection.title)}</h2>'
        f'<p class="collection-description">{escape(collection.description or NO_DESCRIPTION)}</p>'
        f"{_render_image(collection.image, collection.title, 'collection-image')}"
        f"{render_product_grid(collection.products, show_inventory)}"
        "</div>"
    )


def render_nested(collections: Sequence[Collection], show_inventory: bool = False) -> str:
    cards = "".join(render_collection_card(c, show_inventory) for c in collections)
    return f'<div class="collections-grid">{cards}</div>'


def render_collections(
    collections: Sequence[Collection],
    mode: RenderMode = RenderMode.FLAT,
    show_inventory: bool = False,
) -> str:
    """
    Render a loaded collection list.

    Args:
        collections: Collections to display
        mode: Flat title list with drill-down, or nested cards
        show_inventory: Include the stock line on product cards

    Returns:
        HTML fragment
    """
    if not collections:
        return empty_message()
    if mode is RenderMode.NESTED:
        return render_nested(collections, show_inventory)
    return render_collection_list(collections)


def render_page(fragment: str, title: str = "Collections") -> str:
    """Wrap a fragment into a standalone HTML document."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f'<div id="collections-container">{fragment}</div>\n'
        "</body>\n"
        "</html>\n"
    )
