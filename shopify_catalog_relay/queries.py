"""Fixed Storefront GraphQL queries used by the catalog client."""

from enum import Enum


COLLECTIONS_PAGE_SIZE = 10
PRODUCTS_PAGE_SIZE = 20


def build_collections_query(
    collections: int = COLLECTIONS_PAGE_SIZE,
    products: int = PRODUCTS_PAGE_SIZE,
    images: int = 5,
    variants: int = 10,
    include_inventory: bool = True,
) -> str:
    """
    Build a collections query with nested products.

    Args:
        collections: Number of collections to request
        products: Number of products per collection
        images: Number of images per product
        variants: Number of variants per product
        include_inventory: Request totalInventory and variant selectedOptions

    Returns:
        GraphQL document
    """
    inventory_field = "totalInventory" if include_inventory else ""
    options_field = (
        """
                        selectedOptions {
                          name
                          value
                        }"""
        if include_inventory
        else ""
    )
    products_block = f"""
            products(first: {products}) {{
              edges {{
                node {{
                  id
                  title
                  handle
                  description
                  {inventory_field}
                  priceRange {{
                    minVariantPrice {{
                      amount
                      currencyCode
                    }}
                    maxVariantPrice {{
                      amount
                      currencyCode
                    }}
                  }}
                  images(first: {images}) {{
                    edges {{
                      node {{
                        url
                        altText
                      }}
                    }}
                  }}
                  variants(first: {variants}) {{
                    edges {{
                      node {{
                        id
                        title
                        price {{
                          amount
                          currencyCode
                        }}
                        quantityAvailable{options_field}
                      }}
                    }}
                  }}
                }}
              }}
            }}"""

    return f"""
    {{
      collections(first: {collections}) {{
        edges {{
          node {{
            id
            title
            handle
            description
            image {{
              url
              altText
            }}{products_block}
          }}
        }}
      }}
    }}
    """


COLLECTIONS_QUERY = build_collections_query(images=1, variants=5, include_inventory=False)
COLLECTIONS_FULL_QUERY = build_collections_query()


class QueryVariant(str, Enum):
    """Which fixed query the catalog client sends."""
    BASIC = "basic"
    FULL = "full"

    @property
    def query(self) -> str:
        return {
            QueryVariant.BASIC: COLLECTIONS_QUERY,
            QueryVariant.FULL: COLLECTIONS_FULL_QUERY,
        }[self]

    @property
    def includes_inventory(self) -> bool:
        return self is QueryVariant.FULL
