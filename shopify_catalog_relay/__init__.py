"""
Shopify Storefront catalog relay

A credential-hiding relay for the Shopify Storefront GraphQL API and a
catalog client that renders collections and their products.
"""

__version__ = "0.1.0"

from .browser import CatalogBrowser, CatalogSession, DisplayRegion
from .client import CatalogClient, CatalogFetchError
from .config import CatalogClientConfig, StorefrontConfig
from .mock_client import MockRelayClient
from .queries import QueryVariant
from .relay import RelayRequest, RelayResponse, handle
from .render import RenderMode
from .router import create_relay_app, get_relay_router

__all__ = [
    "CatalogBrowser",
    "CatalogSession",
    "DisplayRegion",
    "CatalogClient",
    "CatalogFetchError",
    "CatalogClientConfig",
    "StorefrontConfig",
    "MockRelayClient",
    "QueryVariant",
    "RelayRequest",
    "RelayResponse",
    "handle",
    "RenderMode",
    "create_relay_app",
    "get_relay_router",
]
