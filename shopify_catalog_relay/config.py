"""Configuration management for the Shopify catalog relay and client."""

import os
from typing import Optional, List, Mapping
from pydantic import BaseModel, Field, ConfigDict

from .queries import QueryVariant
from .render import RenderMode


STORE_ENV = "SHOPIFY_STORE"
TOKEN_ENV = "SHOPIFY_STOREFRONT_ACCESS_TOKEN"
LEGACY_TOKEN_ENV = "SHOPIFY_ACCESS_TOKEN"
API_VERSION_ENV = "SHOPIFY_API_VERSION"

DEFAULT_API_VERSION = "2023-10"
DEFAULT_RELAY_PATH = "/api/shopify"


class StorefrontConfig(BaseModel):
    """Upstream Storefront API settings used by the relay."""
    store: Optional[str] = Field(None, description="Shop name (e.g., 'mystore' for mystore.myshopify.com)")
    access_token: Optional[str] = Field(None, description="Storefront API access token")
    api_version: str = Field(DEFAULT_API_VERSION, description="Storefront API version")
    domain: str = Field("myshopify.com", description="Upstream shop domain suffix")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "store": "mystore",
                "access_token": "storefront_xxxxx",
                "api_version": "2023-10",
            }
        },
    )

    @property
    def endpoint(self) -> str:
        return f"https://{self.store}.{self.domain}/api/{self.api_version}/graphql.json"

    def missing_settings(self) -> List[str]:
        """Return the environment names of required settings that are unset or empty."""
        missing = []
        if not self.store:
            missing.append(STORE_ENV)
        if not self.access_token:
            missing.append(TOKEN_ENV)
        return missing

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StorefrontConfig":
        """
        Read settings from the process environment.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Storefront configuration (possibly incomplete, see missing_settings)
        """
        env = os.environ if environ is None else environ
        return cls(
            store=env.get(STORE_ENV),
            access_token=env.get(TOKEN_ENV) or env.get(LEGACY_TOKEN_ENV),
            api_version=env.get(API_VERSION_ENV) or DEFAULT_API_VERSION,
        )


class CatalogClientConfig(BaseModel):
    """Settings for the catalog client and browser."""
    relay_url: str = Field("http://localhost:8000", description="Base URL of the relay host")
    relay_path: str = Field(DEFAULT_RELAY_PATH, description="Path of the relay endpoint")
    query_variant: QueryVariant = Field(QueryVariant.FULL, description="Which fixed query to send")
    render_mode: RenderMode = Field(RenderMode.FLAT, description="Flat drill-down or nested rendering")
