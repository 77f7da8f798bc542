"""Two-level catalog browser: collections, then a collection's products."""

from typing import List, Optional, Sequence, Tuple
import logging

from .client import CatalogClient, CatalogFetchError
from .models.catalog_models import Collection
from .queries import QueryVariant
from .render import (
    RenderMode,
    empty_message,
    error_message,
    loading_message,
    render_collection_products,
    render_collections,
)


logger = logging.getLogger("shopify_catalog_relay")


class DisplayRegion:
    """The page region the browser renders into."""

    def __init__(self, content: str = ""):
        self.content = content

    def set(self, content: str) -> None:
        self.content = content


class CatalogSession:
    """Collections fetched during one browsing session, indexed by position."""

    def __init__(self):
        self._collections: Tuple[Collection, ...] = ()

    @property
    def collections(self) -> Tuple[Collection, ...]:
        return self._collections

    def replace(self, collections: Sequence[Collection]) -> None:
        self._collections = tuple(collections)

    def clear(self) -> None:
        self._collections = ()

    def get(self, index: int) -> Collection:
        if not 0 <= index < len(self._collections):
            raise IndexError(f"No collection at index {index}")
        return self._collections[index]

    def __len__(self) -> int:
        return len(self._collections)


class CatalogBrowser:
    """
    Load collections through the relay and render them.

    Handles:
    - Loading indicator, error and empty states
    - Flat title list with drill-down into one collection
    - Nested rendering of every collection with its products
    """

    def __init__(
        self,
        client: CatalogClient,
        display: Optional[DisplayRegion] = None,
        mode: RenderMode = RenderMode.FLAT,
        query_variant: QueryVariant = QueryVariant.FULL,
    ):
        self.client = client
        self.display = display or DisplayRegion()
        self.mode = mode
        self.query_variant = query_variant
        self.session = CatalogSession()

    @property
    def show_inventory(self) -> bool:
        return self.query_variant.includes_inventory

    async def load_collections(self) -> List[Collection]:
        """
        Fetch collections and render them into the display region.

        Returns:
            The loaded collections (empty on failure or when none exist)
        """
        self.display.set(loading_message())

        try:
            collections = await self.client.fetch_collections(self.query_variant)
        except CatalogFetchError as exc:
            self.session.clear()
            self.display.set(error_message(exc.message))
            logger.error("load_collections_failed", exc_info=True, extra={"errors": exc.errors})
            return []

        if not collections:
            self.session.clear()
            self.display.set(empty_message())
            return []

        self.session.replace(collections)
        self.show_collections()
        logger.info("collections_loaded", extra={"count": len(collections)})
        return collections

    def show_collections(self) -> None:
        """Render the stored collections without refetching."""
        self.display.set(
            render_collections(self.session.collections, self.mode, self.show_inventory)
        )

    def show_collection(self, index: int) -> None:
        """Switch the display to one collection's product grid."""
        collection = self.session.get(index)
        self.display.set(render_collection_products(collection, self.show_inventory))

    def back(self) -> None:
        self.show_collections()
