"""Example usage of the catalog client against a running relay."""

import asyncio
from shopify_catalog_relay import CatalogBrowser, CatalogClient, QueryVariant, RenderMode


async def main():
    """Example: Load collections, then drill into the first one."""

    async with CatalogClient(relay_url="http://localhost:8000") as client:
        browser = CatalogBrowser(client, mode=RenderMode.FLAT, query_variant=QueryVariant.FULL)

        print("Loading collections...")
        collections = await browser.load_collections()
        print(f"Loaded {len(collections)} collections")

        for collection in collections:
            print(f"\n- {collection.title}")
            print(f"  Products: {len(collection.products)}")
            for product in collection.products[:3]:  # Show first 3 products
                print(f"    • {product.title}")

        if collections:
            browser.show_collection(0)
            print("\nFirst collection rendered as HTML:")
            print(browser.display.content)


if __name__ == "__main__":
    asyncio.run(main())
