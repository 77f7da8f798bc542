import httpx
import pytest

from shopify_catalog_relay.browser import CatalogBrowser, CatalogSession, DisplayRegion
from shopify_catalog_relay.client import CatalogClient
from shopify_catalog_relay.config import StorefrontConfig
from shopify_catalog_relay.mock_client import MockRelayClient, SAMPLE_CATALOG
from shopify_catalog_relay.queries import QueryVariant
from shopify_catalog_relay.render import RenderMode, loading_message
from shopify_catalog_relay.router import create_relay_app


def make_browser(payload=None, status_code=200, **kwargs):
    relay = MockRelayClient(payload, status_code=status_code)
    return CatalogBrowser(CatalogClient(client=relay), **kwargs), relay


@pytest.mark.asyncio
async def test_empty_collections_show_message():
    browser, _ = make_browser({"data": {"collections": {"edges": []}}})
    assert await browser.load_collections() == []
    assert browser.display.content == '<p class="error">No collections found</p>'
    assert len(browser.session) == 0


@pytest.mark.asyncio
async def test_missing_collections_key_shows_message():
    browser, _ = make_browser({"data": {}})
    await browser.load_collections()
    assert "No collections found" in browser.display.content


@pytest.mark.asyncio
async def test_graphql_error_is_displayed():
    browser, _ = make_browser({"errors": [{"message": "Access denied"}]})
    assert await browser.load_collections() == []
    assert browser.display.content == '<p class="error">Error: Access denied</p>'


@pytest.mark.asyncio
async def test_failed_load_clears_previous_session():
    relay = MockRelayClient()
    browser = CatalogBrowser(CatalogClient(client=relay))
    await browser.load_collections()
    assert len(browser.session) == 2

    relay._payload = {"errors": [{"message": "Throttled"}]}
    await browser.load_collections()
    assert len(browser.session) == 0
    assert "Error: Throttled" in browser.display.content
    assert "collection-title" not in browser.display.content


@pytest.mark.asyncio
async def test_loading_indicator_shown_while_fetching():
    display = DisplayRegion()
    seen = []

    class RecordingRelay(MockRelayClient):
        async def post(self, url, json=None, **kwargs):
            seen.append(display.content)
            return await super().post(url, json=json, **kwargs)

    browser = CatalogBrowser(CatalogClient(client=RecordingRelay()), display=display)
    await browser.load_collections()
    assert seen == [loading_message()]


@pytest.mark.asyncio
async def test_flat_mode_drill_down_and_back():
    browser, relay = make_browser(mode=RenderMode.FLAT)
    await browser.load_collections()
    listing = browser.display.content
    assert 'data-collection-index="0">Summer Tees</h2>' in listing
    assert 'data-collection-index="1">Coming Soon</h2>' in listing
    assert "product-card" not in listing

    browser.show_collection(0)
    assert "Mock T-Shirt" in browser.display.content
    assert "$19.99 - $24.99 USD" in browser.display.content
    assert "$12.00 USD" in browser.display.content
    assert "Stock: 12 units" in browser.display.content

    browser.show_collection(1)
    assert "No products in this collection" in browser.display.content

    browser.back()
    assert browser.display.content == listing
    assert len(relay.requests) == 1


@pytest.mark.asyncio
async def test_nested_mode_renders_everything():
    browser, _ = make_browser(mode=RenderMode.NESTED, query_variant=QueryVariant.BASIC)
    await browser.load_collections()
    html = browser.display.content
    assert "Mock T-Shirt" in html
    assert "No products in this collection" in html
    assert "Small - $19.99 (7 available)" in html
    assert "product-inventory" not in html


@pytest.mark.asyncio
async def test_show_collection_out_of_range():
    browser, _ = make_browser()
    await browser.load_collections()
    with pytest.raises(IndexError):
        browser.show_collection(5)


def test_session_replaces_wholesale():
    session = CatalogSession()
    session.replace(["a", "b"])
    session.replace(["c"])
    assert session.collections == ("c",)
    assert session.get(0) == "c"


@pytest.mark.asyncio
async def test_browser_through_relay_app():
    upstream_calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_calls.append(request)
        return httpx.Response(200, json=SAMPLE_CATALOG)

    config = StorefrontConfig(store="mystore", access_token="storefront_test")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as upstream:
        app = create_relay_app(config_loader=lambda: config, client=upstream)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            browser = CatalogBrowser(CatalogClient(client=http), mode=RenderMode.NESTED)
            collections = await browser.load_collections()

    assert [c.title for c in collections] == ["Summer Tees", "Coming Soon"]
    assert "Mock Cap" in browser.display.content
    assert len(upstream_calls) == 1


@pytest.mark.asyncio
async def test_browser_shows_relay_configuration_error():
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={}))) as upstream:
        app = create_relay_app(config_loader=StorefrontConfig, client=upstream)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            browser = CatalogBrowser(CatalogClient(client=http))
            await browser.load_collections()

    assert "Error: Missing configuration: SHOPIFY_STORE, SHOPIFY_STOREFRONT_ACCESS_TOKEN" in browser.display.content


@pytest.mark.asyncio
@pytest.mark.parametrize("variant", list(QueryVariant))
async def test_drill_down_shows_products_for_every_query(variant):
    browser, relay = make_browser(query_variant=variant)
    await browser.load_collections()
    browser.show_collection(0)

    assert "Mock T-Shirt" in browser.display.content
    assert "No products in this collection" not in browser.display.content
    assert "products(first: 20)" in relay.requests[0]["json"]["query"]
