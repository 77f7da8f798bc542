"""Mock relay client for sandbox mode."""

import copy
from typing import Any, Dict, Optional


class MockResponse:
    """Minimal response object compatible with CatalogClient usage."""

    def __init__(self, data: Any, status_code: int = 200, headers: Optional[Dict[str, str]] = None):
        self._data = data
        self.status_code = status_code
        self.headers = headers or {}

    def json(self) -> Any:
        return self._data


def _edges(*nodes: Dict[str, Any]) -> Dict[str, Any]:
    return {"edges": [{"node": node} for node in nodes]}


SAMPLE_CATALOG = {
    "data": {
        "collections": _edges(
            {
                "id": "gid://shopify/Collection/1",
                "title": "Summer Tees",
                "handle": "summer-tees",
                "description": "Light cotton shirts",
                "image": {"url": "https://example.com/summer.jpg", "altText": "Summer"},
                "products": _edges(
                    {
                        "id": "gid://shopify/Product/123",
                        "title": "Mock T-Shirt",
                        "handle": "mock-t-shirt",
                        "description": "Soft cotton t-shirt",
                        "totalInventory": 12,
                        "priceRange": {
                            "minVariantPrice": {"amount": "19.99", "currencyCode": "USD"},
                            "maxVariantPrice": {"amount": "24.99", "currencyCode": "USD"},
                        },
                        "images": _edges({"url": "https://example.com/img1.jpg", "altText": "Front"}),
                        "variants": _edges(
                            {
                                "id": "gid://shopify/ProductVariant/1",
                                "title": "Small",
                                "price": {"amount": "19.99", "currencyCode": "USD"},
                                "quantityAvailable": 7,
                                "selectedOptions": [{"name": "Size", "value": "Small"}],
                            },
                            {
                                "id": "gid://shopify/ProductVariant/2",
                                "title": "Large",
                                "price": {"amount": "24.99", "currencyCode": "USD"},
                                "quantityAvailable": 5,
                                "selectedOptions": [{"name": "Size", "value": "Large"}],
                            },
                        ),
                    },
                    {
                        "id": "gid://shopify/Product/124",
                        "title": "Mock Cap",
                        "handle": "mock-cap",
                        "description": "",
                        "priceRange": {
                            "minVariantPrice": {"amount": "12.00", "currencyCode": "USD"},
                            "maxVariantPrice": {"amount": "12.00", "currencyCode": "USD"},
                        },
                    },
                ),
            },
            {
                "id": "gid://shopify/Collection/2",
                "title": "Coming Soon",
                "handle": "coming-soon",
                "description": "",
                "image": None,
                "products": {"edges": []},
            },
        )
    }
}


class MockRelayClient:
    """Mock relay client that returns a sample catalog."""

    def __init__(self, payload: Optional[Any] = None, status_code: int = 200):
        self._payload = copy.deepcopy(SAMPLE_CATALOG) if payload is None else payload
        self.status_code = status_code
        self.requests = []

    async def post(self, url: str, json: Optional[Dict[str, Any]] = None, **_kwargs) -> MockResponse:
        self.requests.append({"url": url, "json": json})
        return MockResponse(self._payload, status_code=self.status_code)

    async def aclose(self) -> None:
        return None
