"""Credential-hiding relay between the browser and the Storefront API.

The relay attaches the store name and access token from process-wide
configuration, forwards the query and hands the upstream JSON back
unmodified. GraphQL-level errors in the payload are not interpreted here.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import BaseModel, Field

from .config import StorefrontConfig


logger = logging.getLogger("shopify_catalog_relay")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class RelayRequest(BaseModel):
    """Incoming relay request."""
    method: str
    body: Optional[Union[bytes, str]] = None


class RelayResponse(BaseModel):
    """Relay response handed back to the HTTP host."""
    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""

    def json_body(self) -> Any:
        return json.loads(self.body)


def _response(status_code: int, body: str = "") -> RelayResponse:
    return RelayResponse(
        status_code=status_code,
        headers={"Content-Type": "application/json", **CORS_HEADERS},
        body=body,
    )


def _error(status_code: int, message: str) -> RelayResponse:
    return _response(status_code, json.dumps({"error": message}))


def parse_query(body: Optional[Union[bytes, str]]) -> str:
    """
    Extract the GraphQL document from a request body.

    Raises:
        ValueError: if the body is not JSON or has no string ``query``
    """
    if not body:
        raise ValueError("Request body is empty")
    payload = json.loads(body)
    query = payload.get("query") if isinstance(payload, dict) else None
    if not isinstance(query, str):
        raise ValueError("Request body must contain a 'query' string")
    return query


async def forward_query(
    query: str,
    config: StorefrontConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    POST a query to the Storefront API and return the decoded JSON.

    Args:
        query: GraphQL document
        config: Complete storefront configuration
        client: Optional HTTP client (a short-lived one is created otherwise)

    Returns:
        Upstream JSON, untouched
    """
    headers = {
        "Content-Type": "application/json",
        "X-Shopify-Storefront-Access-Token": config.access_token,
    }
    payload = {"query": query}
    if client is None:
        async with httpx.AsyncClient(timeout=30.0) as owned_client:
            response = await owned_client.post(config.endpoint, json=payload, headers=headers)
    else:
        response = await client.post(config.endpoint, json=payload, headers=headers)

    logger.info("upstream_response", extra={"status_code": response.status_code})
    return response.json()


async def handle(
    request: RelayRequest,
    config: Optional[StorefrontConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> RelayResponse:
    """
    Handle one relay invocation.

    Args:
        request: Incoming method and body
        config: Storefront configuration (read from the environment if None)
        client: Optional HTTP client for the upstream call

    Returns:
        200 with the upstream JSON, 200 empty for preflight, 405 for other
        methods, 500 with ``{"error": ...}`` for configuration or runtime errors
    """
    method = request.method.upper()
    if method == "OPTIONS":
        return _response(200)
    if method != "POST":
        logger.warning("relay_method_not_allowed", extra={"method": method})
        return _error(405, "Only POST requests allowed")

    if config is None:
        config = StorefrontConfig.from_env()
    missing = config.missing_settings()
    if missing:
        logger.error("relay_missing_configuration", extra={"missing": missing})
        return _error(500, f"Missing configuration: {', '.join(missing)}")

    try:
        query = parse_query(request.body)
        data = await forward_query(query, config, client)
        body = json.dumps(data)
    except Exception as exc:
        logger.exception("relay_failed")
        return _error(500, str(exc) or exc.__class__.__name__)

    return _response(200, body)
