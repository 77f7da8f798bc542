"""FastAPI host for the relay function."""

from typing import Callable, Optional
from time import perf_counter
import logging
import httpx
from fastapi import APIRouter, FastAPI, Request, Response

from .config import DEFAULT_RELAY_PATH, StorefrontConfig
from .relay import RelayRequest, handle
from .telemetry import RelayMetrics


def get_relay_router(
    path: str = DEFAULT_RELAY_PATH,
    config_loader: Callable[[], StorefrontConfig] = StorefrontConfig.from_env,
    client: Optional[httpx.AsyncClient] = None,
    metrics: Optional[RelayMetrics] = None,
) -> APIRouter:
    """
    Create a FastAPI router exposing the relay.

    The route is registered without a method list, so every verb
    (TRACE and custom ones included) reaches the relay and gets its
    CORS headers.

    Args:
        path: Route path of the relay endpoint
        config_loader: Called on every request to read the storefront configuration
        client: Optional HTTP client for upstream calls
        metrics: Instruments to record requests on

    Returns:
        APIRouter with the relay endpoint
    """
    router = APIRouter(tags=["relay"])
    relay_metrics = metrics or RelayMetrics()
    logger = logging.getLogger("shopify_catalog_relay")

    async def relay(request: Request) -> Response:
        """Forward a GraphQL query to the Storefront API."""
        start = perf_counter()
        body = await request.body()
        result = await handle(
            RelayRequest(method=request.method, body=body),
            config=config_loader(),
            client=client,
        )

        duration_ms = (perf_counter() - start) * 1000
        relay_metrics.record(request.method, result.status_code, duration_ms)
        logger.info(
            "relay_request",
            extra={"method": request.method, "status_code": result.status_code, "duration_ms": duration_ms},
        )
        return Response(content=result.body, status_code=result.status_code, headers=result.headers)

    router.add_route(path, relay, include_in_schema=False)
    return router


def create_relay_app(
    path: str = DEFAULT_RELAY_PATH,
    config_loader: Callable[[], StorefrontConfig] = StorefrontConfig.from_env,
    client: Optional[httpx.AsyncClient] = None,
    metrics: Optional[RelayMetrics] = None,
) -> FastAPI:
    """
    Create a FastAPI app serving the relay.

    Example:
        app = create_relay_app()

        # Run with uvicorn:
        # uvicorn shopify_catalog_relay.router:create_relay_app --factory --port 8000
    """
    app = FastAPI(title="Shopify Catalog Relay")
    app.include_router(get_relay_router(path, config_loader, client, metrics))

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
