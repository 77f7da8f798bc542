"""Catalog client that talks to the relay."""

from typing import Any, Dict, List, Optional
import logging
import httpx
from pydantic import ValidationError

from .config import DEFAULT_RELAY_PATH
from .decoding import decode_collections
from .models.catalog_models import Collection
from .queries import QueryVariant


logger = logging.getLogger("shopify_catalog_relay")

TRANSPORT_ERROR_MESSAGE = "Could not reach the catalog service"
INVALID_RESPONSE_MESSAGE = "Catalog service returned an invalid response"


class CatalogFetchError(Exception):
    """Raised when collections could not be fetched through the relay."""

    def __init__(self, message: str, errors: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def first_error_message(errors: Any) -> str:
    """
    Return the message of the first GraphQL error.

    Shopify sends a list of error objects for query errors, but a bare
    string or a single object for some authentication failures.
    """
    if isinstance(errors, list):
        errors = errors[0]
    if isinstance(errors, dict) and errors.get("message"):
        return str(errors["message"])
    return str(errors)


class CatalogClient:
    """
    Client for the catalog relay.

    Sends fixed GraphQL queries to the relay and unwraps the
    ``{data, errors}`` envelope. No retries and no request timeout.
    """

    def __init__(
        self,
        relay_url: str = "http://localhost:8000",
        relay_path: str = DEFAULT_RELAY_PATH,
        client: Optional[Any] = None,
    ):
        """
        Initialize the client.

        Args:
            relay_url: Base URL of the relay host
            relay_path: Path of the relay endpoint
            client: Optional HTTP client (e.g., MockRelayClient)
        """
        self.relay_path = relay_path
        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(
                base_url=relay_url,
                headers={"Content-Type": "application/json"},
                timeout=None,
            )
            self._owns_client = True

    async def close(self):
        """Close HTTP client."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def call_relay(self, query: str) -> Optional[Dict[str, Any]]:
        """
        Send a query through the relay.

        Args:
            query: GraphQL document

        Returns:
            The ``data`` member of the GraphQL response

        Raises:
            CatalogFetchError: on transport failure, an undecodable body,
                a relay error status or GraphQL errors
        """
        try:
            response = await self.client.post(self.relay_path, json={"query": query})
            payload = response.json()
        except httpx.HTTPError as exc:
            logger.error("relay_transport_error", exc_info=True)
            raise CatalogFetchError(TRANSPORT_ERROR_MESSAGE) from exc
        except ValueError as exc:
            logger.error("relay_invalid_json", exc_info=True)
            raise CatalogFetchError(INVALID_RESPONSE_MESSAGE) from exc

        logger.debug("relay_response", extra={"status_code": response.status_code, "payload": payload})

        if not isinstance(payload, dict):
            logger.error("relay_unexpected_payload", extra={"payload": payload})
            raise CatalogFetchError(INVALID_RESPONSE_MESSAGE)

        errors = payload.get("errors")
        if errors:
            logger.error("graphql_errors", extra={"errors": errors})
            raise CatalogFetchError(first_error_message(errors), errors=errors)

        if response.status_code >= 400:
            message = payload.get("error") or f"Relay returned HTTP {response.status_code}"
            logger.error("relay_error_status", extra={"status_code": response.status_code, "error": message})
            raise CatalogFetchError(str(message))

        return payload.get("data")

    async def fetch_collections(self, variant: QueryVariant = QueryVariant.FULL) -> List[Collection]:
        """
        Fetch collections with the given fixed query.

        A payload without ``collections`` (absent or null) decodes to an
        empty list and is logged.

        Args:
            variant: Which fixed query to send

        Returns:
            Collections in API order
        """
        data = await self.call_relay(variant.query)
        if not isinstance(data, dict) or data.get("collections") is None:
            logger.warning("no_collections_data", extra={"data": data})
            return []
        try:
            return decode_collections(data)
        except ValidationError as exc:
            logger.error("collections_decode_failed", exc_info=True)
            raise CatalogFetchError(INVALID_RESPONSE_MESSAGE) from exc
