"""Decode Storefront GraphQL payloads into catalog models.

GraphQL connections (``{"edges": [{"node": ...}]}``) are flattened into plain
lists here. A missing or null connection decodes to an empty list, so the
rendering code never has to check for absent containers.
"""

from typing import Any, Dict, List, Optional

from .models.catalog_models import Collection, Product


def connection_nodes(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return the nodes of a GraphQL connection, or an empty list."""
    if not connection:
        return []
    return [
        edge["node"]
        for edge in connection.get("edges") or []
        if edge and edge.get("node") is not None
    ]


def decode_product(node: Dict[str, Any]) -> Product:
    return Product.model_validate({
        **node,
        "images": connection_nodes(node.get("images")),
        "variants": connection_nodes(node.get("variants")),
    })


def decode_collection(node: Dict[str, Any]) -> Collection:
    products = [decode_product(p) for p in connection_nodes(node.get("products"))]
    return Collection.model_validate({**node, "products": products})


def decode_collections(data: Optional[Dict[str, Any]]) -> List[Collection]:
    """
    Decode the ``data`` member of a collections query.

    Args:
        data: GraphQL ``data`` object (may be None)

    Returns:
        Collections in the order the API returned them
    """
    if not data:
        return []
    return [decode_collection(node) for node in connection_nodes(data.get("collections"))]
