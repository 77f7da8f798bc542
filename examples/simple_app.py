from shopify_catalog_relay import create_relay_app

# Reads SHOPIFY_STORE and SHOPIFY_STOREFRONT_ACCESS_TOKEN on every request.
app = create_relay_app()

# Run: uvicorn examples.simple_app:app --reload
