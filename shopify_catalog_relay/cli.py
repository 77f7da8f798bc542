"""Command-line interface for the Shopify catalog relay."""

import asyncio
import logging
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table

from .browser import CatalogBrowser
from .client import CatalogClient
from .config import CatalogClientConfig, StorefrontConfig
from .mock_client import MockRelayClient
from .queries import QueryVariant
from .render import RenderMode, render_page

app = typer.Typer(
    name="shopify-catalog",
    help="Shopify Storefront catalog relay and browser CLI"
)
console = Console()


def make_client(config: CatalogClientConfig, sandbox: bool) -> CatalogClient:
    """Create a catalog client against the relay, or against sample data."""
    return CatalogClient(
        relay_url=config.relay_url,
        relay_path=config.relay_path,
        client=MockRelayClient() if sandbox else None,
    )


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    path: str = typer.Option("/api/shopify", help="Relay endpoint path"),
    log_level: str = typer.Option("INFO", help="Logging level"),
):
    """Start the relay server."""
    from .router import create_relay_app
    import uvicorn

    logging.basicConfig(level=log_level.upper())
    missing = StorefrontConfig.from_env().missing_settings()
    if missing:
        console.print(f"[yellow]⚠ Missing configuration: {', '.join(missing)}. Relay calls will fail until it is set.[/yellow]")

    relay_app = create_relay_app(path=path)
    console.print(f"[green]Starting relay on {host}:{port}[/green]")
    console.print(f"[blue]Relay endpoint: http://{host}:{port}{path}[/blue]")

    uvicorn.run(relay_app, host=host, port=port)


@app.command()
def collections(
    relay_url: str = typer.Option("http://localhost:8000", help="Base URL of the relay"),
    path: str = typer.Option("/api/shopify", help="Relay endpoint path"),
    query: QueryVariant = typer.Option(QueryVariant.FULL, help="Which fixed query to send"),
    sandbox: bool = typer.Option(False, help="Use sample data instead of the relay"),
):
    """Load collections through the relay and list them."""

    async def _collections():
        config = CatalogClientConfig(relay_url=relay_url, relay_path=path, query_variant=query)
        async with make_client(config, sandbox) as client:
            browser = CatalogBrowser(client, query_variant=config.query_variant)
            loaded = await browser.load_collections()

        if not loaded:
            console.print("[red]No collections loaded.[/red]")
            raise typer.Exit(1)

        table = Table(title="Collections")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Handle", style="magenta")
        table.add_column("Products", justify="right", style="yellow")

        for index, collection in enumerate(loaded):
            table.add_row(str(index), collection.title, collection.handle, str(len(collection.products)))

        console.print(table)

    asyncio.run(_collections())


@app.command()
def render(
    output: str = typer.Option("collections.html", help="Output HTML file"),
    relay_url: str = typer.Option("http://localhost:8000", help="Base URL of the relay"),
    path: str = typer.Option("/api/shopify", help="Relay endpoint path"),
    query: QueryVariant = typer.Option(QueryVariant.FULL, help="Which fixed query to send"),
    mode: RenderMode = typer.Option(RenderMode.FLAT, help="Flat title list or nested cards"),
    collection: Optional[int] = typer.Option(None, help="Render one collection's products by index"),
    sandbox: bool = typer.Option(False, help="Use sample data instead of the relay"),
):
    """Load collections and write them as an HTML page."""

    async def _render():
        config = CatalogClientConfig(
            relay_url=relay_url, relay_path=path, query_variant=query, render_mode=mode
        )
        async with make_client(config, sandbox) as client:
            browser = CatalogBrowser(client, mode=config.render_mode, query_variant=config.query_variant)
            await browser.load_collections()

        if collection is not None:
            try:
                browser.show_collection(collection)
            except IndexError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(1)

        output_path = Path(output)
        output_path.write_text(render_page(browser.display.content), encoding="utf-8")
        console.print(f"[green]✓[/green] Saved to {output}")

    asyncio.run(_render())


@app.command()
def validate():
    """Validate the relay's environment configuration."""
    config = StorefrontConfig.from_env()
    missing = config.missing_settings()
    if missing:
        console.print(f"[red]✗ Configuration error:[/red] missing {', '.join(missing)}")
        raise typer.Exit(1)

    console.print("[green]✓[/green] Configuration is valid!")
    console.print(f"\n[bold]Store:[/bold] {config.store}")
    console.print(f"[bold]API Version:[/bold] {config.api_version}")
    console.print(f"[bold]Endpoint:[/bold] {config.endpoint}")


if __name__ == "__main__":
    app()
