from typer.testing import CliRunner

from shopify_catalog_relay.cli import app


runner = CliRunner()


def test_render_sandbox_nested(tmp_path):
    output = tmp_path / "collections.html"
    result = runner.invoke(app, ["render", "--sandbox", "--mode", "nested", "--output", str(output)])
    assert result.exit_code == 0
    page = output.read_text(encoding="utf-8")
    assert "Mock T-Shirt" in page
    assert "No products in this collection" in page


def test_render_sandbox_single_collection(tmp_path):
    output = tmp_path / "tees.html"
    result = runner.invoke(app, ["render", "--sandbox", "--collection", "0", "--output", str(output)])
    assert result.exit_code == 0
    assert 'data-action="back"' in output.read_text(encoding="utf-8")


def test_render_rejects_unknown_collection(tmp_path):
    result = runner.invoke(app, ["render", "--sandbox", "--collection", "9", "--output", str(tmp_path / "x.html")])
    assert result.exit_code == 1


def test_collections_sandbox_lists_titles():
    result = runner.invoke(app, ["collections", "--sandbox"])
    assert result.exit_code == 0
    assert "Summer Tees" in result.output
    assert "Coming Soon" in result.output


def test_validate_reports_missing_settings(monkeypatch):
    monkeypatch.delenv("SHOPIFY_STORE", raising=False)
    monkeypatch.delenv("SHOPIFY_STOREFRONT_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SHOPIFY_ACCESS_TOKEN", raising=False)
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 1
    assert "SHOPIFY_STORE" in result.output


def test_validate_prints_endpoint(monkeypatch):
    monkeypatch.setenv("SHOPIFY_STORE", "mystore")
    monkeypatch.setenv("SHOPIFY_STOREFRONT_ACCESS_TOKEN", "storefront_test")
    monkeypatch.delenv("SHOPIFY_API_VERSION", raising=False)
    result = runner.invoke(app, ["validate"])
    assert result.exit_code == 0
    assert "https://mystore.myshopify.com/api/2023-10/graphql.json" in result.output
