# tests/test_cli.py
import pytest
from rich.console import Console

import cli


def _render(renderable) -> str:
    console = Console(record=True, width=140)
    console.print(renderable)
    return console.export_text()

def test_products_table_shows_stock_and_price():
    text = _render(cli.products_table([
        {"id": "3", "name": "Coffee Maker", "description": "timer", "price": 50, "category": "kitchen", "inStock": False},
    ]))
    assert "Coffee Maker" in text
    assert "$50.00" in text
    assert "no" in text

def test_stats_table_sorted_by_category():
    text = _render(cli.stats_table({"kitchen": 2, "electronics": 3}))
    assert text.index("electronics") < text.index("kitchen")

def test_parse_price():
    assert cli.parse_price("  ") is None
    assert cli.parse_price("12.5") == 12.5
    with pytest.raises(ValueError):
        cli.parse_price("cheap")

def test_try_api_reports_api_errors():
    def fail():
        raise cli.ProductAPIError(404, "Product not found")

    assert cli.try_api(fail) is None
    assert cli.status_message == "Error: Product not found (HTTP 404)"
