# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from product_sdk.client import ProductClient, ProductAPIError, _parse_bool


@pytest.fixture
def sdk(app):
    with TestClient(app) as session:
        yield ProductClient(base_url="http://testserver", session=session)


def test_welcome_and_list(sdk):
    assert sdk.welcome().startswith("Welcome to the Product API!")
    page = sdk.list_products(category="electronics", page=2, limit=2)
    assert page["total"] == 3
    assert [p["name"] for p in page["products"]] == ["Headphones"]

def test_create_update_delete_cycle(sdk):
    created = sdk.create_product("Desk", "Standing desk", 300, "furniture", in_stock=False)
    assert created["inStock"] is False

    updated = sdk.update_product(created["id"], price=280, in_stock=True)
    assert updated["price"] == 280
    assert updated["inStock"] is True
    assert updated["name"] == "Desk"

    assert sdk.product_stats()["furniture"] == 1
    sdk.delete_product(created["id"])

    with pytest.raises(ProductAPIError) as exc:
        sdk.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"

def test_search_errors_surface_server_message(sdk):
    assert [p["id"] for p in sdk.search_products("blend")] == ["5"]
    with pytest.raises(ProductAPIError) as exc:
        sdk.search_products("")
    assert exc.value.status_code == 400
    assert exc.value.message == "Please provide a name to search"

def test_bad_token(app):
    with TestClient(app) as session:
        c = ProductClient(base_url="http://testserver", token="wrong", session=session)
        with pytest.raises(ProductAPIError) as exc:
            c.list_products()
    assert exc.value.status_code == 403
    assert exc.value.message == "Unauthorized access"

def test_search_async(app):
    c = ProductClient(base_url="http://test")
    results = asyncio.run(c.search_products_async("laptop", transport=httpx.ASGITransport(app=app)))
    assert [p["name"] for p in results] == ["Laptop"]

def test_parse_bool():
    assert _parse_bool("Yes") is True
    assert _parse_bool("false") is False
    with pytest.raises(ValueError):
        _parse_bool("maybe")
