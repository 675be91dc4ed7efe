# tests/test_concurrency.py
import asyncio
import httpx

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.main import create_app

HEADERS = {"Authorization": "Bearer secret-token"}


async def _create_task(ac, n):
    return await ac.post("/api/products", json={
        "name": f"Item {n}", "description": "bulk", "price": n + 1, "category": "bulk", "inStock": True,
    }, headers=HEADERS)

async def _create_many(app, count):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_create_task(ac, n) for n in range(count)))

def test_concurrent_creates_all_land():
    store = ProductStore()
    app = create_app(settings=Settings(_env_file=None), store=store)

    results = asyncio.run(_create_many(app, 20))

    assert [r.status_code for r in results] == [201] * 20
    ids = {r.json()["id"] for r in results}
    assert len(ids) == 20
    assert len(store) == 25
