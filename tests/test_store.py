# tests/test_store.py
from product_api.database import ProductStore, SEED_PRODUCTS


def test_seeded_with_five_products():
    store = ProductStore()
    assert len(store) == 5
    assert [p["name"] for p in store.all()] == ["Laptop", "Smartphone", "Coffee Maker", "Headphones", "Blender"]

def test_stores_do_not_share_records():
    a, b = ProductStore(), ProductStore()
    a.update("1", {"price": 1})
    assert b.get("1")["price"] == 1200
    assert SEED_PRODUCTS[0]["price"] == 1200

def test_add_appends_with_generated_id():
    store = ProductStore(seed=[])
    p = store.add({"name": "Lamp", "description": "Desk lamp", "price": 25, "category": "home", "inStock": True})
    assert len(p["id"]) == 32
    assert store.get(p["id"]) is p
    assert store.all() == [p]

def test_update_ignores_id_and_unknown_product():
    store = ProductStore()
    updated = store.update("2", {"id": "x", "name": "Phone"})
    assert updated["id"] == "2"
    assert updated["name"] == "Phone"
    assert store.get("x") is None
    assert store.update("x", {"name": "Ghost"}) is None

def test_delete_keeps_order_and_index():
    store = ProductStore()
    assert store.delete("1") is True
    assert store.delete("1") is False
    assert [p["id"] for p in store.all()] == ["2", "3", "4", "5"]
    assert store.get("1") is None

def test_reset_restores_seed():
    store = ProductStore()
    store.delete("3")
    store.add({"name": "Lamp", "description": "Desk lamp", "price": 25, "category": "home", "inStock": True})
    store.reset()
    assert [p["id"] for p in store.all()] == ["1", "2", "3", "4", "5"]

def test_all_returns_a_snapshot():
    store = ProductStore()
    snapshot = store.all()
    store.delete("1")
    assert len(snapshot) == 5
