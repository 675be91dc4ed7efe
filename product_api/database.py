import copy
import threading
import uuid
from typing import Optional, Dict, Any, List

# This file holds the in-memory product store and its seed data.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {"id": "1", "name": "Laptop", "description": "High-performance laptop with 16GB RAM", "price": 1200, "category": "electronics", "inStock": True},
    {"id": "2", "name": "Smartphone", "description": "Latest model with 128GB storage", "price": 800, "category": "electronics", "inStock": True},
    {"id": "3", "name": "Coffee Maker", "description": "Programmable coffee maker with timer", "price": 50, "category": "kitchen", "inStock": False},
    {"id": "4", "name": "Headphones", "description": "Noise-canceling headphones", "price": 200, "category": "electronics", "inStock": True},
    {"id": "5", "name": "Blender", "description": "High-speed blender for smoothies", "price": 100, "category": "kitchen", "inStock": True},
]


class ProductStore:
    """
    Ordered collection of product records with an id index.

    Records are plain dicts shaped like ``models.Product``. Insertion order
    is kept and is the order listings are returned in. All access goes
    through one lock, so concurrent requests see each mutation whole.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._seed = SEED_PRODUCTS if seed is None else seed
        self._lock = threading.Lock()
        self._items: List[Dict[str, Any]] = []
        self._index: Dict[str, Dict[str, Any]] = {}
        self.reset()

    def __len__(self) -> int:
        return len(self._items)

    def reset(self) -> None:
        with self._lock:
            self._items = copy.deepcopy(self._seed)
            self._index = {p["id"]: p for p in self._items}

    def all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._items)

    def get(self, product_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._index.get(product_id)

    def add(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            pid = uuid.uuid4().hex
            while pid in self._index:
                pid = uuid.uuid4().hex
            product = {"id": pid, **fields}
            self._items.append(product)
            self._index[pid] = product
            return product

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            product = self._index.get(product_id)
            if product is None:
                return None
            changes = {k: v for k, v in changes.items() if k != "id"}
            product.update(changes)
            return product

    def delete(self, product_id: str) -> bool:
        with self._lock:
            product = self._index.pop(product_id, None)
            if product is None:
                return False
            self._items.remove(product)
            return True
