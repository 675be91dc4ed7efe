import logging
from collections import Counter
from typing import Optional, Dict, Any, List
from fastapi import HTTPException

from .core import ProductIn, ProductUpdate, _is_complete, _make_product_dict, _update_changes
from .database import ProductStore

# This file contains the core logic for all product endpoints.

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


def _parse_int(raw: Optional[str], default: int) -> int:
    """Base-10 integer, or ``default`` when missing or unparseable."""
    if raw is None:
        return default
    try:
        return int(raw.strip(), 10)
    except ValueError:
        return default


def _find_or_404(store: ProductStore, product_id: str) -> Dict[str, Any]:
    product = store.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return product


# Product endpoints
def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    default_page: int = 1,
    default_limit: int = 2,
):
    products = store.all()
    if category:
        wanted = category.lower()
        products = [p for p in products if p["category"].lower() == wanted]

    page_no = _parse_int(page, default_page)
    page_size = _parse_int(limit, default_limit)
    # out-of-range windows give an empty or partial page, never a wrap-around
    start = (page_no - 1) * page_size
    end = start + page_size
    start, end = (min(max(i, 0), len(products)) for i in (start, end))
    return {
        "total": len(products),
        "page": page_no,
        "limit": page_size,
        "products": products[start:end],
    }

def get_product_logic(store: ProductStore, product_id: str):
    return _find_or_404(store, product_id)

def create_product_logic(store: ProductStore, payload: ProductIn):
    if not _is_complete(payload):
        raise HTTPException(status_code=400, detail="All fields are required")
    product = store.add(_make_product_dict(payload))
    logger.info("Created product %s (%s)", product["id"], product["name"])
    return product

def update_product_logic(store: ProductStore, product_id: str, payload: ProductUpdate):
    product = store.update(product_id, _update_changes(payload))
    if product is None:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return product

def delete_product_logic(store: ProductStore, product_id: str) -> None:
    if not store.delete(product_id):
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    logger.info("Deleted product %s", product_id)

def search_products_logic(store: ProductStore, name: Optional[str]) -> List[Dict[str, Any]]:
    if not name:
        raise HTTPException(status_code=400, detail="Please provide a name to search")
    term = name.lower()
    return [p for p in store.all() if term in p["name"].lower()]

def product_stats_logic(store: ProductStore) -> Dict[str, int]:
    return dict(Counter(p["category"] for p in store.all()))
