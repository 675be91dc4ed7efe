from pydantic import BaseModel
from typing import Optional, Dict, Any

from .models import Number

# Request bodies. Every field is optional: presence rules are applied by the
# handlers so that a missing field yields the API's own 400 message.

class ProductIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Number] = None
    category: Optional[str] = None
    inStock: Optional[bool] = None

class ProductUpdate(ProductIn):
    """Partial update body; blank fields keep the stored value."""

REQUIRED_FIELDS = ("name", "description", "price", "category")

def _is_blank(value: Any) -> bool:
    """Missing, null, empty string and zero all count as "not supplied"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False

def _has_in_stock(payload: ProductIn) -> bool:
    # inStock is present whenever the key was sent, even as false or null
    return "inStock" in payload.model_fields_set

def _is_complete(payload: ProductIn) -> bool:
    if any(_is_blank(getattr(payload, field)) for field in REQUIRED_FIELDS):
        return False
    return _has_in_stock(payload)

def _make_product_dict(payload: ProductIn) -> Dict[str, Any]:
    return {
        "name": payload.name,
        "description": payload.description,
        "price": payload.price,
        "category": payload.category,
        "inStock": payload.inStock,
    }

def _update_changes(payload: ProductUpdate) -> Dict[str, Any]:
    changes = {
        field: getattr(payload, field)
        for field in REQUIRED_FIELDS
        if not _is_blank(getattr(payload, field))
    }
    if _has_in_stock(payload):
        changes["inStock"] = payload.inStock
    return changes
