# product_api/models.py
from pydantic import BaseModel
from typing import Optional, List, Union

Number = Union[int, float]


class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Number
    category: str
    inStock: Optional[bool] = None


class ProductPage(BaseModel):
    total: int
    page: int
    limit: int
    products: List[Product]


class Message(BaseModel):
    message: str

