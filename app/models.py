# app/models.py
from pydantic import BaseModel
from typing import Optional, Union

class Product(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: Optional[str] = None
    instock: Optional[bool] = None
