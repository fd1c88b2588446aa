import math
import re
from pydantic import BaseModel
from typing import Optional, Dict, Any, List, Union

from .errors import CatalogError, ErrorKind

# Shared secret for /api/products*. Not configurable on purpose.
API_KEY = "12345"

PRODUCT_NOT_FOUND = "Product not found"
NAME_AND_PRICE_REQUIRED = "Name and price are required"

# plain ASCII decimal, optional sign, fraction and exponent
_NUMERIC = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Laptop", "description": "A powerful laptop", "price": 1200, "category": "Electronics", "instock": True},
    {"id": 2, "name": "Shoes", "description": "Comfortable running shoes", "price": 80, "category": "Fashion", "instock": False},
    {"id": 3, "name": "Phone", "description": "Smartphone with 5G", "price": 900, "category": "Electronics", "instock": True},
]

class ProductIn(BaseModel):
    # name and price stay loose so that bad values surface as a 400 from
    # validate_product_fields instead of a schema error
    name: Optional[Any] = None
    description: Optional[str] = None
    price: Optional[Any] = None
    category: Optional[str] = None
    instock: Optional[bool] = None

def _parse_number(raw: str) -> Optional[float]:
    if not isinstance(raw, str):
        return None
    raw = raw.strip()
    if not _NUMERIC.match(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value

def _coerce_price(raw: Any) -> Optional[Union[int, float]]:
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = raw
    elif isinstance(raw, str):
        value = _parse_number(raw)
        if value is None:
            return None
        if value.is_integer():
            value = int(value)
    else:
        return None
    try:
        if not math.isfinite(value) or value <= 0:
            return None
    except OverflowError:
        # ints too large for a float
        return None
    return value

def validate_product_fields(payload: Optional[ProductIn]) -> Dict[str, Any]:
    """Return the mutable product fields, or raise a VALIDATION error.

    A name is present when it is a string with non-whitespace content.
    A price is valid when it is a number (booleans excluded) or a numeric
    string, finite and strictly positive.
    """
    payload = payload or ProductIn()
    name = payload.name
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(ErrorKind.VALIDATION, NAME_AND_PRICE_REQUIRED)
    price = _coerce_price(payload.price)
    if price is None:
        raise CatalogError(ErrorKind.VALIDATION, NAME_AND_PRICE_REQUIRED)
    return {
        "name": name,
        "description": payload.description,
        "price": price,
        "category": payload.category,
        "instock": payload.instock,
    }

def parse_product_id(raw: str) -> Optional[float]:
    # "2", " 2 " and "2.0" all address product 2; anything else matches nothing
    return _parse_number(raw)

def _make_product_dict(product_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": fields.get("name"),
        "description": fields.get("description"),
        "price": fields.get("price"),
        "category": fields.get("category"),
        "instock": fields.get("instock"),
    }
