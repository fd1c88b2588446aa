from typing import Optional, Dict, Any

from .core import (
    ProductIn, PRODUCT_NOT_FOUND,
    validate_product_fields, parse_product_id
)
from .database import CatalogStore
from .errors import CatalogError, ErrorKind
from .query import query_products, category_stats

# This file contains the core logic for all API endpoints. Route functions
# in app.main only unpack the request and hand over the store.

def _require_product_id(raw_id: str):
    # a segment that is not a number can never match a stored id
    product_id = parse_product_id(raw_id)
    if product_id is None:
        raise CatalogError(ErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
    return product_id

# Product reads
def list_products_logic(
    store: CatalogStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    return query_products(store.list(), category=category, search=search, page=page, limit=limit)

def product_stats_logic(store: CatalogStore) -> Dict[str, Any]:
    return category_stats(store.list())

def get_product_logic(store: CatalogStore, raw_id: str) -> Dict[str, Any]:
    p = store.find_by_id(_require_product_id(raw_id))
    if not p:
        raise CatalogError(ErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
    return p

# Product writes
def create_product_logic(store: CatalogStore, payload: Optional[ProductIn]) -> Dict[str, Any]:
    fields = validate_product_fields(payload)
    return store.create(fields)

def update_product_logic(store: CatalogStore, raw_id: str, payload: Optional[ProductIn]) -> Dict[str, Any]:
    product_id = _require_product_id(raw_id)
    if store.find_by_id(product_id) is None:
        raise CatalogError(ErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
    fields = validate_product_fields(payload)
    updated = store.update(product_id, fields)
    if updated is None:
        # deleted between the lookup and the write
        raise CatalogError(ErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
    return updated

def delete_product_logic(store: CatalogStore, raw_id: str) -> Dict[str, Any]:
    deleted = store.delete(_require_product_id(raw_id))
    if deleted is None:
        raise CatalogError(ErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
    return {"message": "Product deleted", "deleted": [deleted]}
