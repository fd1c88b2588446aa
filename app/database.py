import copy
import threading
from typing import Dict, Any, List, Optional

from .core import SEED_PRODUCTS, _make_product_dict

# This file holds the in-memory product catalog.

class CatalogStore:
    """Owns the product list and id assignment. No validation happens here."""

    def __init__(self, products: Optional[List[Dict[str, Any]]] = None):
        self._lock = threading.Lock()
        self._products: List[Dict[str, Any]] = [dict(p) for p in (products or [])]
        # ids are never reused, even after deletes
        self._next_id = max((p["id"] for p in self._products), default=0) + 1

    @classmethod
    def seeded(cls) -> "CatalogStore":
        return cls(copy.deepcopy(SEED_PRODUCTS))

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(p) for p in self._products]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        return -1

    def find_by_id(self, product_id) -> Optional[Dict[str, Any]]:
        with self._lock:
            idx = self._index_of(product_id)
            return dict(self._products[idx]) if idx != -1 else None

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            product = _make_product_dict(self._next_id, fields)
            self._next_id += 1
            self._products.append(product)
            return dict(product)

    def update(self, product_id, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            idx = self._index_of(product_id)
            if idx == -1:
                return None
            product = _make_product_dict(self._products[idx]["id"], fields)
            self._products[idx] = product
            return dict(product)

    def delete(self, product_id) -> Optional[Dict[str, Any]]:
        with self._lock:
            idx = self._index_of(product_id)
            if idx == -1:
                return None
            return self._products.pop(idx)
