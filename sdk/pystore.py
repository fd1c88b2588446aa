# sdk/pystore.py
import requests
from typing import Optional, Dict, Any

DEFAULT_API_KEY = "12345"

class CatalogClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message

class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = DEFAULT_API_KEY,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        # any requests.Session-like object works, e.g. a fastapi TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"apikey": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _unwrap(self, r):
        if r.status_code >= 400:
            try:
                message = r.json().get("error", r.text)
            except ValueError:
                message = r.text
            raise CatalogClientError(r.status_code, message)
        return r.json()

    @staticmethod
    def _product_payload(name, price, description=None, category=None, instock=None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "price": price}
        if description is not None:
            payload["description"] = description
        if category is not None:
            payload["category"] = category
        if instock is not None:
            payload["instock"] = instock
        return payload

    def greeting(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        if r.status_code >= 400:
            raise CatalogClientError(r.status_code, r.text)
        return r.text

    # Products
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        return self._unwrap(r)

    def search_products(self, term: str):
        return self.list_products(search=term)["data"]

    def get_product(self, product_id):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)

    def create_product(self, name: str, price, description: Optional[str] = None,
                       category: Optional[str] = None, instock: Optional[bool] = None):
        payload = self._product_payload(name, price, description, category, instock)
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        return self._unwrap(r)

    def update_product(self, product_id, name: str, price, description: Optional[str] = None,
                       category: Optional[str] = None, instock: Optional[bool] = None):
        # PUT replaces every field, so omitted optionals end up null
        payload = self._product_payload(name, price, description, category, instock)
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=payload, timeout=self.timeout)
        return self._unwrap(r)

    def delete_product(self, product_id):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)

    def stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        return self._unwrap(r)
