#!/usr/bin/env python
import os
from sdk.pystore import CatalogClient, CatalogClientError

def main():
    c = CatalogClient(base_url=os.getenv("CATALOG_API_URL", "http://127.0.0.1:3000"))

    print(c.greeting())

    # -----------------------------
    # Seeded catalog
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics, case-insensitive...")
    print(c.list_products(category="electronics"))

    print("\nSearching for 'lap'...")
    print(c.search_products("lap"))

    print("\nSecond page, two per page...")
    print(c.list_products(page=2, limit=2))

    # -----------------------------
    # Create / update / delete
    # -----------------------------
    print("\nCreating a product...")
    tablet = c.create_product("Tablet", 300, description="10 inch tablet", category="Electronics", instock=True)
    print(tablet)

    print("\nUpdating its price...")
    print(c.update_product(tablet["id"], "Tablet", 279, description="10 inch tablet",
                           category="Electronics", instock=True))

    print("\nDeleting product 2...")
    print(c.delete_product(2))

    try:
        c.get_product(2)
    except CatalogClientError as e:
        print(f"Product 2 is gone: {e}")

    # -----------------------------
    # Stats
    # -----------------------------
    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Gate
    # -----------------------------
    print("\nCalling without an API key...")
    try:
        CatalogClient(base_url=c.base_url, api_key=None).list_products()
    except CatalogClientError as e:
        print(e)

if __name__ == "__main__":
    main()
