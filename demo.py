#!/usr/bin/env python
import os
from product_sdk.client import ProductClient, ProductAPIError

def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        token=os.getenv("PRODUCT_API_TOKEN", "secret-token"),
    )

    print(c.welcome())

    # -----------------------------
    # List products
    # -----------------------------
    print("\nFirst page of products...")
    print(c.list_products())

    print("\nKitchen products, page 1 of 5 per page...")
    print(c.list_products(category="Kitchen", page=1, limit=5))

    # -----------------------------
    # Create and update
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("Electric Kettle", "1.7L stainless steel kettle", 40, "kitchen", in_stock=False)
    print(kettle)

    print("\nRestocking and repricing it...")
    print(c.update_product(kettle["id"], price=45, in_stock=True))

    # -----------------------------
    # Search and stats
    # -----------------------------
    print("\nSearching for 'phone'...")
    print(c.search_products("phone"))

    print("\nProducts per category...")
    print(c.product_stats())

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the kettle...")
    c.delete_product(kettle["id"])
    try:
        c.get_product(kettle["id"])
    except ProductAPIError as e:
        print(f"Lookup after delete: {e}")

if __name__ == "__main__":
    main()
