# product_sdk/client.py
import os
import requests
import httpx
from typing import Optional, Dict, Any, List


class ProductAPIError(Exception):
    """Raised for any non-2xx response from the product API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text or "no response body"
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return str(body)


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", token: str = "secret-token",
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token
        # any requests.Session-compatible object (tests pass a TestClient)
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _check(self, r):
        if r.status_code >= 400:
            raise ProductAPIError(r.status_code, _error_message(r))
        return r

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        return self._check(r).text

    # Listing / lookup
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None,
                      limit: Optional[int] = None) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        r = self.session.get(self._url("/api/products"), params=params, timeout=self.timeout)
        return self._check(r).json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._check(r).json()

    def search_products(self, name: str) -> List[Dict[str, Any]]:
        r = self.session.get(self._url("/api/products/search"), params={"name": name}, timeout=self.timeout)
        return self._check(r).json()

    def product_stats(self) -> Dict[str, int]:
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        return self._check(r).json()

    # Mutations
    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: bool = True) -> Dict[str, Any]:
        payload = {
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        return self._check(r).json()

    def update_product(self, product_id: str, **changes: Any) -> Dict[str, Any]:
        """Partial update; pass ``in_stock=`` for the stock flag."""
        if "in_stock" in changes:
            changes["inStock"] = changes.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=changes, timeout=self.timeout)
        return self._check(r).json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        self._check(r)

    # Async search (example)
    async def search_products_async(self, name: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {"Authorization": f"Bearer {self.token}"}
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport, headers=headers) as client:
            r = await client.get(self._url("/api/products/search"), params={"name": name})
            return self._check(r).json()


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "y"):
        return True
    if value in ("0", "false", "no", "n"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


if __name__ == "__main__":
    import argparse
    from rich import print

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--token", default=os.getenv("PRODUCT_API_TOKEN", "secret-token"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Filter by category (case-insensitive)")
    lp.add_argument("--page", type=int, help="Page number (default 1)")
    lp.add_argument("--limit", type=int, help="Page size (default 2)")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    sp = subparsers.add_parser("search", help="Search products by name")
    sp.add_argument("--name", required=True)

    subparsers.add_parser("stats", help="Product count per category")

    cp = subparsers.add_parser("create", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--in-stock", type=_parse_bool, default=True)

    up = subparsers.add_parser("update", help="Update fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--in-stock", type=_parse_bool)

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.url, token=args.token)

    try:
        if args.command == "list":
            print(c.list_products(args.category, args.page, args.limit))
        elif args.command == "get":
            print(c.get_product(args.product_id))
        elif args.command == "search":
            print(c.search_products(args.name))
        elif args.command == "stats":
            print(c.product_stats())
        elif args.command == "create":
            print(c.create_product(args.name, args.description, args.price, args.category, args.in_stock))
        elif args.command == "update":
            changes = {k: v for k, v in {
                "name": args.name, "description": args.description, "price": args.price,
                "category": args.category, "in_stock": args.in_stock,
            }.items() if v is not None}
            print(c.update_product(args.product_id, **changes))
        elif args.command == "delete":
            c.delete_product(args.product_id)
            print(f"[green]Deleted {args.product_id}[/green]")
    except ProductAPIError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
