# cli.py - interactive console for the product API
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from product_sdk.client import ProductClient, ProductAPIError

console = Console()
c = ProductClient(
    base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
    token=os.getenv("PRODUCT_API_TOKEN", "secret-token"),
)

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
category_cache = set()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def products_table(products: List[Dict[str, Any]], title: str = "📦 Products") -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"${float(p.get('price') or 0):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if in_stock else "[red]no[/red]",
        )
    return table


def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return
    console.print(products_table(products, title))


def show_page(page: Dict[str, Any]):
    products = page.get("products", [])
    title = f"📦 Page {page.get('page')} (limit {page.get('limit')}, {page.get('total')} total)"
    show_products(products, title)


def stats_table(stats: Dict[str, int]) -> Table:
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in sorted(stats.items()):
        table.add_row(category, str(count))
    return table


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error if the call failed.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except ProductAPIError as e:
        status_message = f"Error: {e.message} (HTTP {e.status_code})"
        console.print(show_status(status_message, False))
        return None
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(status_message, False))
        return None

    if success_msg:
        status_message = success_msg
        console.print(show_status(success_msg, True))
    return result


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_caches():
    global product_cache, category_cache
    # a single large page is enough to feed the completers
    page = try_api(c.list_products, limit=1000) or {}
    product_cache = page.get("products", [])
    category_cache = {p.get("category", "") for p in product_cache if p.get("category")}


def get_product_completer():
    if not product_cache:
        refresh_caches()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_name_completer():
    if not product_cache:
        refresh_caches()
    return WordCompleter([p.get("name", "") for p in product_cache if p.get("name")], ignore_case=True)


def get_category_completer():
    return WordCompleter(sorted(category_cache), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def parse_price(raw: str) -> Optional[float]:
    """Blank means "keep", anything else must be a number."""
    raw = raw.strip()
    if not raw:
        return None
    return float(raw)


def ask_price(message: str, allow_blank: bool = False) -> Optional[float]:
    while True:
        raw = Prompt.ask(message, default="" if allow_blank else "10.0")
        try:
            return parse_price(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


# ---------------------------
# Menu actions
# ---------------------------
def action_list():
    category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
    page_no = IntPrompt.ask("Page", default=1)
    limit = IntPrompt.ask("Per page", default=2)
    page = try_api(c.list_products, category or None, page_no, limit, success_msg="Products loaded")
    if page is not None:
        show_page(page)


def action_search():
    term = prompt_with_autocomplete("Enter search term", completer=get_name_completer()).strip()
    res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
    if res is not None:
        show_products(res, f"🔍 Results for '{term}'")


def action_get():
    pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
    if resp:
        show_products([resp])


def action_create():
    name = prompt_with_autocomplete("Product name").strip()
    description = prompt_with_autocomplete("Description").strip()
    price = ask_price("💰 Price")
    category = prompt_with_autocomplete("🏷️ Category", completer=get_category_completer()).strip()
    in_stock = Confirm.ask("In stock?", default=True)
    resp = try_api(c.create_product, name, description, price, category, in_stock,
                   success_msg=f"Product '{name}' created")
    if resp:
        show_products([resp], "➕ Created")
        refresh_caches()


def action_update():
    pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    console.print("[dim]Leave a field blank to keep its current value.[/dim]")
    changes: Dict[str, Any] = {}
    name = prompt_with_autocomplete("New name").strip()
    if name:
        changes["name"] = name
    description = prompt_with_autocomplete("New description").strip()
    if description:
        changes["description"] = description
    price = ask_price("New price", allow_blank=True)
    if price is not None:
        changes["price"] = price
    category = prompt_with_autocomplete("New category", completer=get_category_completer()).strip()
    if category:
        changes["category"] = category
    if Confirm.ask("Change stock flag?", default=False):
        changes["in_stock"] = Confirm.ask("In stock?", default=True)
    resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **changes)
    if resp:
        show_products([resp], "✏️ Updated")
        refresh_caches()


def action_delete():
    pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
        try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
        refresh_caches()


def action_stats():
    stats = try_api(c.product_stats, success_msg="Statistics loaded")
    if stats is not None:
        console.print(stats_table(stats))


ACTIONS = {
    "1": action_list,
    "2": action_search,
    "3": action_get,
    "4": action_create,
    "5": action_update,
    "6": action_delete,
    "7": action_stats,
}


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())
    refresh_caches()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Update product"),
            ("2", "🔍 Search products", "6", "🗑️ Delete product"),
            ("3", "ℹ️ Get product by ID", "7", "📊 Category stats"),
            ("4", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(list(ACTIONS) + ["q", "quit", "exit"])
        ).strip()

        if choice in ACTIONS:
            ACTIONS[choice]()
        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)
        else:
            console.print(f"[yellow]Unknown option: {choice}[/yellow]")

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
