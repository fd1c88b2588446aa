# cli.py
import os
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pystore import CatalogClient

console = Console()
c = CatalogClient(base_url=os.getenv("CATALOG_API_URL", "http://127.0.0.1:3000"))

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def _fmt_price(price: Any) -> str:
    try:
        return f"${float(price):.2f}"
    except (TypeError, ValueError):
        return "-"


def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6, justify="right")
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", width=9)

    for p in products:
        instock = p.get("instock")
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name") or "N/A",
            p.get("description") or "",
            _fmt_price(p.get("price")),
            p.get("category") or "-",
            "[green]yes[/green]" if instock else ("[red]no[/red]" if instock is False else "-"),
        )
    console.print(table)


def show_page(result: Dict[str, Any]):
    show_products(result.get("data", []))
    console.print(
        f"[dim]page {result.get('page')} · limit {result.get('limit')} · "
        f"{result.get('total')} matching[/dim]"
    )


def show_stats(stats: Dict[str, Any]):
    table = Table(title="📊 Products by category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in sorted(stats.get("stats", {}).items()):
        table.add_row(category, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{stats.get('totalProducts', 0)}[/bold]")
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Returns None and updates
    status_message when the call fails.
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
        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def refresh_cache():
    global product_cache
    result = try_api(c.list_products)
    product_cache = result["data"] if result else []


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    if not product_cache:
        refresh_cache()
    return WordCompleter([str(p.get("id")) for p in product_cache], ignore_case=True)


def get_category_completer():
    categories = {p.get("category") for p in product_cache if p.get("category")}
    return WordCompleter(sorted(categories), ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_price(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    name = prompt_with_autocomplete("Product name", default=current.get("name") or "")
    price = ask_price("💰 Price", default=current.get("price") or 10.0)
    description = prompt_with_autocomplete("Description", default=current.get("description") or "")
    category = prompt_with_autocomplete(
        "🏷️ Category", completer=get_category_completer(), default=current.get("category") or ""
    )
    instock = Confirm.ask("In stock?", default=bool(current.get("instock", True)))
    return {
        "name": name,
        "price": price,
        "description": description or None,
        "category": category or None,
        "instock": instock,
    }


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog SDK",
        "[bold blue]Product Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search by name", "6", "✏️ Update product"),
            ("3", "🏷️ Filter by category", "7", "🗑️ Delete product"),
            ("4", "ℹ️ Get product by ID", "8", "📊 Category stats"),
            ("", "", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            page = Prompt.ask("Page", default="1")
            limit = Prompt.ask("Page size (blank for all)", default="")
            result = try_api(c.list_products, page=page, limit=limit or None,
                             success_msg="Products loaded successfully")
            if result is not None:
                show_page(result)

        elif choice == "2":
            term = prompt_with_autocomplete("Search term")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res)

        elif choice == "3":
            category = prompt_with_autocomplete("Category", completer=get_category_completer())
            result = try_api(c.list_products, category=category, success_msg=f"Filtered by '{category}'")
            if result is not None:
                show_page(result)

        elif choice == "4":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                show_products([resp], title="✅ Created")
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp], title="✏️ Updated")
                    refresh_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            if Confirm.ask(f"Delete product {pid}?"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    show_products(resp.get("deleted", []), title="🗑️ Deleted")
                    refresh_cache()

        elif choice == "8":
            resp = try_api(c.stats, success_msg="Stats loaded")
            if resp:
                show_stats(resp)

        elif choice.lower() in ("q", "quit", "exit"):
            console.print("[bold]Bye![/bold] 👋")
            break

        else:
            console.print("[red]Unknown option[/red]")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n[bold]Interrupted.[/bold]")
