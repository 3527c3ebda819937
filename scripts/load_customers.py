#!/usr/bin/env python3
"""Load the customer snapshot and print or export it.

Reads source URLs and log settings from the environment (see
``DashboardConfig.from_env``). Use ``--search`` and ``--page`` to preview
what the dashboard list would show.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from customer_hub.config import DashboardConfig
from customer_hub.exceptions import CustomerHubError
from customer_hub.formatters import format_currency, format_document
from customer_hub.loader import CustomerDataLoader
from customer_hub.logging import get_logger, setup_logging
from customer_hub.models.base import LoadResult
from customer_hub.search import paginate, search_customers
from customer_hub.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def print_page(result: LoadResult, term: str, search_type: str, page: int, per_page: int) -> None:
    """Print one page of the customer list as the dashboard would."""
    matches = search_customers(result.customers, term, search_type)
    current = paginate(matches, page, per_page)

    if result.used_fallback:
        print("Usando dados de exemplo: não foi possível carregar as planilhas.")
    print(f"Página {current.page}/{max(current.total_pages, 1)} ({current.total_items} clientes)")
    for composite in current.items:
        accounts = composite.accounts or ()
        balance = sum(account.balance for account in accounts)
        branch = composite.branch.name if composite.branch else "-"
        print(
            f"  {composite.name:<35} {format_document(composite.document):<20} "
            f"{branch:<25} {len(accounts)} conta(s) {format_currency(balance)}"
        )


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Load customers, accounts and branches from the sheets")
    parser.add_argument("--json", action="store_true", help="Print the full snapshot as JSON")
    parser.add_argument("--output-dir", type=Path, help="Write customers.json to this directory")
    parser.add_argument("--search", default="", help="Filter customers by this term")
    parser.add_argument(
        "--search-type",
        choices=["name", "document"],
        default="name",
        help="Search by name or CPF/CNPJ (default: name)",
    )
    parser.add_argument("--page", type=int, default=1, help="Page to show (default: 1)")
    parser.add_argument("--per-page", type=int, help="Customers per page (default: PAGE_SIZE)")
    args = parser.parse_args()

    try:
        config = DashboardConfig.from_env()
    except CustomerHubError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=config.log_format)

    loader = CustomerDataLoader(config)
    try:
        result = loader.load_all()
    except CustomerHubError:
        logger.exception("Failed to load customer data")
        return 1

    if args.output_dir:
        sink = JsonFileSink(args.output_dir, pretty=True)
        sink.write_snapshot(result)
        sink.close()
    elif args.json:
        ConsoleSink(pretty=True).write_snapshot(result)
    else:
        print_page(result, args.search, args.search_type, args.page, args.per_page or config.display.page_size)

    return 0


if __name__ == "__main__":
    sys.exit(main())
