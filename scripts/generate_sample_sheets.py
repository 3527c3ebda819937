#!/usr/bin/env python3
"""Generate sample sheet exports (clientes.csv, contas.csv, agencias.csv).

The files can be served locally and pointed at with CUSTOMERS_CSV_URL,
ACCOUNTS_CSV_URL and BRANCHES_CSV_URL.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from customer_hub.generators import SampleSheetGenerator
from customer_hub.models.base import EntityKind

FILE_NAMES = {
    EntityKind.CUSTOMERS: "clientes.csv",
    EntityKind.ACCOUNTS: "contas.csv",
    EntityKind.BRANCHES: "agencias.csv",
}


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate sample customer sheets")
    parser.add_argument("--customers", type=int, default=20, help="Number of customers (default: 20)")
    parser.add_argument("--branches", type=int, default=3, help="Number of branches (default: 3)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--output-dir", type=Path, default=Path("local"), help="Output directory (default: local)")
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)

    sheets = SampleSheetGenerator(seed=args.seed).generate(args.customers, args.branches)
    for kind, text in sheets.items():
        path = args.output_dir / FILE_NAMES[kind]
        path.write_text(text, encoding="utf-8")
        print(f"Saved {len(text.splitlines()) - 1} rows to {path}")


if __name__ == "__main__":
    main()
