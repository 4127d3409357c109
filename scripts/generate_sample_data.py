#!/usr/bin/env python3
"""Generate sample CSV exports for offline browsing.

Writes clientes.csv, contas.csv and agencias.csv in the same shape as the
spreadsheet exports, so they can be browsed with:

    bank-browser --source-dir local/ list
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_browser.generators import generate_dataset, to_csv_text
from bank_browser.logging import get_logger, setup_logging

logger = get_logger("generate_sample_data")

FILENAMES = {
    "clients": "clientes.csv",
    "accounts": "contas.csv",
    "branches": "agencias.csv",
}


def save_csv(records: list, filename: str, output_dir: Path) -> None:
    """Save raw records to a CSV file."""
    filepath = output_dir / filename
    filepath.write_text(to_csv_text(records), encoding="utf-8")
    logger.info("Saved %d records to %s", len(records), filepath)


def main() -> None:
    """Generate all sample exports."""
    parser = argparse.ArgumentParser(description="Generate sample banking CSV exports")
    parser.add_argument("--output-dir", default="local", help="Output directory (default: local)")
    parser.add_argument("--clients", type=int, default=50, help="Number of clients (default: 50)")
    parser.add_argument("--branches", type=int, default=5, help="Number of branches (default: 5)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    setup_logging("INFO")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    dataset = generate_dataset(
        num_clients=args.clients,
        num_branches=args.branches,
        seed=args.seed,
    )

    save_csv(dataset.clients, FILENAMES["clients"], output_dir)
    save_csv(dataset.accounts, FILENAMES["accounts"], output_dir)
    save_csv(dataset.branches, FILENAMES["branches"], output_dir)

    logger.info("Summary: %s", dataset.summary())


if __name__ == "__main__":
    main()
