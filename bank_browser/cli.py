"""Command-line front end for browsing the banking exports.

Examples
--------
    bank-browser list --search silva --document-type CPF --page 2
    bank-browser show 7f1c0e9a-...
    bank-browser --source-dir local/ summary --json
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import TextIO

from bank_browser.config import BrowserConfig, SourceConfig
from bank_browser.exceptions import BankBrowserError, DataLoadError
from bank_browser.formatting import format_currency, format_date, format_tax_id
from bank_browser.loader import load_data_sync
from bank_browser.logging import get_logger, setup_logging
from bank_browser.models import DocumentType, MaritalStatus
from bank_browser.query import BrowserState, FilterOptions
from bank_browser.serialization import serialize_value
from bank_browser.store import ClientDetail

logger = get_logger(__name__)

LOAD_FAILED_MESSAGE = "Could not load the data. Please try again."
NO_CLIENTS_MESSAGE = "No clients found."
NO_ACCOUNTS_MESSAGE = "This client has no bank accounts."
NO_BRANCH_MESSAGE = "Branch information not available."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-browser",
        description="Browse clients, accounts and branches from spreadsheet CSV exports",
    )
    parser.add_argument(
        "--source-dir",
        help="Read clientes.csv, contas.csv and agencias.csv from this directory instead of the spreadsheet",
    )
    parser.add_argument("--page-size", type=int, help="Clients per page (default: 10)")
    parser.add_argument("--strict", action="store_true", help="Fail on unreadable numbers and dates")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List clients")
    list_parser.add_argument("--search", default="", help="Name, social name or CPF/CNPJ fragment")
    list_parser.add_argument(
        "--marital-status",
        choices=[s.value for s in MaritalStatus],
        help="Only clients with this marital status",
    )
    list_parser.add_argument(
        "--document-type",
        choices=[d.value for d in DocumentType],
        help="CPF (individuals) or CNPJ (organizations)",
    )
    list_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")

    show_parser = subparsers.add_parser("show", help="Show one client with accounts and branch")
    show_parser.add_argument("client_id", help="Client identifier")

    subparsers.add_parser("summary", help="Print entity counts")
    return parser


def resolve_config(args: argparse.Namespace) -> BrowserConfig:
    config = BrowserConfig.from_env()
    if args.source_dir:
        config.sources = SourceConfig.from_directory(args.source_dir)
    if args.page_size is not None:
        config = replace(config, page_size=args.page_size)
    if args.strict:
        config.strict_decoding = True
    if args.log_level:
        config.log_level = args.log_level
    return config


def render_list(state: BrowserState, out: TextIO) -> None:
    page = state.current_page
    out.write(f"Clients ({page.total_items} found)\n")
    if not page.items:
        out.write(f"{NO_CLIENTS_MESSAGE}\n")
        return

    for client in page.items:
        status = getattr(client.marital_status, "value", client.marital_status)
        out.write(
            f"{client.client_id}  {client.preferred_name:<40}  "
            f"{format_tax_id(client.tax_id):<18}  {format_date(client.birth_date)}  {status}\n"
        )

    links = " ".join(f"[{n}]" if n == page.number else str(n) for n in state.page_numbers)
    out.write(f"\nPage {page.number} of {page.total_pages}:  {links}\n")


def render_detail(detail: ClientDetail, out: TextIO) -> None:
    client = detail.client
    status = getattr(client.marital_status, "value", client.marital_status)

    out.write(f"{client.preferred_name}\n")
    out.write(f"{format_tax_id(client.tax_id)}    ID: {client.client_id}\n\n")

    out.write("Personal information\n")
    out.write(f"  Full name:     {client.name}\n")
    if client.display_name:
        out.write(f"  Social name:   {client.display_name}\n")
    if client.legal_id:
        out.write(f"  RG:            {client.legal_id}\n")
    out.write(f"  Birth date:    {format_date(client.birth_date)}\n")
    out.write(f"  Email:         {client.email}\n")
    out.write(f"  Marital status: {status}\n")
    out.write(f"  Address:       {client.address}\n\n")

    out.write("Financial information\n")
    out.write(f"  Net worth:     {format_currency(client.net_worth)}\n")
    out.write(f"  Annual income: {format_currency(client.annual_income)}\n\n")

    out.write("Bank accounts\n")
    if not detail.accounts:
        out.write(f"  {NO_ACCOUNTS_MESSAGE}\n")
    for account in detail.accounts:
        kind = getattr(account.kind, "value", account.kind)
        out.write(f"  {kind:<10} {account.account_id}\n")
        out.write(f"    Balance:          {format_currency(account.balance)}\n")
        out.write(f"    Credit limit:     {format_currency(account.credit_limit)}\n")
        out.write(f"    Available credit: {format_currency(account.available_credit)}\n")

    out.write("\nBranch\n")
    if detail.branch is None:
        out.write(f"  {NO_BRANCH_MESSAGE}\n")
    else:
        out.write(f"  {detail.branch.name} ({detail.branch.code})\n")
        out.write(f"  {detail.branch.address}\n")


def run(args: argparse.Namespace, config: BrowserConfig, out: TextIO) -> int:
    """Load the data and execute the parsed command. Returns an exit code."""
    try:
        store = load_data_sync(config.sources, strict=config.strict_decoding)
    except DataLoadError:
        sys.stderr.write(f"{LOAD_FAILED_MESSAGE}\n")
        return 1

    state = BrowserState(store=store, page_size=config.page_size)

    if args.command == "summary":
        summary = store.summary()
        if args.json:
            json.dump(summary, out, indent=2)
            out.write("\n")
        else:
            for entity, count in summary.items():
                out.write(f"{entity}: {count}\n")
        return 0

    if args.command == "show":
        detail = state.select_client(args.client_id).detail
        if detail is None:
            sys.stderr.write(f"Client {args.client_id} not found.\n")
            return 1
        if args.json:
            json.dump(serialize_value(detail), out, indent=2, ensure_ascii=False)
            out.write("\n")
        else:
            render_detail(detail, out)
        return 0

    state = state.with_search(args.search).with_filters(
        FilterOptions(marital_status=args.marital_status, document_type=args.document_type)
    )
    state = state.go_to_page(args.page)
    if args.json:
        page = state.current_page
        payload = {
            "page": page.number,
            "total_pages": page.total_pages,
            "total_items": page.total_items,
            "clients": serialize_value(list(page.items)),
        }
        json.dump(payload, out, indent=2, ensure_ascii=False)
        out.write("\n")
    else:
        render_list(state, out)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except BankBrowserError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level, config.log_format)
    logger.debug("Sources: %s", config.sources)

    try:
        return run(args, config, sys.stdout)
    except BankBrowserError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
