"""Fetch and decode the three CSV exports.

The clients, accounts and branches exports are fetched concurrently. The
load succeeds only when all three succeed; otherwise a single
:class:`~bank_browser.exceptions.DataLoadError` is raised and no partial
data is returned. Retrying means calling :func:`load_data` again.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

import httpx

from bank_browser.config import SourceConfig
from bank_browser.decoding import decode_accounts, decode_branches, decode_clients
from bank_browser.exceptions import DataLoadError, FetchError
from bank_browser.logging import get_logger
from bank_browser.models import RawAccount, RawBranch, RawClient
from bank_browser.parsing import parse_records
from bank_browser.store import BankDataStore

logger = get_logger(__name__)


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def fetch_csv(client: httpx.AsyncClient, location: str) -> str:
    """Fetch the text of one export.

    Parameters
    ----------
    client : httpx.AsyncClient
        Client used for http(s) locations.
    location : str
        URL, or path of a local file.

    Raises
    ------
    FetchError
        If the resource is unreachable or answers with a non-success status.
    """
    if not is_remote(location):
        try:
            return await asyncio.to_thread(Path(location).read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(location, str(exc)) from exc

    try:
        resp = await client.get(location, follow_redirects=True)
    except httpx.HTTPError as exc:
        raise FetchError(location, str(exc) or type(exc).__name__) from exc

    if not resp.is_success:
        raise FetchError(location, f"{resp.status_code} {resp.reason_phrase}", resp.status_code)
    return resp.text


async def _fetch_all(client: httpx.AsyncClient, sources: SourceConfig) -> list[str]:
    results = await asyncio.gather(
        fetch_csv(client, sources.clients_url),
        fetch_csv(client, sources.accounts_url),
        fetch_csv(client, sources.branches_url),
        return_exceptions=True,
    )
    failures = [r for r in results if isinstance(r, BaseException)]
    for failure in failures:
        if not isinstance(failure, FetchError):
            raise failure
        logger.error("Error fetching CSV data: %s", failure)
    if failures:
        raise DataLoadError("Could not load the data. Please try again.") from failures[0]
    return results


def build_store(
    clients_csv: str,
    accounts_csv: str,
    branches_csv: str,
    strict: bool = False,
) -> BankDataStore:
    """Parse and decode the three export texts into a store."""
    clients = decode_clients(
        (RawClient.from_row(row) for row in parse_records(clients_csv)), strict
    )
    accounts = decode_accounts(
        (RawAccount.from_row(row) for row in parse_records(accounts_csv)), strict
    )
    branches = decode_branches(
        (RawBranch.from_row(row) for row in parse_records(branches_csv)), strict
    )
    return BankDataStore.from_collections(clients, accounts, branches)


async def load_data(
    sources: SourceConfig | None = None,
    strict: bool = False,
    client: httpx.AsyncClient | None = None,
) -> BankDataStore:
    """Fetch all three exports and build the data store.

    Parameters
    ----------
    sources : SourceConfig | None
        Export locations (defaults to the published spreadsheet).
    strict : bool
        Raise :class:`DecodeError` on unreadable values instead of
        degrading them to sentinels.
    client : httpx.AsyncClient | None
        Client to reuse; a new one is opened and closed when omitted.

    Raises
    ------
    DataLoadError
        If any of the three fetches fails.
    """
    sources = sources or SourceConfig()
    t0 = time.perf_counter()

    if client is None:
        async with httpx.AsyncClient() as own_client:
            texts = await _fetch_all(own_client, sources)
    else:
        texts = await _fetch_all(client, sources)

    store = build_store(*texts, strict=strict)
    logger.info(
        "Loaded %d clients, %d accounts, %d branches in %.2fs",
        len(store.clients),
        len(store.accounts),
        len(store.branches),
        time.perf_counter() - t0,
    )
    return store


def load_data_sync(sources: SourceConfig | None = None, strict: bool = False) -> BankDataStore:
    """Blocking wrapper around :func:`load_data`."""
    return asyncio.run(load_data(sources, strict=strict))
