"""Search and filter stages of the client list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bank_browser.models import Client, DocumentType, MaritalStatus


@dataclass(frozen=True)
class FilterOptions:
    """Structured filters; None or ``""`` means "all"."""

    marital_status: MaritalStatus | str | None = None
    document_type: DocumentType | str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.marital_status and not self.document_type


def matches_search(client: Client, term: str) -> bool:
    """Case-insensitive substring match on name, display name or raw tax ID."""
    if not term:
        return True
    term = term.lower()
    return (
        term in client.name.lower()
        or term in client.tax_id
        or (client.display_name is not None and term in client.display_name.lower())
    )


def matches_marital_status(client: Client, marital_status: MaritalStatus | str | None) -> bool:
    if not marital_status:
        return True
    return client.marital_status == marital_status


def matches_document_type(client: Client, document_type: DocumentType | str | None) -> bool:
    if not document_type:
        return True
    try:
        wanted = DocumentType(document_type)
    except ValueError:
        return True
    return client.document_type is wanted


def apply_query(
    clients: Iterable[Client],
    search_term: str = "",
    filters: FilterOptions | None = None,
) -> list[Client]:
    """Run search, then marital status, then document type, keeping order."""
    filters = filters or FilterOptions()
    result = [client for client in clients if matches_search(client, search_term)]
    result = [c for c in result if matches_marital_status(c, filters.marital_status)]
    result = [c for c in result if matches_document_type(c, filters.document_type)]
    return result
