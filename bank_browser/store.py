"""In-memory banking data store and relational lookups.

Clients own accounts through their tax ID (``Account.owner_tax_id ==
Client.tax_id``) and belong to a branch through its numeric code
(``Client.branch_code == Branch.code``). Nothing enforces referential
integrity: a dangling reference resolves to an empty list or None.

Lookups are linear scans over the loaded collections, which hold
hundreds to low thousands of rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bank_browser.models import Account, Branch, Client


def find_branch_by_code(code: int | None, branches: Iterable[Branch]) -> Branch | None:
    """Return the first branch whose code equals ``code``, or None."""
    if code is None:
        return None
    return next((branch for branch in branches if branch.code == code), None)


def find_accounts_by_tax_id(tax_id: str, accounts: Iterable[Account]) -> list[Account]:
    """Return every account owned by ``tax_id``, in source order."""
    return [account for account in accounts if account.owner_tax_id == tax_id]


def find_client_by_id(client_id: str, clients: Iterable[Client]) -> Client | None:
    """Return the client with identifier ``client_id``, or None."""
    return next((client for client in clients if client.client_id == client_id), None)


@dataclass(frozen=True)
class ClientDetail:
    """A client joined with its accounts and branch."""

    client: Client
    accounts: tuple[Account, ...]
    branch: Branch | None


def resolve_detail(
    client: Client,
    accounts: Iterable[Account],
    branches: Iterable[Branch],
) -> ClientDetail:
    """Join a client with its accounts and branch for the detail view."""
    return ClientDetail(
        client=client,
        accounts=tuple(find_accounts_by_tax_id(client.tax_id, accounts)),
        branch=find_branch_by_code(client.branch_code, branches),
    )


@dataclass(frozen=True)
class BankDataStore:
    """Immutable snapshot of the three loaded collections."""

    clients: tuple[Client, ...] = field(default_factory=tuple)
    accounts: tuple[Account, ...] = field(default_factory=tuple)
    branches: tuple[Branch, ...] = field(default_factory=tuple)

    @classmethod
    def from_collections(
        cls,
        clients: Sequence[Client],
        accounts: Sequence[Account],
        branches: Sequence[Branch],
    ) -> "BankDataStore":
        return cls(clients=tuple(clients), accounts=tuple(accounts), branches=tuple(branches))

    # Query methods
    def get_client(self, client_id: str) -> Client | None:
        """Get a client by identifier."""
        return find_client_by_id(client_id, self.clients)

    def get_client_accounts(self, client: Client) -> list[Account]:
        """Get all accounts owned by a client."""
        return find_accounts_by_tax_id(client.tax_id, self.accounts)

    def get_client_branch(self, client: Client) -> Branch | None:
        """Get the branch a client belongs to."""
        return find_branch_by_code(client.branch_code, self.branches)

    def get_branch(self, code: int) -> Branch | None:
        """Get a branch by its numeric code."""
        return find_branch_by_code(code, self.branches)

    def detail(self, client_id: str) -> ClientDetail | None:
        """Resolve the detail view of a client, or None if the id is unknown."""
        client = self.get_client(client_id)
        if client is None:
            return None
        return resolve_detail(client, self.accounts, self.branches)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "clients": len(self.clients),
            "accounts": len(self.accounts),
            "branches": len(self.branches),
        }
