"""Banking domain models."""

from bank_browser.models.account import Account
from bank_browser.models.branch import Branch
from bank_browser.models.client import Client
from bank_browser.models.enums import AccountKind, DocumentType, MaritalStatus
from bank_browser.models.raw import RawAccount, RawBranch, RawClient

__all__ = [
    "Account",
    "AccountKind",
    "Branch",
    "Client",
    "DocumentType",
    "MaritalStatus",
    "RawAccount",
    "RawBranch",
    "RawClient",
]
