"""Account model."""

from dataclasses import dataclass
from decimal import Decimal

from bank_browser.models.enums import AccountKind


@dataclass(frozen=True)
class Account:
    """Bank account entity.

    Accounts reference their owner by tax ID (``Client.tax_id``), not by
    client identifier. ``balance`` may be negative (overdraft).
    """

    account_id: str
    owner_tax_id: str
    kind: AccountKind | str
    balance: Decimal
    credit_limit: Decimal
    available_credit: Decimal

    @property
    def is_overdrawn(self) -> bool:
        return not self.balance.is_nan() and self.balance < 0
