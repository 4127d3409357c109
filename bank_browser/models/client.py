"""Client model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bank_browser.models.enums import DocumentType, MaritalStatus


@dataclass(frozen=True)
class Client:
    """Bank client, either an individual (CPF) or an organization (CNPJ).

    ``birth_date`` is None when the exported date could not be read, and
    ``annual_income``/``net_worth`` hold ``Decimal("NaN")`` when the
    exported amount could not be read. ``marital_status`` keeps the raw
    text when it is not one of the known values.
    """

    client_id: str
    tax_id: str  # CPF/CNPJ as stored, join key for accounts
    name: str
    email: str
    address: str
    birth_date: date | None
    annual_income: Decimal
    net_worth: Decimal
    marital_status: MaritalStatus | str
    branch_code: int | None  # Branch.code, not Branch.branch_id
    legal_id: str | None = None  # RG
    display_name: str | None = None  # nome social

    @property
    def document_type(self) -> DocumentType | None:
        return DocumentType.classify(self.tax_id)

    @property
    def preferred_name(self) -> str:
        return self.display_name or self.name
