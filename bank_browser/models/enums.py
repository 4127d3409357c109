"""Enumeration types for banking entities.

Values are the literal text found in the spreadsheet exports.
"""

from enum import Enum


class MaritalStatus(str, Enum):
    SINGLE = "Solteiro"
    MARRIED = "Casado"
    WIDOWED = "Viúvo"
    DIVORCED = "Divorciado"


class AccountKind(str, Enum):
    CHECKING = "corrente"
    SAVINGS = "poupanca"


class DocumentType(str, Enum):
    """National tax ID kind, told apart by length."""

    CPF = "CPF"  # individual, 11 digits
    CNPJ = "CNPJ"  # organization, 14 digits

    @property
    def length(self) -> int:
        return 11 if self is DocumentType.CPF else 14

    @classmethod
    def classify(cls, tax_id: str) -> "DocumentType | None":
        """Classify a stored tax ID by its length, or None for any other length."""
        for doc_type in cls:
            if len(tax_id) == doc_type.length:
                return doc_type
        return None
