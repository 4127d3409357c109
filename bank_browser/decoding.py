"""Coercion of raw export rows into typed records.

Decoding is best effort: a value that cannot be read becomes a sentinel
(``Decimal("NaN")`` for amounts, ``None`` for dates and integer codes)
instead of failing the load. ``strict=True`` turns every such case into a
:class:`~bank_browser.exceptions.DecodeError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import TypeVar

from bank_browser.exceptions import DecodeError
from bank_browser.logging import get_logger
from bank_browser.models import (
    Account,
    AccountKind,
    Branch,
    Client,
    MaritalStatus,
    RawAccount,
    RawBranch,
    RawClient,
)

logger = get_logger(__name__)

NAN = Decimal("NaN")

# Everything except digits, the decimal point and the minus sign is dropped.
_AMOUNT_NOISE = re.compile(r"[^\d.\-]")
_AMOUNT_PREFIX = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

E = TypeVar("E", bound=Enum)


def parse_amount(text: str) -> Decimal:
    """Read a currency amount.

    Non-numeric characters are stripped first, then the longest leading
    number is read. ``"R$ 1.234,56"`` therefore reads as ``1.23456``: the
    rule is fixed character stripping, not locale-aware parsing.

    Returns
    -------
    Decimal
        The amount, or ``Decimal("NaN")`` when nothing numeric remains.
    """
    match = _AMOUNT_PREFIX.match(_AMOUNT_NOISE.sub("", text))
    if match is None:
        return NAN
    return Decimal(match.group())


def parse_int(text: str) -> int | None:
    """Read a base-10 integer prefix (``"12.7"`` gives 12), or None."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_date(text: str) -> date | None:
    """Read a ``DD/MM/YYYY`` date.

    Text without exactly three ``/``-separated parts is tried as an ISO
    date as-is. Returns None when no valid date comes out.
    """
    parts = text.split("/")
    if len(parts) == 3:
        day, month, year = parts
        try:
            return date(int(year), int(month), int(day))
        except ValueError:
            return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _optional(text: str) -> str | None:
    return text or None


def _enum_or_raw(enum_cls: type[E], text: str, field: str, strict: bool) -> E | str:
    try:
        return enum_cls(text)
    except ValueError:
        if strict:
            raise DecodeError(field, text) from None
        logger.debug("Unknown %s value %r kept as text", field, text)
        return text


def _amount(text: str, field: str, strict: bool) -> Decimal:
    value = parse_amount(text)
    if value.is_nan():
        if strict:
            raise DecodeError(field, text)
        logger.debug("Unreadable amount in %s: %r", field, text)
    return value


def _integer(text: str, field: str, strict: bool) -> int | None:
    value = parse_int(text)
    if value is None:
        if strict:
            raise DecodeError(field, text)
        logger.debug("Unreadable integer in %s: %r", field, text)
    return value


def _date(text: str, field: str, strict: bool) -> date | None:
    value = parse_date(text)
    if value is None:
        if strict:
            raise DecodeError(field, text)
        logger.debug("Unreadable date in %s: %r", field, text)
    return value


def decode_client(raw: RawClient, strict: bool = False) -> Client:
    """Convert a raw client row into a :class:`Client`."""
    return Client(
        client_id=raw.id,
        tax_id=raw.cpfCnpj,
        legal_id=_optional(raw.rg),
        birth_date=_date(raw.dataNascimento, "dataNascimento", strict),
        name=raw.nome,
        display_name=_optional(raw.nomeSocial),
        email=raw.email,
        address=raw.endereco,
        annual_income=_amount(raw.rendaAnual, "rendaAnual", strict),
        net_worth=_amount(raw.patrimonio, "patrimonio", strict),
        marital_status=_enum_or_raw(MaritalStatus, raw.estadoCivil, "estadoCivil", strict),
        branch_code=_integer(raw.codigoAgencia, "codigoAgencia", strict),
    )


def decode_account(raw: RawAccount, strict: bool = False) -> Account:
    """Convert a raw account row into an :class:`Account`."""
    return Account(
        account_id=raw.id,
        owner_tax_id=raw.cpfCnpjCliente,
        kind=_enum_or_raw(AccountKind, raw.tipo, "tipo", strict),
        balance=_amount(raw.saldo, "saldo", strict),
        credit_limit=_amount(raw.limiteCredito, "limiteCredito", strict),
        available_credit=_amount(raw.creditoDisponivel, "creditoDisponivel", strict),
    )


def decode_branch(raw: RawBranch, strict: bool = False) -> Branch:
    """Convert a raw branch row into a :class:`Branch`."""
    return Branch(
        branch_id=raw.id,
        code=_integer(raw.codigo, "codigo", strict),
        name=raw.nome,
        address=raw.endereco,
    )


def decode_clients(raws: Iterable[RawClient], strict: bool = False) -> list[Client]:
    return [decode_client(raw, strict) for raw in raws]


def decode_accounts(raws: Iterable[RawAccount], strict: bool = False) -> list[Account]:
    return [decode_account(raw, strict) for raw in raws]


def decode_branches(raws: Iterable[RawBranch], strict: bool = False) -> list[Branch]:
    return [decode_branch(raw, strict) for raw in raws]
