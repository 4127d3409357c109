"""Tests for record decoding and value coercion."""

from datetime import date
from decimal import Decimal

import pytest

from bank_browser.decoding import (
    decode_account,
    decode_accounts,
    decode_branch,
    decode_client,
    decode_clients,
    parse_amount,
    parse_date,
    parse_int,
)
from bank_browser.exceptions import DecodeError
from bank_browser.models import (
    AccountKind,
    DocumentType,
    MaritalStatus,
    RawAccount,
    RawBranch,
    RawClient,
)
from bank_browser.parsing import parse_records


@pytest.fixture
def raw_client() -> RawClient:
    return RawClient(
        id="c1",
        cpfCnpj="12345678901",
        rg="1234567",
        dataNascimento="05/03/1990",
        nome="Ana Silva",
        nomeSocial="",
        email="ana@example.com",
        endereco="Rua A, 10",
        rendaAnual="85000.50",
        patrimonio="250000",
        estadoCivil="Solteiro",
        codigoAgencia="1001",
    )


class TestParseAmount:
    """Tests for currency coercion."""

    def test_clean_number(self) -> None:
        assert parse_amount("1234.56") == Decimal("1234.56")

    def test_negative(self) -> None:
        assert parse_amount("-320.10") == Decimal("-320.10")

    def test_locale_noise_is_stripped_not_interpreted(self) -> None:
        # "R$ 1.234,56" -> "1.23456"
        assert parse_amount("R$ 1.234,56") == Decimal("1.23456")

    def test_leading_number_only(self) -> None:
        assert parse_amount("1.2.3") == Decimal("1.2")
        assert parse_amount("12-3") == Decimal("12")

    def test_fraction_without_integer_part(self) -> None:
        assert parse_amount(".5") == Decimal("0.5")

    @pytest.mark.parametrize("text", ["", "abc", "-", ".", "n/a"])
    def test_unreadable_gives_nan(self, text: str) -> None:
        assert parse_amount(text).is_nan()


class TestParseInt:
    """Tests for integer coercion."""

    def test_plain(self) -> None:
        assert parse_int("1001") == 1001

    def test_surrounding_whitespace_and_sign(self) -> None:
        assert parse_int("  -7 ") == -7

    def test_trailing_garbage_ignored(self) -> None:
        assert parse_int("12.7") == 12

    @pytest.mark.parametrize("text", ["", "abc", "x12"])
    def test_unreadable_gives_none(self, text: str) -> None:
        assert parse_int(text) is None


class TestParseDate:
    """Tests for DD/MM/YYYY date coercion."""

    def test_day_month_year(self) -> None:
        assert parse_date("05/03/1990") == date(1990, 3, 5)

    def test_single_digit_parts(self) -> None:
        assert parse_date("5/3/1990") == date(1990, 3, 5)

    def test_iso_text_passes_through(self) -> None:
        assert parse_date("1990-03-05") == date(1990, 3, 5)

    @pytest.mark.parametrize("text", ["31/02/2000", "05/1990", "a/b/c", "", "yesterday"])
    def test_invalid_gives_none(self, text: str) -> None:
        assert parse_date(text) is None


class TestDecodeClient:
    """Tests for decoding client rows."""

    def test_all_fields(self, raw_client: RawClient) -> None:
        client = decode_client(raw_client)

        assert client.client_id == "c1"
        assert client.tax_id == "12345678901"
        assert client.legal_id == "1234567"
        assert client.birth_date == date(1990, 3, 5)
        assert client.name == "Ana Silva"
        assert client.display_name is None
        assert client.annual_income == Decimal("85000.50")
        assert client.net_worth == Decimal("250000")
        assert client.marital_status is MaritalStatus.SINGLE
        assert client.branch_code == 1001
        assert client.document_type is DocumentType.CPF

    def test_unreadable_values_degrade(self) -> None:
        client = decode_client(
            RawClient(id="c9", dataNascimento="??", rendaAnual="n/a", codigoAgencia="", estadoCivil="Outro")
        )

        assert client.birth_date is None
        assert client.annual_income.is_nan()
        assert client.branch_code is None
        assert client.marital_status == "Outro"

    def test_strict_mode_raises(self, raw_client: RawClient) -> None:
        from dataclasses import replace

        bad = replace(raw_client, rendaAnual="n/a")
        with pytest.raises(DecodeError) as exc_info:
            decode_client(bad, strict=True)
        assert exc_info.value.field == "rendaAnual"

    def test_strict_mode_rejects_unknown_marital_status(self, raw_client: RawClient) -> None:
        from dataclasses import replace

        with pytest.raises(DecodeError):
            decode_client(replace(raw_client, estadoCivil="Outro"), strict=True)

    def test_strict_mode_accepts_valid_row(self, raw_client: RawClient) -> None:
        assert decode_client(raw_client, strict=True).client_id == "c1"


class TestDecodeAccountAndBranch:
    """Tests for decoding account and branch rows."""

    def test_account(self) -> None:
        account = decode_account(
            RawAccount(
                id="a2",
                cpfCnpjCliente="98765432100",
                tipo="corrente",
                saldo="-320.10",
                limiteCredito="1000",
                creditoDisponivel="0",
            )
        )

        assert account.owner_tax_id == "98765432100"
        assert account.kind is AccountKind.CHECKING
        assert account.balance == Decimal("-320.10")
        assert account.is_overdrawn is True

    def test_account_nan_balance_is_not_overdrawn(self) -> None:
        account = decode_account(RawAccount(id="a9", tipo="poupanca", saldo="--"))
        assert account.balance.is_nan()
        assert account.is_overdrawn is False

    def test_branch(self) -> None:
        branch = decode_branch(RawBranch(id="b1", codigo="1001", nome="Centro", endereco="Praça da Sé"))
        assert branch.code == 1001
        assert branch.name == "Centro"


class TestDecodeCollections:
    """Tests for whole-collection decoding."""

    def test_same_length_and_order(self, clients_csv: str) -> None:
        raws = [RawClient.from_row(row) for row in parse_records(clients_csv)]
        clients = decode_clients(raws)

        assert [c.client_id for c in clients] == ["c1", "c2", "c3"]
        assert clients[1].display_name == "Padaria"
        assert clients[1].document_type is DocumentType.CNPJ
        assert clients[2].annual_income.is_nan()
        assert clients[2].net_worth == Decimal("-1500.75")

    def test_raw_records_are_not_mutated(self, accounts_csv: str) -> None:
        raws = [RawAccount.from_row(row) for row in parse_records(accounts_csv)]
        decode_accounts(raws)
        assert raws[0].saldo == "1500.25"

    def test_missing_columns_default_to_empty(self) -> None:
        raw = RawBranch.from_row({"id": "b1"})
        assert raw.codigo == ""
        assert decode_branch(raw).code is None
