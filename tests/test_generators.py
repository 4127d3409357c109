"""Tests for sample export generators."""

import pytest

from bank_browser.generators import (
    AccountGenerator,
    BranchGenerator,
    ClientGenerator,
    generate_dataset,
    to_csv_text,
)
from bank_browser.loader import build_store
from bank_browser.models import AccountKind, MaritalStatus, RawBranch
from bank_browser.parsing import parse_records


@pytest.fixture
def dataset():
    return generate_dataset(num_clients=30, num_branches=3, seed=42)


class TestBranchGenerator:
    """Tests for BranchGenerator."""

    def test_sequential_codes(self) -> None:
        branches = list(BranchGenerator(seed=1).generate_batch(3))
        assert [b.codigo for b in branches] == ["1001", "1002", "1003"]
        assert all("\n" not in b.endereco for b in branches)


class TestClientGenerator:
    """Tests for ClientGenerator."""

    def test_tax_ids_are_digits_only(self) -> None:
        clients = list(ClientGenerator(seed=7).generate_batch(40, ["1001"]))

        for client in clients:
            assert client.cpfCnpj.isdigit()
            assert len(client.cpfCnpj) in (11, 14)
            assert client.estadoCivil in {s.value for s in MaritalStatus}
            assert client.codigoAgencia == "1001"

    def test_organizations_have_no_rg(self) -> None:
        clients = list(ClientGenerator(seed=7).generate_batch(60, ["1001"]))
        organizations = [c for c in clients if len(c.cpfCnpj) == 14]
        assert all(c.rg == "" for c in organizations)


class TestAccountGenerator:
    """Tests for AccountGenerator."""

    def test_every_client_has_checking(self) -> None:
        accounts = list(AccountGenerator(seed=3).generate_for_client("12345678901", "120000.00"))

        assert accounts[0].tipo == AccountKind.CHECKING.value
        assert all(a.cpfCnpjCliente == "12345678901" for a in accounts)
        assert len(accounts) in (1, 2)


class TestGenerateDataset:
    """Tests for generate_dataset."""

    def test_counts(self, dataset) -> None:
        summary = dataset.summary()
        assert summary["clients"] == 30
        assert summary["branches"] == 3
        assert 30 <= summary["accounts"] <= 60

    def test_references_resolve(self, dataset) -> None:
        tax_ids = {c.cpfCnpj for c in dataset.clients}
        codes = {b.codigo for b in dataset.branches}

        assert all(a.cpfCnpjCliente in tax_ids for a in dataset.accounts)
        assert all(c.codigoAgencia in codes for c in dataset.clients)

    def test_reproducible(self) -> None:
        first = generate_dataset(num_clients=5, num_branches=2, seed=99)
        second = generate_dataset(num_clients=5, num_branches=2, seed=99)
        assert first.clients == second.clients

    def test_exports_decode_strictly(self, dataset) -> None:
        store = build_store(
            to_csv_text(dataset.clients),
            to_csv_text(dataset.accounts),
            to_csv_text(dataset.branches),
            strict=True,
        )

        assert len(store.clients) == 30
        for client in store.clients:
            detail = store.detail(client.client_id)
            assert detail.branch is not None
            assert len(detail.accounts) >= 1


class TestToCsvText:
    """Tests for to_csv_text."""

    def test_header_and_quoting(self) -> None:
        text = to_csv_text([RawBranch(id="b1", codigo="1001", nome="Centro", endereco="Rua A, 1")])

        lines = text.splitlines()
        assert lines[0] == '"id","codigo","nome","endereco"'
        assert parse_records(text) == [
            {"id": "b1", "codigo": "1001", "nome": "Centro", "endereco": "Rua A, 1"}
        ]

    def test_inner_quotes_replaced(self) -> None:
        text = to_csv_text([RawBranch(id="b1", nome='Agência "Central"')])
        assert parse_records(text)[0]["nome"] == "Agência 'Central'"

    def test_empty(self) -> None:
        assert to_csv_text([]) == ""
