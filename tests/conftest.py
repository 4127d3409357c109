"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from bank_browser.models import Account, AccountKind, Branch, Client, MaritalStatus

CLIENTS_CSV = (
    "id,cpfCnpj,rg,dataNascimento,nome,nomeSocial,email,endereco,rendaAnual,patrimonio,estadoCivil,codigoAgencia\n"
    '"c1","12345678901","1234567","05/03/1990","Ana Silva","","ana@example.com","Rua A, 10","85000.50","250000","Solteiro","1001"\n'
    '"c2","12345678000199","","15/07/2005","Padaria Doe Ltda","Padaria","contato@doe.com","Av. B, 200","1200000","3500000","Casado","1002"\n'
    '"c3","98765432100","7654321","31/12/1975","Bruno Costa","","bruno@example.com","Rua C, 5","n/a","-1500.75","Viúvo","9999"\n'
)

ACCOUNTS_CSV = (
    "id,cpfCnpjCliente,tipo,saldo,limiteCredito,creditoDisponivel\n"
    '"a1","12345678901","corrente","1500.25","2000","1800"\n'
    '"a2","98765432100","corrente","-320.10","1000","0"\n'
    '"a3","12345678901","poupanca","10000","0","0"\n'
)

BRANCHES_CSV = (
    "id,codigo,nome,endereco\n"
    '"b1","1001","Agência Centro","Praça da Sé, 1"\n'
    '"b2","1002","Agência Paulista","Av. Paulista, 1000"\n'
)


@pytest.fixture
def clients_csv() -> str:
    return CLIENTS_CSV


@pytest.fixture
def accounts_csv() -> str:
    return ACCOUNTS_CSV


@pytest.fixture
def branches_csv() -> str:
    return BRANCHES_CSV


@pytest.fixture
def make_client() -> Callable[..., Client]:
    """Factory for clients with sensible defaults."""

    def _make(**overrides) -> Client:
        values = {
            "client_id": "cli-001",
            "tax_id": "12345678901",
            "name": "Test Client",
            "email": "test@test.com",
            "address": "Rua Teste, 100",
            "birth_date": date(1990, 3, 5),
            "annual_income": Decimal("60000.00"),
            "net_worth": Decimal("150000.00"),
            "marital_status": MaritalStatus.SINGLE,
            "branch_code": 1001,
        }
        values.update(overrides)
        return Client(**values)

    return _make


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Factory for accounts with sensible defaults."""

    def _make(**overrides) -> Account:
        values = {
            "account_id": "acct-001",
            "owner_tax_id": "12345678901",
            "kind": AccountKind.CHECKING,
            "balance": Decimal("100.00"),
            "credit_limit": Decimal("500.00"),
            "available_credit": Decimal("500.00"),
        }
        values.update(overrides)
        return Account(**values)

    return _make


@pytest.fixture
def branches() -> list[Branch]:
    return [
        Branch(branch_id="b1", code=1001, name="Agência Centro", address="Praça da Sé, 1"),
        Branch(branch_id="b2", code=1002, name="Agência Paulista", address="Av. Paulista, 1000"),
    ]
