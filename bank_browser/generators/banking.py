"""Generators for sample clients, accounts and branches exports.

Records are produced in their raw (exported) form so they can be written
as CSV and read back through the regular parsing and decoding path.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Iterator

from bank_browser.generators.base import BaseGenerator
from bank_browser.models import AccountKind, MaritalStatus, RawAccount, RawBranch, RawClient

_NON_DIGITS = re.compile(r"\D")


def _digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def _amount(value: float) -> str:
    return str(Decimal(str(round(value, 2))).quantize(Decimal("0.01")))


class BranchGenerator(BaseGenerator):
    """Generate bank branches with sequential four-digit codes."""

    FIRST_CODE = 1001

    def generate_batch(self, count: int) -> Iterator[RawBranch]:
        """Generate ``count`` branches.

        Yields
        ------
        RawBranch
            Generated branches, codes ``1001``, ``1002``, ...
        """
        for i in range(count):
            code = self.FIRST_CODE + i
            yield RawBranch(
                id=self.fake.uuid4(),
                codigo=str(code),
                nome=f"Agência {self.fake.city()}",
                endereco=self.fake.address().replace("\n", ", "),
            )


class ClientGenerator(BaseGenerator):
    """Generate individual (CPF) and organization (CNPJ) clients."""

    ORGANIZATION_RATE = 0.15
    DISPLAY_NAME_RATE = 0.10

    MARITAL_STATUS = list(MaritalStatus)
    MARITAL_WEIGHTS = [0.40, 0.40, 0.08, 0.12]

    def generate(self, branch_codes: list[str]) -> RawClient:
        """Generate a single client assigned to one of ``branch_codes``."""
        if random.random() < self.ORGANIZATION_RATE:
            return self._generate_organization(branch_codes)
        return self._generate_individual(branch_codes)

    def generate_batch(self, count: int, branch_codes: list[str]) -> Iterator[RawClient]:
        for _ in range(count):
            yield self.generate(branch_codes)

    def _generate_individual(self, branch_codes: list[str]) -> RawClient:
        # Log-normal annual income (~R$ 80k median)
        income = random.lognormvariate(mu=11.3, sigma=0.8)
        net_worth = income * random.uniform(0.5, 12)
        display_name = self.fake.name() if random.random() < self.DISPLAY_NAME_RATE else ""
        marital = random.choices(self.MARITAL_STATUS, weights=self.MARITAL_WEIGHTS, k=1)[0]

        return RawClient(
            id=self.fake.uuid4(),
            cpfCnpj=_digits(self.fake.cpf()),
            rg=self.fake.rg(),
            dataNascimento=self.fake.date_of_birth(minimum_age=18, maximum_age=90).strftime("%d/%m/%Y"),
            nome=self.fake.name(),
            nomeSocial=display_name,
            email=self.fake.email(),
            endereco=self.fake.address().replace("\n", ", "),
            rendaAnual=_amount(income),
            patrimonio=_amount(net_worth),
            estadoCivil=marital.value,
            codigoAgencia=random.choice(branch_codes),
        )

    def _generate_organization(self, branch_codes: list[str]) -> RawClient:
        revenue = random.lognormvariate(mu=14.0, sigma=1.2)
        return RawClient(
            id=self.fake.uuid4(),
            cpfCnpj=_digits(self.fake.cnpj()),
            dataNascimento=self.fake.date_between(start_date="-40y", end_date="-1y").strftime("%d/%m/%Y"),
            nome=self.fake.company(),
            email=self.fake.company_email(),
            endereco=self.fake.address().replace("\n", ", "),
            rendaAnual=_amount(revenue),
            patrimonio=_amount(revenue * random.uniform(0.2, 5)),
            estadoCivil=random.choice(self.MARITAL_STATUS).value,
            codigoAgencia=random.choice(branch_codes),
        )


class AccountGenerator(BaseGenerator):
    """Generate accounts for a client.

    Every client has a checking account; some also have savings.
    Checking balances may be negative (overdraft).
    """

    SAVINGS_RATE = 0.40
    OVERDRAFT_RATE = 0.10

    def generate_for_client(self, tax_id: str, annual_income: str) -> Iterator[RawAccount]:
        """Generate the accounts owned by the client with ``tax_id``."""
        monthly = float(annual_income) / 12
        yield self._generate_one(tax_id, AccountKind.CHECKING, monthly)
        if random.random() < self.SAVINGS_RATE:
            yield self._generate_one(tax_id, AccountKind.SAVINGS, monthly)

    def _generate_one(self, tax_id: str, kind: AccountKind, monthly_income: float) -> RawAccount:
        if kind == AccountKind.CHECKING:
            credit_limit = round(monthly_income * random.uniform(0.5, 3), -2)
            if random.random() < self.OVERDRAFT_RATE:
                balance = -random.uniform(0, credit_limit or 500)
            else:
                balance = random.uniform(0, monthly_income * 2)
        else:
            credit_limit = 0.0
            balance = random.uniform(0, monthly_income * 10)

        used = -balance if balance < 0 else random.uniform(0, credit_limit * 0.3)
        available = max(0.0, credit_limit - used)

        return RawAccount(
            id=self.fake.uuid4(),
            cpfCnpjCliente=tax_id,
            tipo=kind.value,
            saldo=_amount(balance),
            limiteCredito=_amount(credit_limit),
            creditoDisponivel=_amount(available),
        )


@dataclass
class SampleDataset:
    """Raw records of the three exports."""

    clients: list[RawClient] = field(default_factory=list)
    accounts: list[RawAccount] = field(default_factory=list)
    branches: list[RawBranch] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        return {
            "clients": len(self.clients),
            "accounts": len(self.accounts),
            "branches": len(self.branches),
        }


def generate_dataset(
    num_clients: int = 50,
    num_branches: int = 5,
    seed: int | None = None,
) -> SampleDataset:
    """Generate a consistent dataset: every account and branch reference resolves."""
    dataset = SampleDataset()
    dataset.branches = list(BranchGenerator(seed).generate_batch(num_branches))
    codes = [branch.codigo for branch in dataset.branches]

    dataset.clients = list(ClientGenerator(seed).generate_batch(num_clients, codes))

    account_gen = AccountGenerator(seed)
    for client in dataset.clients:
        dataset.accounts.extend(account_gen.generate_for_client(client.cpfCnpj, client.rendaAnual))
    return dataset


def to_csv_text(records: list) -> str:
    """Render raw records as an export: a header line and one all-quoted line per record.

    Double quotes inside values are replaced by single quotes since the
    parser does not read escaped quotes.
    """
    if not records:
        return ""
    names = [f.name for f in fields(records[0])]
    lines = [",".join(f'"{name}"' for name in names)]
    for record in records:
        lines.append(
            ",".join('"' + str(getattr(record, name)).replace('"', "'") + '"' for name in names)
        )
    return "\n".join(lines) + "\n"
