"""Raw (pre-decode) records, one string per CSV column."""

from collections.abc import Mapping
from dataclasses import dataclass, fields


class _RawRecord:
    """Mixin building a raw record from a header-keyed CSV row.

    Dataclass field names follow the export's column names so a header
    maps onto a field without translation. Missing columns become ``""``
    and unknown columns are ignored.
    """

    @classmethod
    def from_row(cls, row: Mapping[str, str]):
        return cls(**{f.name: row.get(f.name, "") for f in fields(cls)})


@dataclass(frozen=True)
class RawClient(_RawRecord):
    """Client row as exported, before coercion."""

    id: str = ""
    cpfCnpj: str = ""
    rg: str = ""
    dataNascimento: str = ""
    nome: str = ""
    nomeSocial: str = ""
    email: str = ""
    endereco: str = ""
    rendaAnual: str = ""
    patrimonio: str = ""
    estadoCivil: str = ""
    codigoAgencia: str = ""


@dataclass(frozen=True)
class RawAccount(_RawRecord):
    """Account row as exported, before coercion."""

    id: str = ""
    cpfCnpjCliente: str = ""
    tipo: str = ""
    saldo: str = ""
    limiteCredito: str = ""
    creditoDisponivel: str = ""


@dataclass(frozen=True)
class RawBranch(_RawRecord):
    """Branch row as exported, before coercion."""

    id: str = ""
    codigo: str = ""
    nome: str = ""
    endereco: str = ""
