"""Branch model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Branch:
    """Bank branch (agência)."""

    branch_id: str
    code: int | None  # join key for Client.branch_code
    name: str
    address: str
