"""Configuration management for bank-browser."""

from dataclasses import dataclass, field

from bank_browser.exceptions import ConfigurationError

SPREADSHEET_ID = "1PBN_HQOi5ZpKDd63mouxttFvvCwtmY97Tb5if5_cdBA"
EXPORT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet}"

DEFAULT_PAGE_SIZE = 10


def export_url(sheet: str, sheet_id: str = SPREADSHEET_ID) -> str:
    """Build the CSV export URL of one sheet of the spreadsheet."""
    return EXPORT_URL_TEMPLATE.format(sheet_id=sheet_id, sheet=sheet)


@dataclass(frozen=True)
class SourceConfig:
    """Locations of the three CSV exports.

    A location is either an http(s) URL or a path to a local file.
    """

    clients_url: str = field(default_factory=lambda: export_url("clientes"))
    accounts_url: str = field(default_factory=lambda: export_url("contas"))
    branches_url: str = field(default_factory=lambda: export_url("agencias"))

    @classmethod
    def from_directory(cls, directory: str) -> "SourceConfig":
        """Point every source at a file written by the sample data generator."""
        from pathlib import Path

        base = Path(directory)
        return cls(
            clients_url=str(base / "clientes.csv"),
            accounts_url=str(base / "contas.csv"),
            branches_url=str(base / "agencias.csv"),
        )


@dataclass
class BrowserConfig:
    """Main configuration for bank-browser."""

    sources: SourceConfig = field(default_factory=SourceConfig)
    page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = "INFO"
    log_format: str = "standard"
    strict_decoding: bool = False

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ConfigurationError(f"page_size must be positive, got {self.page_size}")

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Create config from environment variables."""
        import os

        defaults = SourceConfig()
        sources = SourceConfig(
            clients_url=os.getenv("BANK_CLIENTS_URL", defaults.clients_url),
            accounts_url=os.getenv("BANK_ACCOUNTS_URL", defaults.accounts_url),
            branches_url=os.getenv("BANK_BRANCHES_URL", defaults.branches_url),
        )

        page_size_str = os.getenv("PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            page_size = int(page_size_str)
        except ValueError:
            raise ConfigurationError(f"PAGE_SIZE must be an integer, got {page_size_str!r}") from None

        return cls(
            sources=sources,
            page_size=page_size,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            strict_decoding=os.getenv("STRICT_DECODING", "false").lower() == "true",
        )
