"""Custom exception hierarchy for bank-browser."""


class BankBrowserError(Exception):
    """Base exception for all bank-browser errors."""


class DataLoadError(BankBrowserError):
    """Raised when the data sources could not be loaded."""


class FetchError(DataLoadError):
    """Raised when a single source is unreachable or answers with an error status."""

    def __init__(self, location: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch {location}: {reason}")
        self.location = location
        self.reason = reason
        self.status_code = status_code


class DecodeError(BankBrowserError):
    """Raised by strict decoding when a field cannot be coerced."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Cannot decode field {field!r} from value {value!r}")
        self.field = field
        self.value = value


class ConfigurationError(BankBrowserError):
    """Raised when configuration is invalid or missing."""
