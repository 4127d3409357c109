"""bank-browser: read-only browser for banking spreadsheet exports."""

__version__ = "0.1.0"
