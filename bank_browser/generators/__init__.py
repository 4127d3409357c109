"""Sample data generators."""

from bank_browser.generators.banking import (
    AccountGenerator,
    BranchGenerator,
    ClientGenerator,
    SampleDataset,
    generate_dataset,
    to_csv_text,
)

__all__ = [
    "AccountGenerator",
    "BranchGenerator",
    "ClientGenerator",
    "SampleDataset",
    "generate_dataset",
    "to_csv_text",
]
