"""Parser for the comma-separated text served by spreadsheet CSV exports.

Rows are separated by ``\\n`` and fields by ``,``. A double quote toggles a
"quoted" state in which commas are taken literally. Doubled quotes inside a
quoted field (``"a ""b"" c"``) are NOT treated as an escape: each quote
simply flips the state, so such fields come out without their inner quotes
and may swallow the following comma. The exports read by this package never
contain them.
"""

from __future__ import annotations

QUOTE = '"'
DELIMITER = ","


def parse_line(line: str) -> list[str]:
    """Split one line into trimmed field values.

    Parameters
    ----------
    line : str
        A single line of delimited text, without its newline.

    Returns
    -------
    list[str]
        Field values; always at least one (an empty line gives ``[""]``).
    """
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return [_clean(value) for value in values]


def _clean(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        value = value[1:-1]
    return value


def parse_rows(text: str) -> list[list[str]]:
    """Parse every line of ``text``, header included."""
    return [parse_line(line) for line in text.split("\n")]


def parse_records(text: str) -> list[dict[str, str]]:
    """Parse delimited text into one header-keyed mapping per data row.

    The first line is the header and is never returned as data. Blank
    lines are skipped. Rows shorter than the header get ``""`` for the
    missing columns; extra values beyond the header are dropped.
    """
    lines = text.split("\n")
    if not lines or not lines[0].strip():
        return []

    headers = parse_line(lines[0])
    records = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = parse_line(line)
        records.append(
            {header: values[i] if i < len(values) else "" for i, header in enumerate(headers)}
        )
    return records
