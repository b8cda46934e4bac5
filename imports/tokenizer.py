"""
Quote-aware CSV tokenizer.

Turns the full text of an uploaded file into header-keyed :data:`~imports.types.RawRow` mappings.
The tokenizer knows nothing about entity kinds; meaning is added by :mod:`~imports.normalizers`.

Rules:

* the text is split on newlines and blank lines are discarded;
* the first non-blank line is the header, every other line is one data row;
* a double quote toggles the quoted state, a comma inside quotes is literal and two consecutive
  double quotes inside a quoted field stand for one literal quote;
* header keys are trimmed, lowercased and have whitespace runs replaced by ``_``;
* missing trailing values become ``""`` and extra trailing values are dropped.
"""

import re

from imports.types import RawRow


_WHITESPACE = re.compile(r"\s+")
_BYTE_ORDER_MARK = "\ufeff"
QUOTE = '"'
SEPARATOR = ","


def normalize_header(header: str) -> str:
    """
    Return the lookup key for a header cell.

    >>> normalize_header("  *Contact First Name ")
    '*contact_first_name'
    """
    return _WHITESPACE.sub("_", header.strip().lower())


def split_line(line: str) -> list[str]:
    """Split one CSV line into raw (untrimmed) values, honouring double-quoted fields."""
    values: list[str] = []
    current: list[str] = []
    in_quotes = False
    idx = 0
    length = len(line)

    while idx < length:
        char = line[idx]
        if char == QUOTE:
            if in_quotes and idx + 1 < length and line[idx + 1] == QUOTE:
                # Escaped quote inside a quoted field
                current.append(QUOTE)
                idx += 1
            else:
                in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
        idx += 1

    values.append("".join(current))
    return values


def parse_csv(text: str) -> list[RawRow]:
    """
    Tokenize *text* into raw rows keyed by normalized header.

    Returns an empty list for empty input or a header without data lines; callers treat that as
    a structural failure of the whole file.
    """
    lines = [line for line in text.removeprefix(_BYTE_ORDER_MARK).split("\n") if line.strip()]
    if len(lines) < 2:  # noqa: PLR2004
        return []

    headers = [normalize_header(cell) for cell in split_line(lines[0])]
    return [_build_row(headers, split_line(line)) for line in lines[1:]]


def _build_row(headers: list[str], values: list[str]) -> RawRow:
    """Zip *headers* with *values*, padding missing values and dropping extra ones."""
    row: RawRow = {}
    for idx, key in enumerate(headers):
        if not key or key in row:
            continue
        row[key] = values[idx].strip() if idx < len(values) else ""
    return row
