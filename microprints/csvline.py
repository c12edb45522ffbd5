"""Parsing of a single CSV row with double-quote escaping."""

from __future__ import annotations


class CsvError(ValueError):
    """Raised when a CSV line has an unterminated quoted field."""


def count_fields(line: str) -> int:
    """Return the number of fields in line.

    Raises CsvError when a quote is left open.
    """
    count = 1
    quoted = False
    for ch in line:
        if quoted:
            if ch == '"':
                quoted = False
        elif ch == '"':
            quoted = True
        elif ch == ",":
            count += 1
    if quoted:
        raise CsvError(f"unterminated quote in line: {line!r}")
    return count


def parse_csv(line: str) -> list[str]:
    """Split a CSV line into its fields.

    Quoted fields may hold commas and line breaks; a doubled quote inside
    a quoted field stands for one quote character.
    """
    count_fields(line)
    fields: list[str] = []
    current: list[str] = []
    quoted = False
    chars = iter(enumerate(line))
    for i, ch in chars:
        if quoted:
            if ch == '"':
                if line[i + 1:i + 2] == '"':
                    current.append('"')
                    next(chars)
                else:
                    quoted = False
            else:
                current.append(ch)
        elif ch == '"':
            quoted = True
        elif ch == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields