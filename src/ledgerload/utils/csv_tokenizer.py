"""CSV tokenizing utilities.

The tokenizer is intentionally small: lines are split on line breaks and
fields on commas, with double quotes toggling a quoted span. Escaped quotes
are not interpreted beyond toggling.
"""

from dataclasses import dataclass

from ledgerload.domain.errors import InsufficientRowsError


@dataclass(frozen=True)
class CSVLine:
    """A non-blank line of the source file."""

    number: int
    text: str


def decode_csv(content: bytes) -> str:
    """Decode uploaded bytes, dropping a UTF-8 byte order mark."""
    return content.decode("utf-8-sig", errors="replace")


def split_lines(content: str) -> list[CSVLine]:
    """Split raw text into non-blank lines.

    Line numbers are 1-based positions among the kept lines, so the header is
    line 1 and the first data row is line 2.

    Args:
        content: Decoded file content

    Returns:
        List of CSVLine with line terminators removed
    """
    lines = []
    for raw in content.split("\n"):
        text = raw.rstrip("\r")
        if not text.strip():
            continue
        lines.append(CSVLine(number=len(lines) + 1, text=text))
    return lines


def split_fields(line: str) -> list[str]:
    """Split one CSV line into fields.

    A double quote toggles the "inside quotes" state and is dropped; a comma
    inside quotes is kept as part of the field.

    Args:
        line: A single CSV line

    Returns:
        List of raw (untrimmed) field values
    """
    values = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def header_index(header: str) -> dict[str, int]:
    """Map lower-cased, trimmed header names to column indices.

    A repeated header name maps to its last position.
    """
    return {name.strip().lower(): index for index, name in enumerate(split_fields(header.strip()))}


def tokenize(content: str) -> tuple[dict[str, int], list[CSVLine]]:
    """Tokenize a whole CSV document.

    Args:
        content: Decoded file content

    Returns:
        Tuple of (header index map, data lines)

    Raises:
        InsufficientRowsError: If there is no data row after the header
    """
    lines = split_lines(content)
    if len(lines) < 2:
        raise InsufficientRowsError()
    return header_index(lines[0].text), lines[1:]
