"""Delimited-text parsing for Baseball Savant CSV exports.

Savant responses are a header row followed by one pitch per row. Quoted fields
may contain the delimiter, doubled quotes, or line breaks. Whitespace before an
opening quote is skipped so ``a, "b, c"`` reads as two fields. Short rows are
padded with empty strings so positional pairing with the header never fails.
"""

import csv
import io
import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def strip_bom(text: str) -> str:
    """Strip UTF-8 BOM from the start of text (Baseball Savant CSVs include it)."""
    return text.removeprefix("\ufeff")


def _is_blank(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def _records(text: str, delimiter: str) -> Iterator[list[str]]:
    reader = csv.reader(
        io.StringIO(strip_bom(text), newline=""),
        delimiter=delimiter,
        quotechar='"',
        doublequote=True,
        skipinitialspace=True,
        strict=False,
    )
    try:
        for row in reader:
            if not _is_blank(row):
                yield [field.strip() for field in row]
    except csv.Error as e:
        logger.warning("Stopped parsing delimited text at line %d: %s", reader.line_num, e)


def parse_rows(text: str, delimiter: str = ",") -> list[dict[str, str]]:
    records = list(_records(text, delimiter))
    if len(records) < 2:
        return []

    headers = records[0]
    rows = [
        {header: (values[idx] if idx < len(values) else "") for idx, header in enumerate(headers)}
        for values in records[1:]
    ]

    logger.debug("Parsed %d rows with %d columns", len(rows), len(headers))
    return rows
