"""CSV ingestion: read standard input, parse records, normalise row length."""

from __future__ import annotations

import csv
import io
import logging
import sys
from typing import BinaryIO

from csvpretty.errors import CsvParseError, EmptyInput, InputError

logger = logging.getLogger(__name__)

# Cells have no size cap; the csv module defaults to 128 KiB per field.
csv.field_size_limit(sys.maxsize)


def read_input(stream: BinaryIO) -> str:
    """Read *stream* to EOF and decode it as UTF-8 (a BOM is dropped)."""
    try:
        data = stream.read()
    except OSError as e:
        raise InputError(f"failed to read input: {e}") from e

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputError(f"input is not valid UTF-8: {e}") from e


def pad_row(row: list[str], length: int) -> list[str]:
    """Return *row* with exactly *length* cells.

    Missing trailing cells become empty strings; surplus cells are dropped.
    """
    if len(row) < length:
        return row + [""] * (length - len(row))
    return row[:length]


def parse_csv(text: str) -> tuple[list[str], list[list[str]]]:
    """Parse CSV *text* into a header and rows padded to the header length.

    Blank lines are skipped. Raises :class:`EmptyInput` when the text is
    empty or only whitespace and :class:`CsvParseError` on malformed quoting.
    """
    if not text.strip():
        raise EmptyInput("no CSV input provided")

    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    header: list[str] | None = None
    rows: list[list[str]] = []
    truncated = 0

    try:
        for record in reader:
            if not record:
                continue
            if header is None:
                header = record
                continue
            if len(record) > len(header):
                truncated += 1
            rows.append(pad_row(record, len(header)))
    except csv.Error as e:
        raise CsvParseError(str(e), line=reader.line_num) from e

    if header is None:
        raise EmptyInput("no CSV input provided")

    if truncated:
        logger.warning(
            "%d row(s) had more than %d fields; extra fields were dropped",
            truncated,
            len(header),
        )
    logger.debug("parsed %d column(s), %d row(s)", len(header), len(rows))
    return header, rows
