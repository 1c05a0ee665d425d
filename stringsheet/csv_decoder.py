#!/usr/bin/env python3
"""
Tabular decoder for spreadsheet CSV exports.

Turns the raw bytes of a sheet exported as CSV (comma separated, double-quote
quoted, doubled quotes as escapes - the Excel/Google Sheets convention) into a
header row and a lazy sequence of data rows.

Format:
    key,en,fr
    welcome,Welcome,Bienvenue
    quote,"He said ""hi"", twice","Il a dit ""salut"", deux fois"
"""

import csv
import io
from dataclasses import dataclass
from typing import Iterator, Union

from .diagnostics import DecodeError, row_number


class SheetDialect(csv.Dialect):
    """CSV dialect matching common spreadsheet exports, with strict quoting."""
    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\r\n"
    quoting = csv.QUOTE_MINIMAL
    strict = True


@dataclass
class DecodedTable:
    """
    Decoded sheet.

    Attributes:
        header: Column names; column 0 is always the key column
        rows: Lazy iterator over data rows, each a list of cell strings
    """
    header: list[str]
    rows: Iterator[list[str]]


def _to_text(content: Union[str, bytes], encoding: str) -> str:
    if isinstance(content, bytes):
        try:
            return content.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(f"Source is not valid {encoding}: {e}")
    # Strings read without utf-8-sig may still carry a BOM
    return content.lstrip("\ufeff")


def decode_table(
    content: Union[str, bytes],
    encoding: str = "utf-8-sig",
    strict: bool = True,
) -> DecodedTable:
    """
    Decode CSV content into a header and data rows.

    Args:
        content: Raw CSV bytes or already-decoded text
        encoding: Text encoding used when content is bytes
        strict: Raise on rows whose cell count differs from the header.
            When False, rows are passed through as-is.

    Returns:
        DecodedTable with the header and a lazy row iterator

    Raises:
        DecodeError: If there is no header row, or (while iterating rows) on
            malformed quoting or a row/column count mismatch
    """
    text = _to_text(content, encoding)
    reader = csv.reader(io.StringIO(text, newline=""), dialect=SheetDialect)

    try:
        header = next(reader, None)
    except csv.Error as e:
        raise DecodeError(f"Malformed header row: {e}", row=1)

    if not header:
        raise DecodeError("Source has no header row", row=1)

    return DecodedTable(header=header, rows=_iter_rows(reader, len(header), strict))


def _iter_rows(reader, width: int, strict: bool) -> Iterator[list[str]]:
    """Yield data rows, skipping blank lines."""
    index = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise DecodeError(
                f"Line {row_number(index)} has malformed quoting: {e}",
                row=row_number(index),
            )

        # csv yields [] for completely blank lines
        if not row:
            continue

        if strict and len(row) != width:
            raise DecodeError(
                f"Line {row_number(index)} has {len(row)} cells but the header "
                f"has {width} columns",
                row=row_number(index),
            )

        yield row
        index += 1
