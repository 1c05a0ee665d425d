#!/usr/bin/env python3
"""
Key validation for the translation table.

Runs once over the whole table before anything is emitted. Any failure is
fatal and stops the run, so no language gets a partially written document.

Entries are checked in source order. For each entry the key is first checked
for whitespace, then compared against every later entry; the first problem
found is reported. Empty keys are not checked here: they are skipped with a
warning while emitting.
"""

import re
from collections import defaultdict

from .diagnostics import KeyValidationError
from .table import TranslationTable, is_header_key


WHITESPACE = re.compile(r"\s")


def find_duplicate(entries, position: int, later_rows: dict[str, list[int]]):
    """Return the next entry position after `position` sharing its key, or None."""
    for other in later_rows.get(entries[position].key, ()):
        if other > position:
            return other
    return None


def validate_table(table: TranslationTable) -> None:
    """
    Validate the keys of every entry.

    Args:
        table: Fully built translation table

    Raises:
        KeyValidationError: On the first key containing whitespace, or the
            earliest pair of entries sharing a key (header rows excluded)
    """
    entries = table.entries

    # key -> positions in source order, so each lookup only sees later rows
    positions: dict[str, list[int]] = defaultdict(list)
    for position, entry in enumerate(entries):
        if entry.key and not is_header_key(entry.key):
            positions[entry.key].append(position)

    for position, entry in enumerate(entries):
        if WHITESPACE.search(entry.key):
            raise KeyValidationError(
                f"Line {entry.row} contains a space in its key.",
                row=entry.row,
                suggestion="Use underscores instead of spaces in keys",
            )

        if not entry.key or is_header_key(entry.key):
            continue

        other = find_duplicate(entries, position, positions)
        if other is not None:
            second = entries[other]
            raise KeyValidationError(
                f"Lines {entry.row} and {second.row} have the same key.",
                row=entry.row,
                suggestion=f"Rename or remove one of the '{entry.key}' rows",
                rows=(entry.row, second.row),
            )
