#!/usr/bin/env python3
"""
Translation table: the platform-agnostic form of the source sheet.

Languages are declared by the run configuration and bound to sheet columns by
resolve_columns(). build_table() then turns decoded rows into an ordered list
of TranslationEntry objects, one per row with at least one translation.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .diagnostics import ConfigurationError, DiagnosticLog, row_number


# Reserved key whose value is commentary rather than a translatable string
HEADER_KEY = "header"

# Authoring language of the sheet; header commentary is taken from it
REFERENCE_LANGUAGE = "en"

UNRESOLVED = -1


def is_header_key(key: Optional[str]) -> bool:
    """Check for the header sentinel (matched case-insensitively)."""
    return key is not None and key.lower() == HEADER_KEY


@dataclass
class Language:
    """
    A declared output language.

    Attributes:
        id: Language identifier, matched exactly against sheet header cells
        path: Output destination for this language's resource document
        column_index: Sheet column bound by resolve_columns (-1 = unresolved)
    """
    id: str
    path: str
    column_index: int = UNRESOLVED

    @property
    def is_resolved(self) -> bool:
        return self.column_index != UNRESOLVED


@dataclass(frozen=True)
class TranslationEntry:
    """
    One row of the sheet.

    Attributes:
        key: Translation key (trimmed cell 0)
        values: language id -> cell text; None when the row had no such cell
        row: Line number of the source row (see diagnostics.row_number)
    """
    key: str
    values: dict[str, Optional[str]] = field(default_factory=dict)
    row: int = 0

    @property
    def is_header(self) -> bool:
        return is_header_key(self.key)

    def get(self, language_id: str) -> Optional[str]:
        """Value for a language, None if the row has no cell for it."""
        return self.values.get(language_id)

    def has_value(self, language_id: str) -> bool:
        return bool(self.values.get(language_id))


@dataclass
class TranslationTable:
    """Ordered translation entries plus the languages they were read for."""
    languages: list[Language]
    entries: list[TranslationEntry] = field(default_factory=list)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]


def check_languages(languages: list[Language]) -> None:
    """
    Make sure at least one language is declared and ids are unique.

    Raises:
        ConfigurationError: On an empty list, blank id or duplicate id
    """
    if not languages:
        raise ConfigurationError(
            "You need to declare at least one language",
            suggestion="Add a language with an id and an output path",
        )

    seen = set()
    for language in languages:
        if not language.id:
            raise ConfigurationError("A declared language has no id")
        if language.id in seen:
            raise ConfigurationError(f"Language '{language.id}' is declared more than once")
        seen.add(language.id)


def resolve_columns(header: list[str], languages: list[Language]) -> None:
    """
    Bind each declared language to the first header column named after it.

    Column 0 holds the keys and is never bound.

    Args:
        header: Sheet header row
        languages: Declared languages; their column_index is set in place

    Raises:
        ConfigurationError: If any language has no matching column
    """
    check_languages(languages)

    for language in languages:
        language.column_index = UNRESOLVED

    for index, name in enumerate(header):
        if index == 0:
            continue
        for language in languages:
            if not language.is_resolved and name == language.id:
                language.column_index = index
                break

    for language in languages:
        if not language.is_resolved:
            raise ConfigurationError(
                f"{language.id} does not have any translations "
                f"(no column named '{language.id}' in the sheet header)",
                suggestion=f"Header columns: {', '.join(header[1:]) or 'none'}",
            )


def build_entry(cells: list[str], languages: list[Language], row: int) -> TranslationEntry:
    """Build an entry from one decoded row; missing cells become None."""
    key = cells[0].strip() if cells else ""
    values = {}
    for language in languages:
        index = language.column_index
        values[language.id] = cells[index] if index < len(cells) else None
    return TranslationEntry(key=key, values=values, row=row)


def build_table(
    rows: Iterable[list[str]],
    languages: list[Language],
    log: DiagnosticLog,
) -> TranslationTable:
    """
    Build the translation table from decoded data rows.

    Rows without a single non-empty translation are dropped with a warning.

    Args:
        rows: Decoded data rows (header excluded)
        languages: Languages already bound by resolve_columns
        log: Receives one warning per dropped row

    Returns:
        TranslationTable with entries in source row order
    """
    table = TranslationTable(languages=list(languages))

    for index, cells in enumerate(rows):
        line = row_number(index)
        entry = build_entry(cells, languages, line)

        if not any(entry.has_value(language.id) for language in languages):
            log.warning(
                "EMPTY_ROW",
                f"Line {line} has no translations so it will not be parsed.",
                row=line,
            )
            continue

        table.entries.append(entry)

    return table
