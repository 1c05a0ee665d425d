#!/usr/bin/env python3
"""
Tests for language column resolution and translation table construction.
"""

import pytest

from stringsheet.csv_decoder import decode_table
from stringsheet.diagnostics import ConfigurationError, DiagnosticLog
from stringsheet.table import (
    Language,
    TranslationEntry,
    build_table,
    is_header_key,
    resolve_columns,
)


@pytest.fixture
def languages():
    return [Language("en", "en.xml"), Language("fr", "fr.xml")]


def test_resolve_columns(languages):
    resolve_columns(["key", "fr", "de", "en"], languages)

    assert languages[0].column_index == 3
    assert languages[1].column_index == 1


def test_resolve_columns_skips_key_column():
    languages = [Language("en", "en.xml")]

    resolve_columns(["en", "en"], languages)

    assert languages[0].column_index == 1


def test_resolve_columns_binds_first_match():
    languages = [Language("en", "en.xml")]

    resolve_columns(["key", "en", "en"], languages)

    assert languages[0].column_index == 1


def test_resolve_columns_is_exact_match():
    languages = [Language("en", "en.xml")]

    with pytest.raises(ConfigurationError):
        resolve_columns(["key", "EN", "en "], languages)


def test_unresolved_language_is_fatal(languages):
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_columns(["key", "en", "de"], languages)

    assert "fr does not have any translations" in str(excinfo.value)


def test_no_languages_is_fatal():
    with pytest.raises(ConfigurationError):
        resolve_columns(["key", "en"], [])


def test_duplicate_language_is_fatal():
    with pytest.raises(ConfigurationError):
        resolve_columns(["key", "en"], [Language("en", "a.xml"), Language("en", "b.xml")])


def test_header_only_round_trip(languages):
    decoded = decode_table("key,en,fr\n")
    resolve_columns(decoded.header, languages)
    log = DiagnosticLog()

    table = build_table(decoded.rows, languages, log)

    assert len(table) == 0
    assert len(log) == 0


def test_build_table_keeps_row_order(languages):
    resolve_columns(["key", "en", "fr"], languages)
    rows = [
        ["b_key", "B", "B fr"],
        ["a_key", "A", ""],
    ]

    table = build_table(rows, languages, DiagnosticLog())

    assert table.keys == ["b_key", "a_key"]
    assert table.entries[0].values == {"en": "B", "fr": "B fr"}
    assert table.entries[1].get("fr") == ""


def test_key_is_trimmed(languages):
    resolve_columns(["key", "en", "fr"], languages)

    table = build_table([["  hello \t", "Hello", "Salut"]], languages, DiagnosticLog())

    assert table.entries[0].key == "hello"


def test_empty_row_is_dropped_with_one_warning(languages):
    resolve_columns(["key", "en", "fr"], languages)
    log = DiagnosticLog()
    rows = [
        ["hello", "Hello", "Bonjour"],
        ["nothing", "", ""],
        ["bye", "Bye", "Au revoir"],
    ]

    table = build_table(rows, languages, log)

    assert table.keys == ["hello", "bye"]
    assert len(log.warnings) == 1
    assert log.warnings[0].row == 3
    assert log.warnings[0].message == "Line 3 has no translations so it will not be parsed."


def test_row_numbers_follow_source_rows(languages):
    resolve_columns(["key", "en", "fr"], languages)
    rows = [
        ["first", "1", "1"],
        ["empty", "", ""],
        ["third", "3", ""],
    ]

    table = build_table(rows, languages, DiagnosticLog())

    assert [entry.row for entry in table] == [2, 4]


def test_short_row_cell_is_absent(languages):
    resolve_columns(["key", "en", "fr"], languages)

    table = build_table([["hello", "Hello"]], languages, DiagnosticLog())

    entry = table.entries[0]
    assert entry.get("fr") is None
    assert not entry.has_value("fr")
    assert entry.has_value("en")


def test_row_with_only_undeclared_columns_is_dropped():
    languages = [Language("fr", "fr.xml")]
    resolve_columns(["key", "en", "fr"], languages)
    log = DiagnosticLog()

    table = build_table([["hello", "Hello", ""]], languages, log)

    assert len(table) == 0
    assert len(log.warnings) == 1


def test_row_with_empty_key_is_kept(languages):
    resolve_columns(["key", "en", "fr"], languages)

    table = build_table([["", "Orphan", ""]], languages, DiagnosticLog())

    assert table.keys == [""]


def test_header_sentinel():
    assert is_header_key("header")
    assert is_header_key("HEADER")
    assert is_header_key("Header")
    assert not is_header_key("headers")
    assert not is_header_key(None)
    assert TranslationEntry("HeAdEr").is_header
