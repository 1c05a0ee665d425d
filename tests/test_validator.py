#!/usr/bin/env python3
"""
Tests for key validation.

Tests verify:
1. Keys with whitespace stop the run with the offending line
2. Duplicate keys stop the run with the earliest conflicting pair
3. Header rows and empty keys are exempt from the duplicate check
"""

import pytest

from stringsheet.diagnostics import KeyValidationError
from stringsheet.table import Language, TranslationEntry, TranslationTable
from stringsheet.validator import validate_table


def make_table(*keys):
    entries = [
        TranslationEntry(key=key, values={"en": "value"}, row=index + 2)
        for index, key in enumerate(keys)
    ]
    return TranslationTable(languages=[Language("en", "en.xml", 1)], entries=entries)


def test_valid_table_passes():
    validate_table(make_table("hello", "bye", "header", "welcome_back"))


def test_space_in_key():
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("hello", "good bye"))

    assert str(excinfo.value) == "Line 3 contains a space in its key."
    assert excinfo.value.rows == (3,)


def test_tab_in_key():
    with pytest.raises(KeyValidationError):
        validate_table(make_table("good\tbye"))


def test_duplicate_key_reports_both_lines():
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("hello", "bye", "hello"))

    assert str(excinfo.value) == "Lines 2 and 4 have the same key."
    assert excinfo.value.rows == (2, 4)


def test_earliest_pair_is_reported():
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("a", "b", "b", "a"))

    assert excinfo.value.rows == (2, 5)


def test_first_later_duplicate_is_paired():
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("x", "y", "x", "x"))

    assert excinfo.value.rows == (2, 4)


def test_duplicates_are_case_sensitive():
    validate_table(make_table("Title", "title", "TITLE"))


def test_header_rows_may_repeat():
    validate_table(make_table("header", "hello", "HEADER", "Header", "bye"))


def test_empty_keys_are_left_to_the_emitter():
    validate_table(make_table("", "hello", ""))


def test_checks_run_in_row_order():
    # The duplicate starts before the bad key, so it is reported first
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("c", "a b", "c"))
    assert excinfo.value.rows == (2, 4)

    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("a b", "c", "c"))
    assert excinfo.value.rows == (2,)


def test_error_response_shape():
    with pytest.raises(KeyValidationError) as excinfo:
        validate_table(make_table("dup", "dup"))

    response = excinfo.value.to_dict()
    assert response["status"] == "error"
    assert response["error_type"] == "KEY_VALIDATION_ERROR"
    assert response["lines"] == [2, 3]
    assert "dup" in response["suggestion"]
