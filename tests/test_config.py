#!/usr/bin/env python3
"""
Tests for configuration loading (YAML, JSON and tagged text).
"""

import json
from pathlib import Path

import pytest

from stringsheet.config import (
    CompileConfig,
    config_from_dict,
    load_config,
    parse_tagged_config,
)
from stringsheet.diagnostics import ConfigurationError
from stringsheet.table import Language


YAML_CONFIG = """
source: https://example.com/sheet.csv
platform: Android
reference_language: en
languages:
  - id: en
    path: res/values/strings.xml
  - id: fr
    path: res/values-fr/strings.xml
"""


def test_load_yaml(tmp_path):
    config_file = tmp_path / "stringsheet.yaml"
    config_file.write_text(YAML_CONFIG, encoding="utf-8")

    config = load_config(str(config_file))

    assert config.source == "https://example.com/sheet.csv"
    assert config.platform == "Android"
    assert [lang.id for lang in config.languages] == ["en", "fr"]
    assert config.languages[1].path == str(tmp_path / "res/values-fr/strings.xml")


def test_load_json(tmp_path):
    config_file = tmp_path / "stringsheet.json"
    config_file.write_text(json.dumps({
        "url": "sheet.csv",
        "platform": "ios",
        "languages": {"en": "en.strings", "fr": "fr.strings"},
    }), encoding="utf-8")

    config = load_config(str(config_file))

    assert config.source == "sheet.csv"
    assert [(lang.id, Path(lang.path).name) for lang in config.languages] == [
        ("en", "en.strings"),
        ("fr", "fr.strings"),
    ]


def test_load_tagged_text(tmp_path):
    config_file = tmp_path / "config.txt"
    config_file.write_text(
        "URL: https://example.com/sheet.csv\n"
        "Platform: iOS\n"
        "Language: en, en.lproj/Localizable.strings\n"
        "Language: fr, fr.lproj/Localizable.strings\n"
        "Reference: fr\n"
        "Something else\n",
        encoding="utf-8",
    )

    config = load_config(str(config_file))

    assert config.source == "https://example.com/sheet.csv"
    assert config.platform == "iOS"
    assert config.reference_language == "fr"
    assert config.languages[0].path == str(tmp_path / "en.lproj/Localizable.strings")


def test_tagged_language_needs_two_parts():
    with pytest.raises(ConfigurationError, match="too few or too many"):
        parse_tagged_config("URL: a.csv\nPlatform: iOS\nLanguage: en\n")


def test_absolute_paths_are_kept(tmp_path):
    target = tmp_path / "out" / "en.xml"
    config = config_from_dict(
        {"source": "a.csv", "platform": "android", "languages": [{"id": "en", "path": str(target)}]},
        base_dir=Path("/somewhere/else"),
    )

    assert config.languages[0].path == str(target)


def test_missing_source():
    with pytest.raises(ConfigurationError, match="Source"):
        config_from_dict({"platform": "android", "languages": {"en": "en.xml"}})


def test_missing_platform():
    with pytest.raises(ConfigurationError, match="platform"):
        config_from_dict({"source": "a.csv", "languages": {"en": "en.xml"}})


def test_unknown_platform():
    with pytest.raises(ConfigurationError, match="Platform must be one of"):
        config_from_dict({"source": "a.csv", "platform": "symbian", "languages": {"en": "en.xml"}})


def test_no_languages():
    with pytest.raises(ConfigurationError, match="at least one language"):
        config_from_dict({"source": "a.csv", "platform": "ios"})


def test_language_without_path():
    with pytest.raises(ConfigurationError, match="'id' and a 'path'"):
        config_from_dict({"source": "a.csv", "platform": "ios", "languages": [{"id": "en"}]})


def test_duplicate_languages():
    config = CompileConfig(
        source="a.csv",
        platform="ios",
        languages=[Language("en", "a.strings"), Language("en", "b.strings")],
    )

    with pytest.raises(ConfigurationError, match="more than once"):
        config.validate()


def test_skip_validation(tmp_path):
    config_file = tmp_path / "partial.yaml"
    config_file.write_text("platform: web\n", encoding="utf-8")

    config = load_config(str(config_file), validate=False)

    assert config.platform == "web"
    assert config.source == ""


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("languages: [en\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid config file"):
        load_config(str(config_file))


def test_top_level_must_be_mapping(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- en\n- fr\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(str(config_file))


def test_default_encoding_strips_byte_order_mark(tmp_path):
    config_file = tmp_path / "stringsheet.yaml"
    config_file.write_text("source: a.csv\nplatform: ios\nlanguages:\n  en: en.strings\n", encoding="utf-8")

    config = load_config(str(config_file))

    assert config.encoding == "utf-8-sig"
    assert b"\xef\xbb\xbfkey".decode(config.encoding) == "key"
