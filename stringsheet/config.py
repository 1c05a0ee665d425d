#!/usr/bin/env python3
"""
Run configuration loading.

Two formats are accepted.

YAML (or JSON, which YAML reads as well):
    source: https://docs.google.com/spreadsheets/d/<id>/export?format=csv
    platform: android
    reference_language: en
    languages:
      - id: en
        path: app/src/main/res/values/strings.xml
      - id: fr
        path: app/src/main/res/values-fr/strings.xml

Tagged text, one setting per line:
    URL: https://docs.google.com/spreadsheets/d/<id>/export?format=csv
    Platform: iOS
    Language: en, Base.lproj/Localizable.strings
    Language: fr, fr.lproj/Localizable.strings
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .diagnostics import ConfigurationError
from .formatters import FormatterRegistry
from .table import Language, REFERENCE_LANGUAGE, check_languages


YAML_EXTENSIONS = {".yaml", ".yml", ".json"}

# Tagged text prefixes
URL_TAG = "URL:"
PLATFORM_TAG = "Platform:"
LANGUAGE_TAG = "Language:"
REFERENCE_TAG = "Reference:"


@dataclass
class CompileConfig:
    """
    Settings for one compiler run.

    Attributes:
        source: URL or path of the sheet CSV export
        platform: Formatter name (android, ios, web)
        languages: Declared output languages
        reference_language: Language header commentary is taken from
        encoding: Encoding of the source bytes
    """
    source: str
    platform: str
    languages: list[Language] = field(default_factory=list)
    reference_language: str = REFERENCE_LANGUAGE
    encoding: str = "utf-8-sig"

    def validate(self) -> None:
        """
        Check the configuration is complete.

        Raises:
            ConfigurationError: On a missing source, unknown platform or bad
                language list
        """
        if not self.source:
            raise ConfigurationError(
                "Source URL cannot be empty",
                suggestion="Set 'source' to the CSV export URL or file path",
            )
        if not self.platform:
            raise ConfigurationError(
                "You need to input a platform",
                suggestion=f"Use one of: {', '.join(FormatterRegistry.names())}",
            )
        if self.platform.lower() not in FormatterRegistry.names():
            raise ConfigurationError(
                f"Platform must be one of {', '.join(FormatterRegistry.names())}, "
                f"got '{self.platform}'",
            )
        check_languages(self.languages)


def _resolve_path(path: str, base_dir: Optional[Path]) -> str:
    candidate = Path(path).expanduser()
    if base_dir is not None and not candidate.is_absolute():
        candidate = base_dir / candidate
    return str(candidate)


def _parse_languages(raw: Any, base_dir: Optional[Path]) -> list[Language]:
    """Accept either a list of {id, path} mappings or a {id: path} mapping."""
    if raw is None:
        return []

    if isinstance(raw, dict):
        raw = [{"id": key, "path": value} for key, value in raw.items()]

    if not isinstance(raw, list):
        raise ConfigurationError("'languages' must be a list or a mapping")

    languages = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("id") or not item.get("path"):
            raise ConfigurationError(
                f"Each language needs an 'id' and a 'path', got: {item!r}",
            )
        languages.append(Language(
            id=str(item["id"]).strip(),
            path=_resolve_path(str(item["path"]).strip(), base_dir),
        ))
    return languages


def config_from_dict(
    data: dict,
    base_dir: Optional[Path] = None,
    validate: bool = True,
) -> CompileConfig:
    """
    Build a CompileConfig from parsed YAML/JSON data.

    Args:
        data: Parsed mapping
        base_dir: Directory relative output paths are resolved against
        validate: Check the result is complete

    Returns:
        CompileConfig
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping at the top level")

    # "url" is accepted as an alias, matching the tagged format
    config = CompileConfig(
        source=str(data.get("source") or data.get("url") or "").strip(),
        platform=str(data.get("platform") or "").strip(),
        languages=_parse_languages(data.get("languages"), base_dir),
        reference_language=str(data.get("reference_language") or REFERENCE_LANGUAGE).strip(),
        encoding=str(data.get("encoding") or "utf-8-sig"),
    )
    if validate:
        config.validate()
    return config


def parse_tagged_config(
    content: str,
    base_dir: Optional[Path] = None,
    validate: bool = True,
) -> CompileConfig:
    """
    Parse the tagged `Key: value` text format.

    Unknown lines are ignored.

    Args:
        content: Config file content
        base_dir: Directory relative output paths are resolved against
        validate: Check the result is complete

    Returns:
        CompileConfig
    """
    source = ""
    platform = ""
    reference = REFERENCE_LANGUAGE
    languages = []

    for line in content.splitlines():
        line = line.strip()
        if line.startswith(URL_TAG):
            source = line[len(URL_TAG):].strip()
        elif line.startswith(PLATFORM_TAG):
            platform = line[len(PLATFORM_TAG):].strip()
        elif line.startswith(REFERENCE_TAG):
            reference = line[len(REFERENCE_TAG):].strip()
        elif line.startswith(LANGUAGE_TAG):
            info = [part.strip() for part in line[len(LANGUAGE_TAG):].split(",")]
            if len(info) != 2 or not all(info):
                raise ConfigurationError(
                    "The following format has too few or too many arguments "
                    f"for a language: {line[len(LANGUAGE_TAG):].strip()}",
                    suggestion="Use 'Language: <id>, <output path>'",
                )
            languages.append(Language(id=info[0], path=_resolve_path(info[1], base_dir)))

    config = CompileConfig(
        source=source,
        platform=platform,
        languages=languages,
        reference_language=reference,
    )
    if validate:
        config.validate()
    return config


def load_config(path: str, validate: bool = True) -> CompileConfig:
    """
    Load a config file, picking the format from its extension.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}")

    base_dir = config_path.parent

    if config_path.suffix.lower() in YAML_EXTENSIONS:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}")
        return config_from_dict(data or {}, base_dir, validate)

    return parse_tagged_config(content, base_dir, validate)
