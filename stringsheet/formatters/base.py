#!/usr/bin/env python3
"""
Base classes for platform formatters.

Formatter is the abstract base class every platform implements: it turns one
(key, value) pair into a line of platform syntax and frames the lines of one
language into a complete resource document. Value resolution and the
normalization shared by all platforms live here too.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..table import Language, TranslationEntry, REFERENCE_LANGUAGE, is_header_key


# <html> ... </html> markers wrapping rich text, any letter case
HTML_OPEN = re.compile(r"<html>", re.IGNORECASE)
HTML_CLOSE = re.compile(r"</html>", re.IGNORECASE)

COPYRIGHT_MARKER = "(c)"
COPYRIGHT_SIGN = "©"


def resolve_value(
    entry: TranslationEntry,
    language: Language,
    reference_language: str = REFERENCE_LANGUAGE,
) -> Optional[str]:
    """
    Pick the raw value an entry contributes to one language's document.

    Header commentary is never translated: it always comes from the
    reference language.

    Returns:
        The value, or None if there is nothing to emit
    """
    if entry.is_header:
        value = entry.get(reference_language)
    else:
        value = entry.get(language.id)

    if not value:
        return None
    return value


def normalize_value(value: str) -> str:
    """
    Apply the escaping shared by every platform.

    Escapes double quotes, turns (c) into the copyright sign and drops
    newlines.
    """
    return (
        value.replace('"', '\\"')
        .replace(COPYRIGHT_MARKER, COPYRIGHT_SIGN)
        .replace("\r", "")
        .replace("\n", "")
    )


def strip_html_markers(value: str) -> str:
    """Remove <html>/</html> markers."""
    return HTML_CLOSE.sub("", HTML_OPEN.sub("", value))


class Formatter(ABC):
    """
    Abstract base class for platform-specific formatters.

    Formatters are stateless: the same (key, value) always gives the same
    line, whatever language is being emitted.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Platform name used in configuration."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """Usual file extensions of this platform's documents (without dot)."""
        pass

    @abstractmethod
    def format_comment(self, text: str) -> Optional[str]:
        """
        Format header commentary.

        Args:
            text: Header value, verbatim from the reference language

        Returns:
            Line(s) to emit, or None if the platform has no comments
        """
        pass

    @abstractmethod
    def format_string(self, key: str, value: str) -> str:
        """
        Format one translated string.

        Args:
            key: Translation key
            value: Value after normalize_value()

        Returns:
            Line to emit
        """
        pass

    @abstractmethod
    def frame(self, lines: list[str]) -> str:
        """
        Wrap formatted lines into a complete document.

        Args:
            lines: Formatted lines in source order

        Returns:
            Complete document content, ending with a newline
        """
        pass

    def format(self, key: str, value: str) -> Optional[str]:
        """
        Format a (key, raw value) pair into a line of platform syntax.

        Header commentary is passed through verbatim; every other value gets
        the shared normalization first.
        """
        if is_header_key(key):
            return self.format_comment(value)
        return self.format_string(key, normalize_value(value))


class FormatterRegistry:
    """Registry of available platform formatters."""

    _formatters: dict[str, type[Formatter]] = {}

    @classmethod
    def register(cls, formatter_class: type[Formatter]) -> None:
        """Register a formatter class."""
        formatter = formatter_class()
        cls._formatters[formatter.name.lower()] = formatter_class

    @classmethod
    def get_formatter(cls, name: str) -> Formatter:
        """Get formatter instance by platform name (case-insensitive)."""
        name_lower = (name or "").lower()
        if name_lower not in cls._formatters:
            available = ', '.join(cls._formatters.keys())
            raise ValueError(f"Unknown platform: {name}. Available: {available}")
        return cls._formatters[name_lower]()

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._formatters.keys())

    @classmethod
    def list_platforms(cls) -> list[dict[str, Any]]:
        """List all registered platforms with their extensions."""
        result = []
        for formatter_class in cls._formatters.values():
            formatter = formatter_class()
            result.append({
                'name': formatter.name,
                'extensions': formatter.file_extensions,
            })
        return result
