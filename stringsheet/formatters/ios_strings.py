#!/usr/bin/env python3
"""
iOS .strings formatter.

Emits Apple .strings files used in iOS, macOS, watchOS, and tvOS
applications.
"""

from typing import Optional

from .base import Formatter, strip_html_markers


class IosStringsFormatter(Formatter):
    """
    Formatter for iOS/macOS .strings files.

    Output structure:
    ```

    /*  Main screen */
    "app_name" = "My App";
    "greeting" = "Hello, %@!";
    ```

    printf-style %s placeholders become Objective-C %@; the file has no
    enclosing tags.
    """

    @property
    def name(self) -> str:
        return "ios"

    @property
    def file_extensions(self) -> list[str]:
        return ["strings"]

    def convert(self, value: str) -> str:
        """Translate placeholders and drop <html> markers."""
        value = value.replace("%s", "%@").replace("$s", "$@")
        return strip_html_markers(value)

    def format_comment(self, text: str) -> Optional[str]:
        return f"\n/*  {text} */"

    def format_string(self, key: str, value: str) -> str:
        return f'"{key}" = "{self.convert(value)}";'

    def frame(self, lines: list[str]) -> str:
        if not lines:
            return ""
        return "\n".join(lines) + "\n"
