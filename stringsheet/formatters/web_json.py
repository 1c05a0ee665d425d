#!/usr/bin/env python3
"""
Web JSON formatter.

Emits a flat JSON object of key -> string for web front ends.
"""

import json
from typing import Optional

from .base import Formatter, strip_html_markers


class WebJsonFormatter(Formatter):
    """
    Formatter for flat JSON string tables.

    Output structure:
    ```json
    {
        "app_name": "My App",
        "greeting": "Hello, {name}!"
    }
    ```

    JSON has no comments, so header rows produce nothing.
    """

    @property
    def name(self) -> str:
        return "web"

    @property
    def file_extensions(self) -> list[str]:
        return ["json"]

    def format_comment(self, text: str) -> Optional[str]:
        return None

    def format_string(self, key: str, value: str) -> str:
        # json.dumps does its own escaping, so undo the shared quote escape
        value = strip_html_markers(value.replace('\\"', '"'))
        return (
            f"    {json.dumps(key, ensure_ascii=False)}: "
            f"{json.dumps(value, ensure_ascii=False)}"
        )

    def frame(self, lines: list[str]) -> str:
        if not lines:
            return "{\n}\n"
        return "{\n" + ",\n".join(lines) + "\n}\n"
