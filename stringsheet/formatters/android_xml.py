#!/usr/bin/env python3
"""
Android XML strings.xml formatter.

Emits Android resource files: one <string> element per key, header commentary
as XML comments.
"""

from typing import Optional

from .base import Formatter, HTML_OPEN, HTML_CLOSE


XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
RESOURCES_OPEN = "<resources>"
RESOURCES_CLOSE = "</resources>"

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"
ELLIPSIS_ENTITY = "&#8230;"

INDENT = "    "


class AndroidXmlFormatter(Formatter):
    """
    Formatter for Android strings.xml resource files.

    Output structure:
    ```xml
    <?xml version="1.0" encoding="utf-8"?>
    <resources>

        <!-- Main screen -->
        <string name="app_name">My App</string>
        <string name="terms"><![CDATA[Read the <b>terms</b>]]></string>
    </resources>
    ```
    """

    @property
    def name(self) -> str:
        return "android"

    @property
    def file_extensions(self) -> list[str]:
        return ["xml"]

    def escape(self, value: str) -> str:
        """Escape a normalized value for an Android <string> element."""
        value = (
            value.replace("&", "&amp;")
            .replace("'", "\\'")
            .replace("@", "\\@")
            .replace("...", ELLIPSIS_ENTITY)
        )
        # <html> marks content Android should keep as raw markup
        value = HTML_OPEN.sub(CDATA_OPEN, value)
        return HTML_CLOSE.sub(CDATA_CLOSE, value)

    def format_comment(self, text: str) -> Optional[str]:
        # Leading newline leaves a blank line before each section
        return f"\n{INDENT}<!-- {text} -->"

    def format_string(self, key: str, value: str) -> str:
        return f'{INDENT}<string name="{key}">{self.escape(value)}</string>'

    def frame(self, lines: list[str]) -> str:
        document = [XML_DECLARATION, RESOURCES_OPEN, *lines, RESOURCES_CLOSE]
        return "\n".join(document) + "\n"
