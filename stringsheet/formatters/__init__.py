#!/usr/bin/env python3
"""
Platform formatters for localized string resources.

Supported platforms:
- android: Android strings.xml
- ios: Apple .strings files
- web: flat JSON string tables
"""

from .base import (
    Formatter,
    FormatterRegistry,
    normalize_value,
    resolve_value,
)
from .android_xml import AndroidXmlFormatter
from .ios_strings import IosStringsFormatter
from .web_json import WebJsonFormatter

# Register formatters (order is the order `platforms` lists them in)
FormatterRegistry.register(AndroidXmlFormatter)
FormatterRegistry.register(IosStringsFormatter)
FormatterRegistry.register(WebJsonFormatter)

__all__ = [
    'Formatter',
    'FormatterRegistry',
    'normalize_value',
    'resolve_value',
    'AndroidXmlFormatter',
    'IosStringsFormatter',
    'WebJsonFormatter',
]
