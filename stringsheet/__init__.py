"""
stringsheet - translation spreadsheet to app string resources compiler

Compiles one sheet (a row per translation key, a column per language) into
one localized resource file per language for Android (strings.xml), iOS
(.strings) or the web (JSON).

Quick start:
    stringsheet compile --config stringsheet.yaml
    stringsheet check --input strings.csv --platform ios --lang en=en.strings
"""

__version__ = "1.0.0"

from .compiler import StringCompiler, compile_config, compile_documents
from .config import CompileConfig, load_config
from .diagnostics import (
    CompileError,
    ConfigurationError,
    DecodeError,
    Diagnostic,
    DiagnosticLog,
    KeyValidationError,
    SourceError,
)
from .table import Language, TranslationEntry, TranslationTable

__all__ = [
    "StringCompiler",
    "compile_config",
    "compile_documents",
    "CompileConfig",
    "load_config",
    "CompileError",
    "ConfigurationError",
    "DecodeError",
    "Diagnostic",
    "DiagnosticLog",
    "KeyValidationError",
    "SourceError",
    "Language",
    "TranslationEntry",
    "TranslationTable",
]
