#!/usr/bin/env python3
"""
Diagnostics and error types for the string compiler.

Every warning or error the compiler reports is a Diagnostic. Non-fatal ones
are collected in a DiagnosticLog; fatal ones are raised as a CompileError
subclass carrying the Diagnostic, and stop the whole run.
"""

from dataclasses import dataclass, field
from typing import Optional


WARNING = "warning"
ERROR = "error"


def row_number(index: int) -> int:
    """
    Convert a 0-based data row index to the line number users see.

    +2 accounts for the header row and for spreadsheets numbering from 1.
    """
    return index + 2


@dataclass
class Diagnostic:
    """Structured diagnostic for agent-friendly reporting."""
    level: str
    code: str
    message: str
    row: Optional[int] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "level": self.level,
            "type": self.code,
            "message": self.message,
        }
        if self.row is not None:
            data["line"] = self.row
        if self.suggestion:
            data["fix"] = self.suggestion
        return data

    def __str__(self) -> str:
        prefix = "Warning" if self.level == WARNING else "Error"
        return f"{prefix}: {self.message}"


@dataclass
class DiagnosticLog:
    """Ordered collection of the diagnostics produced during one run."""
    entries: list[Diagnostic] = field(default_factory=list)

    def warning(self, code: str, message: str, row: Optional[int] = None) -> Diagnostic:
        diagnostic = Diagnostic(WARNING, code, message, row)
        self.entries.append(diagnostic)
        return diagnostic

    def error(
        self,
        code: str,
        message: str,
        row: Optional[int] = None,
        suggestion: Optional[str] = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(ERROR, code, message, row, suggestion)
        self.entries.append(diagnostic)
        return diagnostic

    def add(self, diagnostic: Diagnostic) -> None:
        self.entries.append(diagnostic)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.level == WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.level == ERROR]

    def to_list(self) -> list[dict]:
        return [d.to_dict() for d in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


class CompileError(Exception):
    """
    Base class for fatal compiler errors.

    Attributes:
        diagnostic: The error-level Diagnostic describing the failure
    """

    code = "COMPILE_ERROR"
    default_suggestion: Optional[str] = None

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        suggestion: Optional[str] = None,
        rows: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.rows = rows or ((row,) if row is not None else ())
        self.diagnostic = Diagnostic(
            ERROR,
            self.code,
            message,
            row,
            suggestion or self.default_suggestion,
        )

    def to_dict(self) -> dict:
        """Error response in the CLI's JSON shape."""
        data = {
            "status": "error",
            "error_type": self.code,
            "error": str(self),
        }
        if self.rows:
            data["lines"] = list(self.rows)
        if self.diagnostic.suggestion:
            data["suggestion"] = self.diagnostic.suggestion
        return data


class ConfigurationError(CompileError):
    """Run configuration is missing or inconsistent with the source document."""

    code = "CONFIGURATION_ERROR"


class DecodeError(CompileError):
    """The tabular source could not be decoded."""

    code = "DECODE_ERROR"
    default_suggestion = "Export the sheet again as comma-separated values (CSV)"


class KeyValidationError(CompileError):
    """A translation key breaks the key rules (whitespace or duplicate)."""

    code = "KEY_VALIDATION_ERROR"


class SourceError(CompileError):
    """The source document could not be retrieved."""

    code = "SOURCE_ERROR"
