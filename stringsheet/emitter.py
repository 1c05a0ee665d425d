#!/usr/bin/env python3
"""
Emitter: turns the translation table into one resource document per language.

Formatting failures are isolated per entry: the entry is reported and skipped,
the rest of the document is still emitted. Writing is done per language too,
so a destination that cannot be written does not affect the others.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .diagnostics import DiagnosticLog
from .formatters import Formatter, resolve_value
from .table import Language, TranslationTable, REFERENCE_LANGUAGE


OUTPUT_ENCODING = "utf-8"


@dataclass
class CompiledDocument:
    """
    Formatted lines for one language.

    Attributes:
        language: Language the document was compiled for
        lines: Formatted lines in source row order
        content: Framed document content
    """
    language: Language
    lines: list[str] = field(default_factory=list)
    content: str = ""

    @property
    def path(self) -> Path:
        return Path(self.language.path)

    def to_dict(self) -> dict:
        return {
            "language": self.language.id,
            "path": str(self.path),
            "lines": len(self.lines),
        }


class Emitter:
    """Drives a Formatter over a TranslationTable."""

    def __init__(
        self,
        formatter: Formatter,
        log: DiagnosticLog,
        reference_language: str = REFERENCE_LANGUAGE,
    ):
        """
        Initialize emitter.

        Args:
            formatter: Platform formatter
            log: Receives warnings and per-row errors
            reference_language: Language header commentary is taken from
        """
        self.formatter = formatter
        self.log = log
        self.reference_language = reference_language

    def emit(self, table: TranslationTable, language: Language) -> CompiledDocument:
        """
        Compile the document for one language.

        Args:
            table: Validated translation table
            language: Target language

        Returns:
            CompiledDocument with framed content
        """
        document = CompiledDocument(language=language)

        for entry in table:
            # No key means nothing to name the string with
            if not entry.key:
                self.log.warning(
                    "MISSING_KEY",
                    f"Line {entry.row} has no key, and therefore cannot be parsed",
                    row=entry.row,
                )
                continue

            try:
                value = resolve_value(entry, language, self.reference_language)
                if value is None:
                    continue
                line = self.formatter.format(entry.key, value)
            except Exception as e:
                self.log.error(
                    "FORMAT_ERROR",
                    f"Error on Line {entry.row}: {type(e).__name__}: {e}",
                    row=entry.row,
                )
                continue

            if line is not None:
                document.lines.append(line)

        document.content = self.formatter.frame(document.lines)
        return document

    def check_reference(self, table: TranslationTable) -> None:
        """Warn once when header rows have no reference language to come from."""
        if any(language.id == self.reference_language for language in table.languages):
            return
        headers = [entry for entry in table if entry.is_header]
        if headers:
            self.log.warning(
                "MISSING_REFERENCE",
                f"Reference language {self.reference_language} is not declared, "
                f"so {len(headers)} header rows will not be emitted",
                row=headers[0].row,
            )

    def emit_all(self, table: TranslationTable) -> list[CompiledDocument]:
        """Compile one document per table language, in declared order."""
        self.check_reference(table)
        return [self.emit(table, language) for language in table.languages]

    def write(self, document: CompiledDocument) -> Optional[Path]:
        """
        Write a document to its language's destination.

        Returns:
            Written path, or None if writing failed (the failure is logged)
        """
        path = document.path
        try:
            if path.parent and not path.parent.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(document.content, encoding=OUTPUT_ENCODING)
        except OSError as e:
            self.log.error(
                "WRITE_ERROR",
                f"Could not write {document.language.id} to file {path}: {e}",
                suggestion="Check that the output directory exists and is writable",
            )
            return None
        return path
