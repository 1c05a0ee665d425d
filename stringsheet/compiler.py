#!/usr/bin/env python3
"""
String compiler pipeline.

Runs the stages strictly in order:

    decode -> resolve language columns -> build table -> validate -> emit

Any fatal error (configuration, decoding, key validation) stops the run before
a single file is written. Once validation has passed, each language is emitted
and written in declared order.
"""

from typing import Iterable, Union

from .config import CompileConfig
from .csv_decoder import decode_table
from .diagnostics import CompileError, ConfigurationError, DiagnosticLog
from .emitter import CompiledDocument, Emitter
from .formatters import Formatter, FormatterRegistry
from .source import read_source
from .table import (
    Language,
    TranslationTable,
    REFERENCE_LANGUAGE,
    build_table,
    check_languages,
    resolve_columns,
)
from .validator import validate_table


def get_formatter(platform: str) -> Formatter:
    """Look up the formatter for a platform name."""
    try:
        return FormatterRegistry.get_formatter(platform)
    except ValueError as e:
        raise ConfigurationError(str(e))


def compile_table(
    header: list[str],
    rows: Iterable[list[str]],
    languages: list[Language],
    log: DiagnosticLog,
) -> TranslationTable:
    """
    Resolve columns, build and validate the translation table.

    Raises:
        ConfigurationError: If a language has no column
        DecodeError: If a row cannot be decoded
        KeyValidationError: On a key containing whitespace or a duplicate key
    """
    resolve_columns(header, languages)
    table = build_table(rows, languages, log)
    validate_table(table)
    return table


def compile_documents(
    header: list[str],
    rows: Iterable[list[str]],
    languages: list[Language],
    formatter: Formatter,
    log: DiagnosticLog,
    reference_language: str = REFERENCE_LANGUAGE,
) -> list[CompiledDocument]:
    """
    Compile already-decoded rows into one document per language, in memory.

    Args:
        header: Sheet header row
        rows: Decoded data rows
        languages: Declared languages
        formatter: Platform formatter
        log: Receives warnings and per-row errors
        reference_language: Language header commentary is taken from

    Returns:
        One CompiledDocument per declared language
    """
    table = compile_table(header, rows, languages, log)
    return Emitter(formatter, log, reference_language).emit_all(table)


class StringCompiler:
    """
    Compiles a sheet export into platform resource files.

    Handles:
    - Decoding the CSV export
    - Binding declared languages to sheet columns
    - Validating keys before anything is written
    - Emitting and writing one document per language
    """

    def __init__(
        self,
        platform: str,
        languages: list[Language],
        reference_language: str = REFERENCE_LANGUAGE,
        encoding: str = "utf-8-sig",
    ):
        """
        Initialize the compiler.

        Args:
            platform: Formatter name (android, ios, web)
            languages: Declared output languages
            reference_language: Language header commentary is taken from
            encoding: Encoding of the source bytes

        Raises:
            ConfigurationError: On an unknown platform or bad language list
        """
        self.formatter = get_formatter(platform)
        check_languages(languages)
        self.languages = languages
        self.reference_language = reference_language
        self.encoding = encoding
        self.log = DiagnosticLog()

    @classmethod
    def from_config(cls, config: CompileConfig) -> "StringCompiler":
        return cls(
            platform=config.platform,
            languages=config.languages,
            reference_language=config.reference_language,
            encoding=config.encoding,
        )

    def compile(self, content: Union[str, bytes], write: bool = True) -> dict:
        """
        Compile sheet content and write every language's document.

        Args:
            content: Raw CSV bytes or text
            write: Write documents to their paths (False for a dry run)

        Returns:
            Result dictionary with status, documents and diagnostics
        """
        self.log = DiagnosticLog()

        try:
            decoded = decode_table(content, encoding=self.encoding)
            table = compile_table(decoded.header, decoded.rows, self.languages, self.log)
        except CompileError as e:
            return self._error_response(e)

        emitter = Emitter(self.formatter, self.log, self.reference_language)
        emitter.check_reference(table)
        documents = []
        failed = []

        for language in table.languages:
            document = emitter.emit(table, language)
            info = document.to_dict()
            if write:
                info["written"] = emitter.write(document) is not None
                if not info["written"]:
                    failed.append(language.id)
            documents.append(info)

        return self._make_response(table, documents, failed, write)

    def run(self, source: str, write: bool = True) -> dict:
        """Read the source location, then compile it."""
        self.log = DiagnosticLog()
        try:
            content = read_source(source)
        except CompileError as e:
            return self._error_response(e)
        return self.compile(content, write=write)

    def _error_response(self, error: CompileError) -> dict:
        self.log.add(error.diagnostic)
        response = error.to_dict()
        response["platform"] = self.formatter.name
        response["diagnostics"] = self.log.to_list()
        response["summary"] = f"Nothing written. {error.diagnostic}"
        return response

    def _make_response(
        self,
        table: TranslationTable,
        documents: list[dict],
        failed: list[str],
        write: bool,
    ) -> dict:
        if failed:
            status = "partial"
            summary = (
                f"Could not write {len(failed)} of {len(documents)} documents "
                f"({', '.join(failed)})."
            )
        elif write:
            status = "ok"
            summary = f"Wrote {len(documents)} {self.formatter.name} documents from {len(table)} entries."
        else:
            status = "ok"
            summary = f"{len(documents)} {self.formatter.name} documents would be written from {len(table)} entries."

        return {
            "status": status,
            "platform": self.formatter.name,
            "stats": {
                "entries": len(table),
                "languages": len(documents),
                "warnings": len(self.log.warnings),
                "errors": len(self.log.errors),
            },
            "documents": documents,
            "diagnostics": self.log.to_list(),
            "summary": summary,
        }


def compile_config(config: CompileConfig, write: bool = True) -> dict:
    """Run the compiler for a loaded configuration."""
    return StringCompiler.from_config(config).run(config.source, write=write)

