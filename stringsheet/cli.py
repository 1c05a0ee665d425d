#!/usr/bin/env python3
"""
stringsheet - compile a translation spreadsheet into app string resources

Reads a sheet exported as CSV (one row per key, one column per language) and
writes one resource file per language.

Supported Platforms:
    - android (strings.xml)
    - ios (.strings)
    - web (flat JSON)

Commands:
    compile   - Compile and write every language's document
    check     - Run decoding and validation, report what would be written
    platforms - List supported platforms

Example:
    stringsheet compile --config stringsheet.yaml

    stringsheet compile --input strings.csv --platform ios \\
        --lang en=en.lproj/Localizable.strings \\
        --lang fr=fr.lproj/Localizable.strings
"""

import argparse
import json
import sys

from .compiler import StringCompiler
from .config import CompileConfig, load_config
from .diagnostics import CompileError, ConfigurationError
from .formatters import FormatterRegistry
from .table import Language, REFERENCE_LANGUAGE


def parse_language_option(value: str) -> Language:
    """Parse an `ID=PATH` --lang option."""
    if "=" not in value:
        raise ConfigurationError(
            f"Invalid --lang value: '{value}'",
            suggestion="Use --lang ID=PATH, e.g. --lang fr=values-fr/strings.xml",
        )
    language_id, path = value.split("=", 1)
    if not language_id.strip() or not path.strip():
        raise ConfigurationError(f"Invalid --lang value: '{value}'")
    return Language(id=language_id.strip(), path=path.strip())


def build_config(args) -> CompileConfig:
    """Combine the config file (if any) with command line overrides."""
    if args.config:
        config = load_config(args.config, validate=False)
    else:
        config = CompileConfig(source="", platform="")

    if args.input:
        config.source = args.input
    if args.platform:
        config.platform = args.platform
    if args.lang:
        config.languages = [parse_language_option(value) for value in args.lang]
    if args.reference:
        config.reference_language = args.reference

    config.validate()
    return config


def cmd_compile(args) -> dict:
    """Compile the sheet and write documents."""
    config = build_config(args)
    compiler = StringCompiler.from_config(config)
    return compiler.run(config.source, write=True)


def cmd_check(args) -> dict:
    """Compile the sheet without writing anything."""
    config = build_config(args)
    compiler = StringCompiler.from_config(config)
    return compiler.run(config.source, write=False)


def cmd_platforms(args) -> dict:
    """List supported platforms."""
    platforms = FormatterRegistry.list_platforms()
    return {
        "status": "ok",
        "platforms": platforms,
        "summary": f"{len(platforms)} platforms supported: {', '.join(p['name'] for p in platforms)}",
    }


def add_compile_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", "-c", help="Config file (.yaml, .yml, .json or tagged text)")
    parser.add_argument("--input", "-i", help="CSV export URL or path (overrides config)")
    parser.add_argument("--platform", "-p", choices=FormatterRegistry.names(),
                        type=str.lower, help="Target platform (overrides config)")
    parser.add_argument("--lang", "-l", action="append",
                        help="Output language as ID=PATH; repeat for each language (overrides config)")
    parser.add_argument("--reference", "-r",
                        help=f"Language header comments are taken from (default: {REFERENCE_LANGUAGE})")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="stringsheet",
        description="stringsheet - compile a translation spreadsheet into app string resources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Sheet layout (CSV export):
  key,en,fr
  header,Main screen,
  app_name,My App,Mon App
  greeting,"Hello, %s!","Bonjour, %s !"

Examples:
  # Compile using a config file
  stringsheet compile --config stringsheet.yaml

  # Compile without a config file
  stringsheet compile --input strings.csv --platform android \\
      --lang en=res/values/strings.xml --lang fr=res/values-fr/strings.xml

  # Validate only
  stringsheet check --config stringsheet.yaml

  # List supported platforms
  stringsheet platforms
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compile_parser = subparsers.add_parser("compile", help="Compile and write documents")
    add_compile_arguments(compile_parser)

    check_parser = subparsers.add_parser("check", help="Validate without writing")
    add_compile_arguments(check_parser)

    subparsers.add_parser("platforms", help="List supported platforms")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "compile":
            result = cmd_compile(args)
        elif args.command == "check":
            result = cmd_check(args)
        else:
            result = cmd_platforms(args)
    except CompileError as e:
        print(json.dumps(e.to_dict(), indent=2, ensure_ascii=False), file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result["status"] != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
