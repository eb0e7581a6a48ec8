#!/usr/bin/env python3
"""
paliscript CLI

Command-line interface for converting romanized Pali documents to other
scripts, and for searching them.

Usage:
    paliscript <source> [options]
    paliscript sutta.html --script thai
    paliscript https://example.org/dhammapada.html --script myanmar
    paliscript ./texts/ --script sinhala               # convert all files in directory
    paliscript sutta.html --find dhamma                # search instead of converting

Options:
    -s, --script NAME    Target script (default: DEVANAGARI)
    -o, --output DIR     Output directory (default: ./paliscript_output)
    --stdout             Print to stdout instead of saving files
    --scripts            Show all supported scripts
"""

import argparse
import logging
import os
import sys

from pydantic import ValidationError

from .config import Config
from .converters.html_converter import HtmlConverter
from .converters.web_converter import WebConverter
from .core import ScriptConverter
from .document import document_from_text, parse_document
from .host import ViewerHost
from .search import Direction, Selection
from .session import ViewerSession

logger = logging.getLogger(__name__)


class ConsoleHost(ViewerHost):
    """Prints search feedback to the terminal."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def report_message(self, message: str) -> None:
        print(f"  {message}", file=self.stream)

    def show_selection(self, selection: Selection) -> None:
        address = selection.address
        location = f"p{address.block}:{address.child}"
        if address.nested is not None:
            location += f".{address.nested}"
        print(f"  [{location} {selection.start}-{selection.end}] {selection.text}", file=self.stream)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paliscript",
        description=(
            "Romanized Pali script converter\n\n"
            "Converts HTML and text documents written in romanized Pali to\n"
            "Thai, Khmer, Myanmar, Sinhala or Devanagari script."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  paliscript sutta.html --script thai\n"
            "  paliscript ./texts/ --script khmer --no-numbers\n"
            "  paliscript sutta.html --stdout                   # print to terminal\n"
            "  paliscript sutta.html --find 'dukkh\\w+' --regex  # search\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files, directories, or URLs to convert",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "-s", "--script",
        help="Target script (default: DEVANAGARI)",
    )
    parser.add_argument(
        "--numbers",
        dest="numbers",
        action="store_true",
        default=None,
        help="Convert digits to native numerals (default)",
    )
    parser.add_argument(
        "--no-numbers",
        dest="numbers",
        action="store_false",
        help="Keep ASCII digits",
    )
    parser.add_argument(
        "--alt-glyphs",
        action="store_true",
        help="Use the alternate glyph set (Thai)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./paliscript_output)",
    )
    parser.add_argument(
        "--suffix",
        default=None,
        help="Suffix added to output file names (default: _converted)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print converted text to stdout instead of saving to files",
    )
    parser.add_argument(
        "--find",
        metavar="QUERY",
        help="Search the romanized sources for QUERY instead of converting",
    )
    parser.add_argument(
        "--regex",
        action="store_true",
        help="Treat the --find query as a regular expression",
    )
    parser.add_argument(
        "--whole-word",
        action="store_true",
        help="Only match whole words (implies --regex)",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Match case exactly",
    )
    parser.add_argument(
        "--scripts",
        action="store_true",
        help="Show all supported scripts and formats, then exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from a config file and command-line overrides."""
    config = Config.from_yaml(args.config) if args.config else Config()

    if args.script:
        config.conversion.script = args.script
    if args.numbers is not None:
        config.conversion.localize_numbers = args.numbers
    if args.alt_glyphs:
        config.conversion.alternate_glyphs = True
    if args.output:
        config.output.output_dir = args.output
    if args.suffix is not None:
        config.output.suffix = args.suffix

    return config


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.scripts:
        _show_scripts()
        return 0

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files, directories, or URLs.")
        return 1

    try:
        config = build_config(args)
    except (ValidationError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.find:
        return _run_search(args)

    engine = ScriptConverter(config)
    save = not args.stdout
    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            if os.path.isdir(source):
                report = engine.convert_directory(source, save=save)
                success_count += report.converted
                error_count += report.failed
                for name, error in report.failures.items():
                    print(f"[ERROR] {name}: {error}", file=sys.stderr)
                continue
            text = engine.convert(source, save=save)
            if args.stdout:
                print(text)
            success_count += 1
        except Exception as e:
            logger.debug("Conversion of %s failed", source, exc_info=True)
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print(f"Done: {success_count} converted, {error_count} errors", file=sys.stderr)
    if save and success_count:
        print(f"Output: {engine.output_dir}", file=sys.stderr)
    return 1 if error_count else 0


def _run_search(args: argparse.Namespace) -> int:
    """Search each source and print every match."""
    regex = args.regex or args.whole_word
    error_count = 0

    for source in args.sources:
        try:
            session = ViewerSession(_load_document(source), host=ConsoleHost())
        except Exception as e:
            logger.debug("Loading %s failed", source, exc_info=True)
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        print(source)
        if regex:
            found = session.search_regex(args.find, args.whole_word, args.case_sensitive)
        else:
            found = session.search(args.find, args.case_sensitive)
        if found:
            for _ in range(session.results.count - 1):
                session.find_next(Direction.FORWARD)

    return 1 if error_count else 0


def _load_document(source: str):
    if WebConverter.can_handle(source):
        text, content_type = WebConverter.fetch(source)
        if content_type.startswith("text/plain"):
            return document_from_text(text)
        return parse_document(text)
    if not os.path.isfile(source):
        raise FileNotFoundError(f"File not found: {source}")
    with open(source, "r", encoding="utf-8", errors="replace") as f:
        content = f.read()
    if HtmlConverter.can_handle(source):
        return parse_document(content)
    return document_from_text(content)


def _show_scripts():
    """Display all supported scripts and formats."""
    print("\nSupported Scripts:")
    print("-" * 40)
    for name in ScriptConverter.supported_scripts():
        print(f"    {name}")
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in ScriptConverter.supported_formats().items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
