"""Command-line interface for the dompath library.

Two commands are provided: ``locate`` prints the path of elements in an HTML
document, ``hash`` prints identifier-safe tokens for values.

Examples
--------
Locate every element of a page::

    $ dompath locate page.html

Locate elements by tag or id::

    $ dompath locate page.html --tag td
    $ dompath locate page.html --id main

Hash values (or stdin lines when no value is given)::

    $ dompath hash "some value" another
    $ cat names.txt | dompath hash

Use a configuration file::

    $ dompath --config .dompath.toml locate page.html

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from importlib import metadata
from typing import Any, Callable, Dict, Optional

from dompath.cli.config import load_config_with_priority
from dompath.cli.output import print_rows, should_use_rich_output
from dompath.constants import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL
from dompath.dom import Document, Element
from dompath.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    ValidationError,
)
from dompath.hashing import simple_hash
from dompath.locator import get_xpath
from dompath.logging_utils import configure_logging
from dompath.options import HtmlParseOptions, LocatorOptions, RecorderOptions
from dompath.parsers.html import parse_html, parse_html_file
from dompath.recording import ActionRecorder

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

__all__ = ["main", "create_parser", "RunSettings", "build_settings"]


@dataclass(frozen=True)
class RunSettings:
    """Options resolved from the config file and command-line flags."""

    locator: LocatorOptions = field(default_factory=LocatorOptions)
    html: HtmlParseOptions = field(default_factory=HtmlParseOptions)
    recorder: RecorderOptions = field(default_factory=RecorderOptions)
    log_level: str = DEFAULT_LOG_LEVEL


def _get_version() -> str:
    try:
        return metadata.version("dompath")
    except metadata.PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dompath",
        description="Generate node locators for HTML documents and identifier-safe hashes.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")
    parser.add_argument("--config", help=f"Configuration file (JSON, TOML or YAML). Defaults to ${CONFIG_ENV_VAR}")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")
    parser.add_argument("--record", action="store_true", help="Write timestamped action lines to stderr")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    locate_parser = subparsers.add_parser("locate", help="Print locators for elements of an HTML document")
    locate_parser.add_argument("file", help="HTML file to read, or - for stdin")
    locate_parser.add_argument("--tag", help="Only elements with this tag name")
    locate_parser.add_argument("--id", dest="element_id", help="Only the element with this id")
    locate_parser.add_argument(
        "--id-predicates",
        action="store_true",
        default=None,
        help=LocatorOptions.__dataclass_fields__["use_id_predicates"].metadata["help"],
    )
    _add_rich_arguments(locate_parser)

    hash_parser = subparsers.add_parser("hash", help="Print identifier-safe hashes of values")
    hash_parser.add_argument("values", nargs="*", help="Values to hash; stdin lines are used when omitted")
    hash_parser.add_argument("--null", action="store_true", help="Also hash a null value")
    _add_rich_arguments(hash_parser)

    return parser


def _add_rich_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rich", action="store_true", help="Print results as a table (requires rich)")
    parser.add_argument("--force-rich", action="store_true", help="Use rich output even when not writing to a TTY")


def build_settings(config: Dict[str, Any], parsed_args: argparse.Namespace) -> RunSettings:
    """Combine configuration file values with command-line overrides.

    Raises
    ------
    ValidationError
        If the configuration contains unknown keys or invalid values

    """
    try:
        locator = LocatorOptions.from_dict(config.get("locator", {}))
        html = HtmlParseOptions.from_dict(config.get("html", {}))
        recorder = RecorderOptions.from_dict(config.get("recorder", {}))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid configuration: {e}", original_error=e) from e

    if getattr(parsed_args, "id_predicates", None):
        locator = locator.create_updated(use_id_predicates=True)
    if parsed_args.record:
        recorder = recorder.create_updated(enabled=True)

    log_level = parsed_args.log_level or str(config.get("log_level", DEFAULT_LOG_LEVEL)).upper()
    return RunSettings(locator=locator, html=html, recorder=recorder, log_level=log_level)


def _select_elements(document: Document, tag: Optional[str], element_id: Optional[str]) -> list[Element]:
    elements = document.get_elements_by_tag_name(tag) if tag else list(document.iter_elements())
    if element_id is not None:
        elements = [element for element in elements if element.get_attribute("id") == element_id]
    return elements


def _load_document(parsed_args: argparse.Namespace, settings: RunSettings) -> Document:
    if parsed_args.file == "-":
        return parse_html(sys.stdin.buffer.read(), settings.html)
    return parse_html_file(parsed_args.file, settings.html)


def run_locate(parsed_args: argparse.Namespace, settings: RunSettings) -> int:
    """Execute the ``locate`` command."""
    try:
        document = _load_document(parsed_args, settings)
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR

    elements = _select_elements(document, parsed_args.tag, parsed_args.element_id)
    if not elements:
        print("No matching elements found", file=sys.stderr)
        return EXIT_ERROR

    recorder = ActionRecorder(settings.recorder, stream=sys.stderr, locator_options=settings.locator)
    rows = []
    for element in elements:
        rows.append((element.local_name, get_xpath(element, settings.locator)))
        recorder.record_node("locate", element)

    logger.info("Located %d element(s)", len(rows))
    print_rows(rows, ("Tag", "Locator"), should_use_rich_output(parsed_args), title=parsed_args.file)
    return EXIT_SUCCESS


def run_hash(parsed_args: argparse.Namespace, settings: RunSettings) -> int:
    """Execute the ``hash`` command."""
    values: list[Any] = list(parsed_args.values)
    if not values and not parsed_args.null:
        values = [line.rstrip("\r\n") for line in sys.stdin]
    if parsed_args.null:
        values.append(None)

    recorder = ActionRecorder(settings.recorder, stream=sys.stderr)
    rows = []
    for value in values:
        token = simple_hash(value)
        rows.append(("null" if value is None else value, token))
        recorder.record_line(f"hash {token}")

    print_rows(rows, ("Value", "Hash"), should_use_rich_output(parsed_args))
    return EXIT_SUCCESS


_COMMANDS: Dict[str, Callable[[argparse.Namespace, RunSettings], int]] = {
    "locate": run_locate,
    "hash": run_hash,
}


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.command is None:
        parser.print_help(sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.no_config:
            config: Dict[str, Any] = {}
        else:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        settings = build_settings(config, parsed_args)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    log_level = logging.DEBUG if parsed_args.trace else settings.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        return _COMMANDS[parsed_args.command](parsed_args, settings)
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR


if __name__ == "__main__":
    sys.exit(main())
