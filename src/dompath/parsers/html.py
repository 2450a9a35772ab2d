#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/parsers/html.py
"""HTML to document tree converter.

This module parses HTML with BeautifulSoup and mirrors the result into the
``dompath.dom`` node model, so the locator can address any element of a
real page.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from dompath.constants import DEPS_HTML
from dompath.dom import Comment, Document, DocumentType, Element, Node, Text
from dompath.exceptions import DependencyError, FileError, FileNotFoundError, ParsingError, ValidationError
from dompath.options import HtmlParseOptions
from dompath.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


def _flatten_attributes(attrs: dict[str, Any]) -> dict[str, str]:
    # BeautifulSoup returns multi-valued attributes such as class as lists
    flattened = {}
    for name, value in attrs.items():
        if isinstance(value, (list, tuple)):
            flattened[name] = " ".join(value)
        else:
            flattened[name] = "" if value is None else str(value)
    return flattened


def _convert_node(source: Any, options: HtmlParseOptions) -> Optional[Node]:
    from bs4.element import Comment as SoupComment
    from bs4.element import Doctype, NavigableString, PreformattedString, Tag

    if isinstance(source, Tag):
        return Element(source.name, _flatten_attributes(source.attrs), namespace_uri=source.namespace)
    if isinstance(source, SoupComment):
        return Comment(str(source))
    if isinstance(source, Doctype):
        return DocumentType(str(source).split(" ", 1)[0] or "html")
    if isinstance(source, PreformattedString):
        logger.debug("Skipping %s node", type(source).__name__)
        return None
    if isinstance(source, NavigableString):
        text = str(source)
        if options.strip_whitespace_text and not text.strip():
            return None
        return Text(text)
    return None


def soup_to_document(soup: Any, options: Optional[HtmlParseOptions] = None) -> Document:
    """Mirror a BeautifulSoup tree into a ``Document``.

    Parameters
    ----------
    soup : bs4.BeautifulSoup
        Parsed soup
    options : HtmlParseOptions, optional
        Conversion options

    Returns
    -------
    Document
        Root of the mirrored tree

    """
    from bs4.element import Tag

    options = options or HtmlParseOptions()
    document = Document()

    # Iterative walk; deeply nested markup would exhaust the recursion limit
    pending: list[tuple[Any, Node]] = [(soup, document)]
    while pending:
        source, target = pending.pop()
        for child in source.children:
            node = _convert_node(child, options)
            if node is None:
                continue
            target.append_child(node)
            if isinstance(child, Tag):
                pending.append((child, node))

    return document


@requires_dependencies("html", DEPS_HTML)
def parse_html(markup: Union[str, bytes], options: Optional[HtmlParseOptions] = None) -> Document:
    """Parse HTML markup into a ``Document``.

    Parameters
    ----------
    markup : str or bytes
        HTML source
    options : HtmlParseOptions, optional
        Parsing options

    Returns
    -------
    Document
        Root of the parsed tree

    Raises
    ------
    ValidationError
        If the markup exceeds ``options.max_input_bytes``
    DependencyError
        If BeautifulSoup or the selected tree builder is not installed
    ParsingError
        If BeautifulSoup fails to parse the markup

    """
    from bs4 import BeautifulSoup, FeatureNotFound

    options = options or HtmlParseOptions()

    size = len(markup) if isinstance(markup, bytes) else len(markup.encode("utf-8"))
    if size > options.max_input_bytes:
        raise ValidationError(
            f"HTML input is {size} bytes, exceeding the limit of {options.max_input_bytes} bytes",
            parameter_name="markup",
            parameter_value=size,
        )

    with debug_timer(logger, "Parsing (html)"):
        try:
            soup = BeautifulSoup(markup, options.parser)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="html",
                missing_packages=[(options.parser, "")],
                message=f"HTML tree builder '{options.parser}' is not available. Install it with pip.",
            ) from e
        except Exception as e:
            raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="soup", original_error=e) from e

        document = soup_to_document(soup, options)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed HTML into %d element(s)", sum(1 for _ in document.iter_elements()))
    return document


def parse_html_file(path: Union[str, Path], options: Optional[HtmlParseOptions] = None) -> Document:
    """Read and parse an HTML file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist
    FileError
        If ``path`` cannot be read

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))

    try:
        markup = file_path.read_bytes()
    except OSError as e:
        raise FileError(f"Cannot read file: {file_path}", file_path=str(file_path), original_error=e) from e

    logger.info("Parsing %s", file_path)
    return parse_html(markup, options)


__all__ = ["parse_html", "parse_html_file", "soup_to_document"]
