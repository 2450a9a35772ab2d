"""dompath - node locators and identifier-safe hashes for document trees.

dompath provides two small, pure algorithms:

- ``get_xpath`` derives a stable, human-readable path such as
  ``/html[1]/body[1]/div[2]#main`` that identifies a node within its
  document tree.
- ``simple_hash`` maps any value to a short token made only of ASCII
  letters and digits, usable as a key or resource name.

Around them the package carries a DOM-like tree model, an HTML front end
built on BeautifulSoup, an action recorder and a command-line interface.

Examples
--------
Locate an element in parsed HTML:

    >>> from dompath import get_xpath, parse_html
    >>> doc = parse_html("<html><body><p>a</p><p id='x'>b</p></body></html>")
    >>> get_xpath(doc.get_element_by_id("x"))
    '/html[1]/body[1]/p[2]#x'

Hash a value:

    >>> from dompath import simple_hash
    >>> simple_hash("test")
    'test4ceZf9ABkDEFeHIJ'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from dompath.dom import Comment, Document, DocumentType, Element, Node, Text
from dompath.exceptions import (
    DependencyError,
    DompathError,
    FileError,
    ParsingError,
    ValidationError,
)
from dompath.hashing import UNDEFINED, hash_value, simple_hash
from dompath.locator import get_xpath, locate
from dompath.options import HtmlParseOptions, LocatorOptions, RecorderOptions
from dompath.parsers.html import parse_html, parse_html_file
from dompath.recording import ActionRecorder, get_time

__all__ = [
    # Core algorithms
    "get_xpath",
    "locate",
    "simple_hash",
    "hash_value",
    "UNDEFINED",
    # Tree model
    "Node",
    "Element",
    "Document",
    "Text",
    "Comment",
    "DocumentType",
    # Front end
    "parse_html",
    "parse_html_file",
    # Recording
    "ActionRecorder",
    "get_time",
    # Options
    "LocatorOptions",
    "RecorderOptions",
    "HtmlParseOptions",
    # Exceptions
    "DompathError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "DependencyError",
]
