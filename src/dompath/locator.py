#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/locator.py
"""Path generation for nodes in a document tree.

``get_xpath`` builds an XPath-like string describing where a node sits,
starting at the document's root element::

    /html[1]/body[1]/div[2]/p[1]#intro

Each segment is the lowercased tag name followed by the 1-based position of
the node among same-named siblings. If the node itself carries an id, it is
appended after a ``#``. When the root element declares a namespace every
segment is prefixed with ``x:``.

The function is total. A missing node yields ``"(none)"`` and a node whose
ancestor chain breaks before reaching the document yields ``""``. Errors
raised while reading the tree are treated as a broken chain.

Examples
--------
    >>> from dompath.parsers.html import parse_html
    >>> doc = parse_html("<html><body><div></div><div id='b'></div></body></html>")
    >>> get_xpath(doc.get_element_by_id("b"))
    '/html[1]/body[1]/div[2]#b'

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from dompath.constants import (
    DETACHED_NODE_PATH,
    NAMESPACE_PREFIX,
    NO_NODE_SENTINEL,
    TABLE_ANNOTATION_MAX_COUNT,
    TABLE_ANNOTATION_MIN_COUNT,
)
from dompath.options import LocatorOptions

logger = logging.getLogger(__name__)


def _read(obj: Any, name: str) -> Any:
    """Read ``obj.name``, returning None when obj is None or the read fails."""
    if obj is None:
        return None
    try:
        return getattr(obj, name, None)
    except Exception as e:
        logger.debug("Reading %s from %r failed: %s", name, obj, e)
        return None


def _attribute(node: Any, name: str) -> Optional[str]:
    """Return a string attribute value; other values count as absent."""
    getter = _read(node, "get_attribute")
    if not callable(getter):
        return None
    try:
        value = getter(name)
    except Exception as e:
        logger.debug("Reading attribute %s from %r failed: %s", name, node, e)
        return None
    return value if isinstance(value, str) else None


def _tag_of(node: Any) -> str:
    tag_name = _read(node, "tag_name")
    return tag_name if isinstance(tag_name, str) else ""


def _namespace_prefix(document: Any) -> str:
    root = _read(document, "document_element")
    namespace_uri = _read(root, "namespace_uri")
    return NAMESPACE_PREFIX if isinstance(namespace_uri, str) and namespace_uri else ""


def _sibling_index(node: Any, parent: Any, tag: str) -> Optional[int]:
    """Return the 1-based position of ``node`` among siblings named ``tag``.

    Returns None when the parent's children cannot be read.
    """
    index = 1
    try:
        for sibling in _read(parent, "children") or ():
            sibling_tag = _tag_of(sibling)
            if not sibling_tag:
                continue
            if sibling is node:
                break
            if sibling_tag.lower() == tag:
                index += 1
    except Exception as e:
        logger.debug("Reading children of %r failed: %s", parent, e)
        return None
    return index


def _table_suffix(count_source: Any, index: Any) -> str:
    entries = count_source or ()
    if TABLE_ANNOTATION_MIN_COUNT < len(entries) < TABLE_ANNOTATION_MAX_COUNT and isinstance(index, int):
        return f"[{index + 1}]"
    return ""


def get_xpath(node: Any, options: Optional[LocatorOptions] = None) -> str:
    """Return a path string locating ``node`` from its document's root element.

    Parameters
    ----------
    node : Node or None
        Node to locate. Any object exposing ``tag_name``, ``parent``,
        ``children``, ``get_attribute`` and ``owner_document`` works.
    options : LocatorOptions, optional
        Path generation options

    Returns
    -------
    str
        ``"(none)"`` for a missing node, ``""`` for a detached or malformed
        node, otherwise the path with an optional ``#id`` suffix.

    """
    if node is None:
        return NO_NODE_SENTINEL

    options = options or LocatorOptions()

    document = _read(node, "owner_document")
    prefix = _namespace_prefix(document)
    original_id = _attribute(node, "id")

    xpath = ""
    current = node
    visited: set[int] = set()
    while current is not None and current is not document:
        tag_name = _tag_of(current)
        parent = _read(current, "parent")
        if not tag_name or parent is None or id(current) in visited:
            logger.debug("Cannot locate %r: ancestor chain is broken at %r", node, current)
            return DETACHED_NODE_PATH
        visited.add(id(current))

        tag = tag_name.lower()
        segment = prefix + tag
        if tag:
            element_id = _attribute(current, "id")
            if options.use_id_predicates and element_id:
                xpath = f'//{segment}[@id="{element_id}"]' + xpath
                break
            sibling_index = _sibling_index(current, parent, tag)
            if sibling_index is None:
                return DETACHED_NODE_PATH
            segment += f"[{sibling_index}]"
        elif tag == "tr":
            # Never taken: an empty tag cannot equal "tr". Row annotation lives here.
            segment += _table_suffix(_read(parent, "rows"), _read(current, "row_index"))
        elif tag == "td":
            # Never taken, as above.
            segment += _table_suffix(_read(parent, "cells"), _read(current, "cell_index"))

        xpath = "/" + segment + xpath
        current = parent

    if original_id:
        xpath += "#" + original_id
    return xpath


locate = get_xpath

__all__ = ["get_xpath", "locate"]
