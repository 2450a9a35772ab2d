#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/parsers/__init__.py
"""Front ends that build ``dompath.dom`` trees from markup."""

from dompath.parsers.html import parse_html, parse_html_file, soup_to_document

__all__ = ["parse_html", "parse_html_file", "soup_to_document"]
