#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the dompath library.

This module centralizes the fixed strings and tuning values used by the
locator, the hash encoder, the HTML front end and the CLI.

Constants are organized by category:
1. Locator - sentinels and prefixes used when building node paths
2. Hash Encoder - alphabet, sizes and fallback tokens
3. HTML Front End - parser defaults and dependency declarations
4. Configuration - config file names and environment variables
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Locator
# =============================================================================

# Returned by get_xpath() when no node was given
NO_NODE_SENTINEL = "(none)"

# Returned by get_xpath() when the ancestor chain is broken
DETACHED_NODE_PATH = ""

# Segment prefix used when the document element declares a namespace
NAMESPACE_PREFIX = "x:"

# Row/cell annotation applies to tables with more than MIN and fewer than MAX entries
TABLE_ANNOTATION_MIN_COUNT = 1
TABLE_ANNOTATION_MAX_COUNT = 5

# Default for the id-predicate shortcut in LocatorOptions
DEFAULT_USE_ID_PREDICATES = False

# =============================================================================
# Hash Encoder
# =============================================================================

HASH_NULL_TOKEN = "nullhash"
HASH_UNDEFINED_TOKEN = "undefinedhash"
HASH_EMPTY_TOKEN = "emptystring"

HASH_SLOT_COUNT = 16
HASH_PREFIX_LENGTH = 15

# Only the first 64 positions are reachable (values are masked with 0x3F).
# The punctuation block sits before the lowercase letters, not after them.
HASH_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ#*@!abcdefghijklmnopqrstuvwxyz"

# Only the first digit of a numeric character reference is captured. A
# repeated group such as `&#(\d)+;` would keep the last digit instead, so
# tokens differ for multi-digit references like `&#123;` (p1 here, p3 there).
HASH_ENTITY_PATTERN = re.compile(r"&#([0-9])[0-9]*;")
HASH_STRIP_PATTERN = re.compile(r"[^a-zA-Z0-9]+")

# =============================================================================
# HTML Front End
# =============================================================================

HtmlParserName = Literal["html.parser", "lxml", "html5lib"]

DEFAULT_HTML_PARSER: HtmlParserName = "html.parser"
DEFAULT_STRIP_WHITESPACE_TEXT = False
DEFAULT_MAX_INPUT_BYTES = 50 * 1024 * 1024  # 50MB

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "DOMPATH_CONFIG"
CONFIG_FILENAMES = [".dompath.toml", ".dompath.yaml", ".dompath.yml", ".dompath.json"]
PYPROJECT_TOOL_SECTION = "dompath"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL: LogLevelName = "WARNING"
