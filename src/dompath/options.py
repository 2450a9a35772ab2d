#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/options.py
"""Configuration options for the locator, the recorder and the HTML front end.

All options are frozen dataclasses. Field metadata carries the help text
used by the CLI and by configuration files.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from dompath.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_MAX_INPUT_BYTES,
    DEFAULT_STRIP_WHITESPACE_TEXT,
    DEFAULT_USE_ID_PREDICATES,
    HtmlParserName,
)
from dompath.exceptions import ValidationError

_VALID_HTML_PARSERS = ("html.parser", "lxml", "html5lib")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build options from a configuration mapping.

        Unknown keys are rejected so typos in config files surface early.

        Raises
        ------
        ValidationError
            If ``data`` contains keys that are not fields of this class.

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown {cls.__name__} setting(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )
        return cls(**data)


@dataclass(frozen=True)
class LocatorOptions(CloneFrozenMixin):
    """Options for path generation.

    Parameters
    ----------
    use_id_predicates : bool, default False
        Address the nearest ancestor-or-self carrying an id with an
        ``//tag[@id="..."]`` predicate instead of positional segments.
        Off by default, so every path is fully positional.

    """

    use_id_predicates: bool = field(
        default=DEFAULT_USE_ID_PREDICATES,
        metadata={
            "help": "Shorten paths at the nearest element carrying an id using an [@id=...] predicate",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class RecorderOptions(CloneFrozenMixin):
    """Options for the action recorder.

    Parameters
    ----------
    enabled : bool, default False
        Whether recorded lines are kept and written. A disabled recorder
        drops every line.

    """

    enabled: bool = field(
        default=False,
        metadata={"help": "Record timestamped action lines", "importance": "core"},
    )


@dataclass(frozen=True)
class HtmlParseOptions(CloneFrozenMixin):
    """Options for building a document tree from HTML.

    Parameters
    ----------
    parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        Tree builder handed to BeautifulSoup
    strip_whitespace_text : bool, default False
        Drop text nodes that contain only whitespace
    max_input_bytes : int, default 50MB
        Upper bound on accepted markup size

    """

    parser: HtmlParserName = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup tree builder to use", "choices": list(_VALID_HTML_PARSERS)},
    )
    strip_whitespace_text: bool = field(
        default=DEFAULT_STRIP_WHITESPACE_TEXT,
        metadata={"help": "Drop whitespace-only text nodes", "importance": "advanced"},
    )
    max_input_bytes: int = field(
        default=DEFAULT_MAX_INPUT_BYTES,
        metadata={"help": "Maximum accepted markup size in bytes", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.parser not in _VALID_HTML_PARSERS:
            raise ValueError(f"parser must be one of {', '.join(_VALID_HTML_PARSERS)}, got {self.parser!r}")
        if self.max_input_bytes <= 0:
            raise ValueError(f"max_input_bytes must be positive, got {self.max_input_bytes}")


__all__ = [
    "CloneFrozenMixin",
    "LocatorOptions",
    "RecorderOptions",
    "HtmlParseOptions",
]
