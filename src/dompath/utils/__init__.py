#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/utils/__init__.py
"""Utility modules for dompath package.

This package contains dependency checking and timing helpers shared by the
parsers and the CLI.
"""

from dompath.utils.decorators import debug_timer, requires_dependencies
from dompath.utils.packages import check_version_requirement, get_package_version

__all__ = [
    "debug_timer",
    "requires_dependencies",
    "check_version_requirement",
    "get_package_version",
]
