"""Cardo - Markdown documents managed as dependencies.

By default, Cardo's internal logging is disabled when used as a library.
Library users can enable logging by calling cardo.enable_logging().
"""

from cardo.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
