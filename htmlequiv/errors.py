"""Exceptions raised by htmlequiv.

Comparison outcomes are never raised; see :class:`htmlequiv.result.CompareResult`.
"""

from __future__ import annotations


class HtmlEquivError(Exception):
    """Base class for all htmlequiv errors."""


class ConfigurationError(HtmlEquivError, ValueError):
    """Raised when a comparison is requested with invalid arguments or options.

    Covers a missing options object, a missing or blank selector, option values
    of the wrong type, and an expected fragment that cannot be compared in the
    configured element comparison mode.
    """
