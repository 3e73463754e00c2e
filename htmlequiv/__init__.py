"""
Structural HTML comparison for tests.

Decides whether two HTML snippets, or a snippet and the element(s) a CSS
selector locates in a larger document, are equivalent while tolerating
attribute order, class order, insignificant whitespace, comments and,
optionally, extra attributes and class names.

Usage:
    from htmlequiv import HtmlComparer, CompareOptions

    comparer = HtmlComparer(CompareOptions(ignore_additional_class_names=True))
    result = comparer.equal_selected("<p>Hello</p>", page_html, "main")
    if not result.matches:
        print(result.describe("main"))
"""

from .comparer import DEFAULT, FRAGMENT, HtmlComparer
from .errors import ConfigurationError, HtmlEquivError
from .options import CompareOptions, ElementComparisonMode, ElementSelectionMode
from .result import CompareResult, MismatchReason
from .text import HtmlTextComparer, collapse_whitespace, ordinal, ordinal_ignore_case
from .tree import NodeKind, NodeTreeView

__all__ = [
    "DEFAULT",
    "FRAGMENT",
    "CompareOptions",
    "CompareResult",
    "ConfigurationError",
    "ElementComparisonMode",
    "ElementSelectionMode",
    "HtmlComparer",
    "HtmlEquivError",
    "HtmlTextComparer",
    "MismatchReason",
    "NodeKind",
    "NodeTreeView",
    "collapse_whitespace",
    "ordinal",
    "ordinal_ignore_case",
]

__version__ = "0.1.0"
