"""Assertion helpers for tests.

Each helper raises an :class:`AssertionError` subclass when the HTML does not
match, so they work as-is under pytest::

    from htmlequiv.asserts import assert_html_element

    def test_title(client):
        assert_html_element("Welcome", client.get("/").text, "h1")
"""

from __future__ import annotations

from .comparer import DEFAULT, FRAGMENT, HtmlComparer
from .errors import ConfigurationError
from .options import CompareOptions, ElementComparisonMode, ElementSelectionMode
from .result import CompareResult


class HtmlMismatchError(AssertionError):
    """Raised when HTML does not match the expected HTML."""

    def __init__(self, result: CompareResult, selector: str | None = None):
        self.result = result
        self.selector = selector
        self.reason = result.reason
        super().__init__(result.describe(selector))


class HtmlContainsError(AssertionError):
    """Raised when no element matching a selector could be found."""

    def __init__(self, html: str | None, selector: str):
        self.html = html
        self.selector = selector
        super().__init__(f"Expected element with selector '{selector}'.\nActual HTML: {html}")


def _require(name: str, value: object) -> None:
    if value is None:
        raise ConfigurationError(f"{name} must not be None")


def _comparer(fragment: bool, **flags: bool) -> HtmlComparer:
    return HtmlComparer(CompareOptions(treat_as_fragment=fragment, **flags))


def _check(result: CompareResult, selector: str | None = None) -> None:
    if not result.matches:
        raise HtmlMismatchError(result, selector)


def assert_html(
    expected: str,
    actual: str | None,
    ignore_additional_attributes: bool = False,
    ignore_additional_class_names: bool = False,
    ignore_class_name_order: bool = True,
) -> None:
    """Assert that two HTML documents are equivalent."""
    _require("expected", expected)
    comparer = _comparer(
        False,
        ignore_additional_attributes=ignore_additional_attributes,
        ignore_additional_class_names=ignore_additional_class_names,
        ignore_class_name_order=ignore_class_name_order,
    )
    _check(comparer.equal(expected, actual))


def assert_html_fragment(
    expected: str,
    actual: str | None,
    ignore_additional_attributes: bool = False,
    ignore_additional_class_names: bool = False,
    ignore_class_name_order: bool = True,
) -> None:
    """Assert that two HTML fragments are equivalent."""
    _require("expected", expected)
    comparer = _comparer(
        True,
        ignore_additional_attributes=ignore_additional_attributes,
        ignore_additional_class_names=ignore_additional_class_names,
        ignore_class_name_order=ignore_class_name_order,
    )
    _check(comparer.equal(expected, actual))


def assert_html_element(
    expected: str,
    html: str | None,
    selector: str,
    element_comparison_mode: ElementComparisonMode = ElementComparisonMode.INNER_CONTENT,
    element_selection_mode: ElementSelectionMode = ElementSelectionMode.FIRST,
    ignore_additional_attributes: bool = False,
    ignore_additional_class_names: bool = False,
    ignore_class_name_order: bool = True,
) -> None:
    """Assert that the element ``selector`` finds in ``html`` matches ``expected``."""
    _require("expected", expected)
    _require("selector", selector)

    options = CompareOptions(
        element_comparison_mode=element_comparison_mode,
        element_selection_mode=element_selection_mode,
        ignore_additional_attributes=ignore_additional_attributes,
        ignore_additional_class_names=ignore_additional_class_names,
        ignore_class_name_order=ignore_class_name_order,
        treat_as_fragment=True,
    )
    _check(HtmlComparer(options).equal_selected(expected, html, selector), selector)


def assert_html_contains(html: str | None, selector: str) -> None:
    """Assert that an HTML document has an element matching ``selector``."""
    _require("selector", selector)
    if not DEFAULT.contains(html, selector):
        raise HtmlContainsError(html, selector)


def assert_html_fragment_contains(html: str | None, selector: str) -> None:
    """Assert that an HTML fragment has an element matching ``selector``."""
    _require("selector", selector)
    if not FRAGMENT.contains(html, selector):
        raise HtmlContainsError(html, selector)


__all__ = [
    "HtmlContainsError",
    "HtmlMismatchError",
    "assert_html",
    "assert_html_contains",
    "assert_html_element",
    "assert_html_fragment",
    "assert_html_fragment_contains",
]
