"""Options controlling how tolerant an :class:`~htmlequiv.comparer.HtmlComparer` is."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ConfigurationError
from .text import HtmlTextComparer, StringComparer, ordinal

DEFAULT_WILDCARD_ELEMENT_NAME = "any"

# Tree builders accepted by BeautifulSoup. html5lib follows the HTML5 parsing
# algorithm; lxml is faster but wraps bare text in <p> elements.
PARSERS = ("html5lib", "lxml", "html.parser")
DEFAULT_PARSER = "html5lib"


class ElementSelectionMode(Enum):
    """How elements matched by a selector are compared."""

    FIRST = "first"  # Only the first match is compared
    SINGLE = "single"  # Exactly one element may match
    ALL = "all"  # Every match must be equal
    ANY = "any"  # At least one match must be equal


class ElementComparisonMode(Enum):
    """What part of a selected element is compared."""

    INNER_CONTENT = "inner"  # Only the content of the element
    OUTER_ELEMENT = "outer"  # The element itself and its content
    ELEMENT_ONLY = "element"  # The element itself, ignoring its content


@dataclass(frozen=True)
class CompareOptions:
    """Tolerance settings for HTML comparison.

    Instances are immutable; use :meth:`replace` to derive a variant. A single
    instance can be shared between comparers and threads.

    Attributes:
        wildcard_element_name: Expected tag name that matches any candidate tag.
        element_selection_mode: How multiple selector matches are aggregated.
        include_selected_element: Compare the selected element itself, not only
            its content. Equivalent to ``OUTER_ELEMENT`` when the comparison
            mode is ``INNER_CONTENT``.
        element_comparison_mode: Granularity of selected element comparison.
        ignore_class_name_order: Class order is not significant.
        ignore_additional_class_names: The candidate may carry extra classes.
        ignore_additional_attributes: The candidate may carry extra attributes,
            including an id the expected element does not have.
        ignore_empty_text_nodes: Whitespace-only text nodes are not compared.
        treat_as_fragment: Parse input as a body fragment, not a document.
        text_comparer: Equality predicate for text node content.
        attribute_comparer: Equality predicate for attribute values other than
            id and class, which are always compared ordinally.
        parser: BeautifulSoup tree builder used to parse both sides.
    """

    wildcard_element_name: str = DEFAULT_WILDCARD_ELEMENT_NAME
    element_selection_mode: ElementSelectionMode = ElementSelectionMode.FIRST
    include_selected_element: bool = False
    element_comparison_mode: ElementComparisonMode = ElementComparisonMode.INNER_CONTENT
    ignore_class_name_order: bool = True
    ignore_additional_class_names: bool = False
    ignore_additional_attributes: bool = False
    ignore_empty_text_nodes: bool = True
    treat_as_fragment: bool = False
    text_comparer: StringComparer = HtmlTextComparer.ORDINAL
    attribute_comparer: StringComparer = ordinal
    parser: str = DEFAULT_PARSER

    def __post_init__(self) -> None:
        if not isinstance(self.wildcard_element_name, str) or not self.wildcard_element_name.strip():
            raise ConfigurationError("wildcard_element_name must be a non-empty string")
        if not isinstance(self.element_selection_mode, ElementSelectionMode):
            raise ConfigurationError(
                f"element_selection_mode must be an ElementSelectionMode, got {self.element_selection_mode!r}"
            )
        if not isinstance(self.element_comparison_mode, ElementComparisonMode):
            raise ConfigurationError(
                f"element_comparison_mode must be an ElementComparisonMode, got {self.element_comparison_mode!r}"
            )
        if not callable(self.text_comparer):
            raise ConfigurationError("text_comparer must be callable")
        if not callable(self.attribute_comparer):
            raise ConfigurationError("attribute_comparer must be callable")
        if self.parser not in PARSERS:
            raise ConfigurationError(f"Unknown parser {self.parser!r}, expected one of {', '.join(PARSERS)}")

    @property
    def effective_comparison_mode(self) -> ElementComparisonMode:
        """Comparison mode with ``include_selected_element`` folded in."""
        if self.include_selected_element and self.element_comparison_mode is ElementComparisonMode.INNER_CONTENT:
            return ElementComparisonMode.OUTER_ELEMENT
        return self.element_comparison_mode

    def replace(self, **changes: Any) -> CompareOptions:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
