"""Structural HTML comparison.

:class:`HtmlComparer` decides whether two HTML strings, or an expected fragment
and the element(s) a CSS selector locates in a larger document, are equal
under the tolerance rules of a :class:`~htmlequiv.options.CompareOptions`.

Usage:
    comparer = HtmlComparer(CompareOptions(ignore_additional_attributes=True))
    result = comparer.equal("<p>text</p>", "<p id='x'>text</p>")
    assert result.matches
"""

from __future__ import annotations

import logging
from itertools import zip_longest

from bs4 import Tag

from .errors import ConfigurationError
from .options import CompareOptions, ElementComparisonMode, ElementSelectionMode
from .parsing import inner_html, outer_html, parse, parse_fragment, render_open_tag
from .result import CompareResult
from .tree import (
    ASCII_WHITESPACE,
    Node,
    NodeKind,
    NodeTreeView,
    attribute_map,
    class_list,
    element_id,
    is_inline,
    node_kind,
)

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = CompareOptions()

# Pairs with a node from an exhausted view
_MISSING = object()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip(ASCII_WHITESPACE)


def _validate_selector(selector: str | None) -> None:
    if selector is None:
        raise ConfigurationError("selector must not be None")
    if not isinstance(selector, str):
        raise ConfigurationError(f"selector must be a string, got {type(selector).__name__}")
    if not selector.strip():
        raise ConfigurationError("Selector cannot be empty.")


class HtmlComparer:
    """Compare HTML strings structurally.

    The comparer holds no per-call state, so a single instance can be used
    from several threads.
    """

    def __init__(self, options: CompareOptions = DEFAULT_OPTIONS):
        if options is None:
            raise ConfigurationError("options must not be None")
        if not isinstance(options, CompareOptions):
            raise ConfigurationError(f"options must be CompareOptions, got {type(options).__name__}")
        self.options = options

    def __repr__(self) -> str:
        return f"HtmlComparer({self.options!r})"

    # =========================================================================
    # Public operations
    # =========================================================================

    def equal(self, expected: str | None, candidate: str | None) -> CompareResult:
        """Compare two complete HTML strings."""
        if _is_blank(expected):
            if _is_blank(candidate):
                return CompareResult.MATCH
            return CompareResult.mismatch(expected, candidate)

        if _is_blank(candidate):
            return CompareResult.mismatch(expected, candidate)

        if expected.strip(ASCII_WHITESPACE) == candidate.strip(ASCII_WHITESPACE):
            return CompareResult.MATCH

        fragment = self.options.treat_as_fragment
        expected_root = parse(expected, fragment, self.options.parser)
        candidate_root = parse(candidate, fragment, self.options.parser)

        if self.trees_equal(expected_root, candidate_root):
            return CompareResult.MATCH
        return CompareResult.mismatch(expected, inner_html(candidate_root))

    def equal_selected(self, expected: str | None, html: str | None, selector: str | None) -> CompareResult:
        """Compare the element(s) ``selector`` finds in ``html`` against ``expected``.

        ``expected`` is always parsed as a fragment; ``html`` is parsed as a
        document unless ``treat_as_fragment`` is set. Multiple matches are
        handled according to ``element_selection_mode``.
        """
        _validate_selector(selector)

        mode = self.options.effective_comparison_mode
        expected_root = parse_fragment(expected or "", self.options.parser)
        expected_element = self._expected_element(expected_root, mode)

        candidate_root = parse(html or "", self.options.treat_as_fragment, self.options.parser)
        selection = self.options.element_selection_mode

        if selection is ElementSelectionMode.FIRST:
            element = candidate_root.select_one(selector)
            if element is None:
                return CompareResult.ELEMENT_NOT_FOUND
            return self._compare_selected(expected, expected_root, expected_element, element)

        elements = candidate_root.select(selector)
        if not elements:
            return CompareResult.ELEMENT_NOT_FOUND

        if selection is ElementSelectionMode.SINGLE:
            if len(elements) > 1:
                logger.debug("Selector %r matched %d elements", selector, len(elements))
                return CompareResult.MULTIPLE_ELEMENTS_FOUND
            return self._compare_selected(expected, expected_root, expected_element, elements[0])

        results = (self._compare_selected(expected, expected_root, expected_element, el) for el in elements)

        if selection is ElementSelectionMode.ALL:
            for result in results:
                if not result.matches:
                    return result
            return CompareResult.MATCH

        if selection is ElementSelectionMode.ANY:
            first_mismatch = None
            for result in results:
                if result.matches:
                    return CompareResult.MATCH
                if first_mismatch is None:
                    first_mismatch = result
            return first_mismatch

        raise ValueError(f"Unknown element selection mode: {selection!r}")

    def contains(self, html: str | None, selector: str | None) -> bool:
        """Check whether ``html`` has an element matching ``selector``.

        With ``SINGLE`` selection exactly one element must match.
        """
        _validate_selector(selector)

        if _is_blank(html):
            return False

        root = parse(html, self.options.treat_as_fragment, self.options.parser)

        if self.options.element_selection_mode is ElementSelectionMode.SINGLE:
            return len(root.select(selector, limit=2)) == 1

        return root.select_one(selector) is not None

    # =========================================================================
    # Selected element comparison
    # =========================================================================

    def _expected_element(self, expected_root: Tag, mode: ElementComparisonMode) -> Tag | None:
        """Return the single expected root element required by ``mode``."""
        if mode is ElementComparisonMode.INNER_CONTENT:
            return None

        # Surrounding whitespace never counts as a root node
        view = NodeTreeView(expected_root, skip_empty_text=True)
        nodes = view.children(expected_root)
        if len(nodes) != 1 or not isinstance(nodes[0], Tag):
            raise ConfigurationError(
                f"Expected HTML must consist of exactly one root element when comparing in "
                f"{mode.name} mode, found {len(nodes)} top-level nodes"
            )

        element = nodes[0]
        if mode is ElementComparisonMode.ELEMENT_ONLY and view.children(element):
            raise ConfigurationError(
                f"Expected element <{element.name}> cannot have child nodes when comparing in {mode.name} mode"
            )
        return element

    def _compare_selected(
        self,
        expected: str | None,
        expected_root: Tag,
        expected_element: Tag | None,
        element: Tag,
    ) -> CompareResult:
        mode = self.options.effective_comparison_mode

        if mode is ElementComparisonMode.INNER_CONTENT:
            if self.trees_equal(expected_root, element):
                return CompareResult.MATCH
            return CompareResult.mismatch(expected, inner_html(element))

        if mode is ElementComparisonMode.OUTER_ELEMENT:
            if self.trees_equal(expected_element, element, include_root=True):
                return CompareResult.MATCH
            return CompareResult.mismatch(expected, outer_html(element))

        if mode is ElementComparisonMode.ELEMENT_ONLY:
            if self.elements_equal(expected_element, element):
                return CompareResult.MATCH
            return CompareResult.mismatch(expected, render_open_tag(element))

        raise ValueError(f"Unknown element comparison mode: {mode!r}")

    # =========================================================================
    # Tree equality
    # =========================================================================

    def _view(self, root: Tag, include_root: bool = False) -> NodeTreeView:
        return NodeTreeView(root, include_root=include_root, skip_empty_text=self.options.ignore_empty_text_nodes)

    def trees_equal(self, expected_root: Tag, candidate_root: Tag, include_root: bool = False) -> bool:
        """Check whether two subtrees are structurally equal.

        Both views are walked in pre-order in lockstep. Every pair of nodes must
        be equal and have the same number of children, which together pins down
        the shape of both trees.
        """
        expected_view = self._view(expected_root, include_root)
        candidate_view = self._view(candidate_root, include_root)

        for expected_node, candidate_node in zip_longest(expected_view, candidate_view, fillvalue=_MISSING):
            if expected_node is _MISSING or candidate_node is _MISSING:
                logger.debug(
                    "Structure differs: %s has no counterpart",
                    _describe(candidate_node if expected_node is _MISSING else expected_node),
                )
                return False

            if not self.nodes_equal(expected_node, candidate_node):
                return False

            expected_count = len(expected_view.children(expected_node))
            candidate_count = len(candidate_view.children(candidate_node))
            if expected_count != candidate_count:
                logger.debug(
                    "Child count differs for %s: expected %d, got %d",
                    _describe(candidate_node),
                    expected_count,
                    candidate_count,
                )
                return False

        return True

    def nodes_equal(self, expected: Node, candidate: Node) -> bool:
        """Compare two nodes without looking at their children."""
        expected_kind = node_kind(expected)
        candidate_kind = node_kind(candidate)

        if expected_kind is not candidate_kind:
            logger.debug("Node kind differs: expected %s, got %s", expected_kind.value, candidate_kind.value)
            return False

        if expected_kind is NodeKind.TEXT:
            return self.texts_equal(expected, candidate)

        if expected_kind is NodeKind.ELEMENT:
            return self.elements_equal(expected, candidate)

        return True

    def texts_equal(self, expected: Node, candidate: Node) -> bool:
        expected_text = str(expected)
        candidate_text = str(candidate)

        # The expected parent may be the wildcard element
        if not is_inline(candidate.parent):
            expected_text = expected_text.strip(ASCII_WHITESPACE)
            candidate_text = candidate_text.strip(ASCII_WHITESPACE)

        if self.options.text_comparer(expected_text, candidate_text):
            return True

        logger.debug("Text differs: expected %r, got %r", expected_text, candidate_text)
        return False

    def elements_equal(self, expected: Tag, candidate: Tag) -> bool:
        """Compare tag name, id, classes and attributes of two elements."""
        if expected.name != candidate.name and expected.name.lower() != self.options.wildcard_element_name.lower():
            logger.debug("Tag differs: expected <%s>, got <%s>", expected.name, candidate.name)
            return False

        if not self.ids_equal(element_id(expected), element_id(candidate)):
            logger.debug("Id differs on <%s>: expected %r, got %r", candidate.name, expected.get("id"), candidate.get("id"))
            return False

        if not self.class_lists_equal(class_list(expected), class_list(candidate)):
            logger.debug("Classes differ on <%s>: expected %r, got %r", candidate.name, class_list(expected), class_list(candidate))
            return False

        if not self.attributes_equal(attribute_map(expected), attribute_map(candidate)):
            logger.debug("Attributes differ on <%s>", candidate.name)
            return False

        return True

    def ids_equal(self, expected: str | None, candidate: str | None) -> bool:
        if expected == candidate:
            return True
        return not expected and self.options.ignore_additional_attributes

    def class_lists_equal(self, expected: list[str], candidate: list[str]) -> bool:
        if self.options.ignore_additional_class_names:
            if len(expected) > len(candidate):
                return False

            if self.options.ignore_class_name_order:
                return len(set(expected) & set(candidate)) == len(expected)

            # Candidate classes known to the expected list must appear in the same order
            wanted = set(expected)
            return expected == [name for name in candidate if name in wanted]

        if len(expected) != len(candidate):
            return False

        if self.options.ignore_class_name_order:
            return len(set(expected) | set(candidate)) == len(expected)

        return expected == candidate

    def attributes_equal(self, expected: dict, candidate: dict) -> bool:
        if self.options.ignore_additional_attributes:
            if len(expected) > len(candidate):
                return False
        elif len(expected) != len(candidate):
            return False

        for key, value in expected.items():
            if key not in candidate:
                return False
            if not self.options.attribute_comparer(value, candidate[key]):
                return False

        return True


def _describe(node: object) -> str:
    if isinstance(node, Tag):
        return render_open_tag(node)
    return repr(str(node))


DEFAULT = HtmlComparer()
FRAGMENT = HtmlComparer(CompareOptions(treat_as_fragment=True))
