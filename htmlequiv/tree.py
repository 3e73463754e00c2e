"""Filtered, document-order views over parsed HTML trees.

Both sides of every comparison are walked through a :class:`NodeTreeView`, so
the same filtering (comments, empty text) applies to expected and candidate.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, Union

from bs4.element import Comment, NavigableString, PreformattedString, Tag

Node = Union[Tag, NavigableString]

ID_ATTRIBUTE = "id"
CLASS_ATTRIBUTE = "class"

# Elements whose text content is not trimmed before comparison
INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdi",
        "bdo",
        "big",
        "button",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "ins",
        "kbd",
        "label",
        "mark",
        "output",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "time",
        "tt",
        "u",
        "var",
    }
)

# ASCII whitespace; U+00A0 and other Unicode spaces are content
ASCII_WHITESPACE = " \t\n\f\r"

_CLASS_SEPARATOR = re.compile(f"[{ASCII_WHITESPACE}]+")


class NodeKind(Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"  # Doctype, processing instruction, CDATA, ...


def node_kind(node: Node) -> NodeKind:
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    return NodeKind.TEXT


def is_inline(elem: Tag | None) -> bool:
    return elem is not None and elem.name in INLINE_ELEMENTS


def element_id(elem: Tag) -> str | None:
    return elem.get(ID_ATTRIBUTE)


def class_list(elem: Tag) -> list[str]:
    """Ordered class names of an element, without duplicates."""
    value = elem.get(CLASS_ATTRIBUTE)
    if value is None:
        return []
    tokens = [token for token in _CLASS_SEPARATOR.split(value) if token]
    return list(dict.fromkeys(tokens))


def attribute_map(elem: Tag) -> dict[tuple[str | None, str], str]:
    """Attributes other than id and class, keyed by (namespace, name)."""
    result = {}
    for name, value in elem.attrs.items():
        if name in (ID_ATTRIBUTE, CLASS_ATTRIBUTE):
            continue
        result[(getattr(name, "namespace", None), str(name))] = value
    return result


class NodeTreeView:
    """Lazy pre-order walk over the subtree of ``root``.

    Comments and other markup declarations are always skipped, whitespace-only
    text nodes are skipped when ``skip_empty_text`` is set. With
    ``include_root`` the root element is yielded first; its siblings are
    never part of the view. Every iteration starts a fresh traversal.
    """

    def __init__(self, root: Tag, include_root: bool = False, skip_empty_text: bool = True):
        self.root = root
        self.include_root = include_root
        self.skip_empty_text = skip_empty_text

    def accepts(self, node: Node) -> bool:
        kind = node_kind(node)
        if kind in (NodeKind.COMMENT, NodeKind.OTHER):
            return False
        if kind is NodeKind.TEXT and self.skip_empty_text:
            return bool(str(node).strip(ASCII_WHITESPACE))
        return True

    def children(self, node: Node) -> list[Node]:
        """Child nodes of ``node`` that pass the view's filter."""
        if not isinstance(node, Tag):
            return []
        return [child for child in node.children if self.accepts(child)]

    def __iter__(self) -> Iterator[Node]:
        if self.include_root:
            stack: list[Node] = [self.root]
        else:
            stack = list(reversed(self.children(self.root)))

        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children(node)))

    def __repr__(self) -> str:
        return (
            f"NodeTreeView(<{self.root.name}>, include_root={self.include_root}, "
            f"skip_empty_text={self.skip_empty_text})"
        )
