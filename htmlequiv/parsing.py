"""Parsing HTML into BeautifulSoup trees and serializing them back."""

from __future__ import annotations

import html

from bs4 import BeautifulSoup, Tag

from .options import DEFAULT_PARSER


def _soup(markup: str, parser: str) -> BeautifulSoup:
    # Attribute values stay plain strings; class lists are split by the comparer
    return BeautifulSoup(markup, parser, multi_valued_attributes=None)


def parse_document(markup: str, parser: str = DEFAULT_PARSER) -> Tag:
    """Parse a full document and return its root element.

    Parsers that do not synthesize an ``<html>`` element (``html.parser``)
    return the soup itself.
    """
    soup = _soup(markup, parser)
    return soup.html or soup


def parse_fragment(markup: str, parser: str = DEFAULT_PARSER) -> Tag:
    """Parse a body fragment and return the element holding its nodes."""
    soup = _soup(markup, parser)
    return soup.body or soup


def parse(markup: str, fragment: bool, parser: str = DEFAULT_PARSER) -> Tag:
    if fragment:
        return parse_fragment(markup, parser)
    return parse_document(markup, parser)


def inner_html(elem: Tag) -> str:
    return elem.decode_contents()


def outer_html(elem: Tag) -> str:
    return elem.decode()


def render_open_tag(elem: Tag) -> str:
    """Render only the opening tag of an element, e.g. ``<p class="a">``."""
    parts = [elem.name]
    for name, value in elem.attrs.items():
        parts.append(f'{name}="{html.escape(value, quote=True)}"')
    return "<" + " ".join(parts) + ">"
