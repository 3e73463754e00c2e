"""Text comparers used for text node and attribute value equality."""

from __future__ import annotations

from typing import Callable

from .errors import ConfigurationError

# (x, y) -> True if the strings are considered equal
StringComparer = Callable[[str, str], bool]


def ordinal(x: str | None, y: str | None) -> bool:
    """Case-sensitive, character by character equality."""
    return x == y


def ordinal_ignore_case(x: str | None, y: str | None) -> bool:
    """Equality ignoring case differences."""
    if x is None or y is None:
        return x is y
    return x.casefold() == y.casefold()


def collapse_whitespace(text: str | None) -> str | None:
    """Collapse every run of whitespace into a single space.

    Unlike ``" ".join(text.split())`` a single space is kept at either end when
    the input had whitespace there, so ``"a "`` and ``"a"`` stay different.
    """
    if text is None:
        return None

    parts = text.split()
    if not parts:
        return ""

    collapsed = " ".join(parts)
    if text[0].isspace():
        collapsed = " " + collapsed
    if text[-1].isspace():
        collapsed = collapsed + " "
    return collapsed


class HtmlTextComparer:
    """Compare strings after collapsing insignificant whitespace.

    Recurring whitespace is reduced to one space before the wrapped comparer
    is applied, so ``"a  b"`` equals ``"a\\n b"`` under :attr:`ORDINAL`.
    """

    ORDINAL: HtmlTextComparer
    ORDINAL_IGNORE_CASE: HtmlTextComparer

    def __init__(self, comparer: StringComparer = ordinal):
        if comparer is None:
            raise ConfigurationError("HtmlTextComparer requires a string comparer")
        self._comparer = comparer

    def __call__(self, x: str | None, y: str | None) -> bool:
        return self._comparer(collapse_whitespace(x), collapse_whitespace(y))

    def __repr__(self) -> str:
        name = getattr(self._comparer, "__name__", repr(self._comparer))
        return f"HtmlTextComparer({name})"


HtmlTextComparer.ORDINAL = HtmlTextComparer(ordinal)
HtmlTextComparer.ORDINAL_IGNORE_CASE = HtmlTextComparer(ordinal_ignore_case)
