"""Outcome of an HTML comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class MismatchReason(Enum):
    """Why a comparison did not match."""

    NONE = "none"  # The HTML differs
    ELEMENT_NOT_FOUND = "element_not_found"  # The selector matched nothing
    MULTIPLE_ELEMENTS_FOUND = "multiple_elements_found"  # Single selection mode saw several matches


@dataclass(frozen=True)
class CompareResult:
    """Result of comparing HTML, either a match or a mismatch with a reason.

    ``expected``, ``actual`` and ``reason`` are only set on a mismatch and are
    diagnostic payloads. Results are plain values: two mismatches built from
    the same fields are equal.

    A result has no truth value; test ``result.matches`` explicitly.
    """

    matches: bool
    expected: str | None = None
    actual: str | None = None
    reason: MismatchReason | None = None

    MATCH: ClassVar[CompareResult]
    ELEMENT_NOT_FOUND: ClassVar[CompareResult]
    MULTIPLE_ELEMENTS_FOUND: ClassVar[CompareResult]

    @classmethod
    def mismatch(
        cls,
        expected: str | None = None,
        actual: str | None = None,
        reason: MismatchReason = MismatchReason.NONE,
    ) -> CompareResult:
        """Build a mismatch result."""
        return cls(False, expected, actual, reason)

    def __bool__(self) -> bool:
        raise TypeError("CompareResult has no truth value, use result.matches")

    def describe(self, selector: str | None = None) -> str:
        """Human-readable description of this result."""
        if self.matches:
            return "HTML matches"
        if self.reason is MismatchReason.ELEMENT_NOT_FOUND:
            return f"Not found any element matching selector '{selector}'"
        if self.reason is MismatchReason.MULTIPLE_ELEMENTS_FOUND:
            return f"Found more than one element matching selector '{selector}'."

        lines = ["HTML does not match"]
        if selector is not None:
            lines.append(f"Selector: {selector}")
        lines.append(f"Expected: {self.expected}")
        lines.append(f"Actual:   {self.actual}")
        return "\n".join(lines)


CompareResult.MATCH = CompareResult(True)
CompareResult.ELEMENT_NOT_FOUND = CompareResult.mismatch(reason=MismatchReason.ELEMENT_NOT_FOUND)
CompareResult.MULTIPLE_ELEMENTS_FOUND = CompareResult.mismatch(reason=MismatchReason.MULTIPLE_ELEMENTS_FOUND)
