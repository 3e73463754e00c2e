import pytest

from htmlequiv import CompareResult, MismatchReason


def test_match():
    result = CompareResult.MATCH

    assert result.matches
    assert result.expected is None
    assert result.actual is None
    assert result.reason is None


def test_mismatch_carries_payload():
    result = CompareResult.mismatch("<p>a</p>", "<p>b</p>")

    assert not result.matches
    assert result.expected == "<p>a</p>"
    assert result.actual == "<p>b</p>"
    assert result.reason is MismatchReason.NONE


def test_results_are_values():
    assert CompareResult.mismatch("a", "b") == CompareResult.mismatch("a", "b")
    assert CompareResult.mismatch("a", "b") != CompareResult.mismatch("a", "c")
    assert CompareResult.MATCH == CompareResult(True)


def test_reason_results():
    assert CompareResult.ELEMENT_NOT_FOUND.reason is MismatchReason.ELEMENT_NOT_FOUND
    assert CompareResult.MULTIPLE_ELEMENTS_FOUND.reason is MismatchReason.MULTIPLE_ELEMENTS_FOUND
    assert not CompareResult.ELEMENT_NOT_FOUND.matches
    assert CompareResult.ELEMENT_NOT_FOUND != CompareResult.mismatch()


def test_result_has_no_truth_value():
    with pytest.raises(TypeError):
        bool(CompareResult.MATCH)


def test_results_are_immutable():
    with pytest.raises(AttributeError):
        CompareResult.MATCH.matches = False


def test_describe_match():
    assert CompareResult.MATCH.describe() == "HTML matches"


def test_describe_not_found():
    assert CompareResult.ELEMENT_NOT_FOUND.describe(".x") == "Not found any element matching selector '.x'"


def test_describe_multiple():
    assert CompareResult.MULTIPLE_ELEMENTS_FOUND.describe("p") == "Found more than one element matching selector 'p'."


def test_describe_mismatch():
    result = CompareResult.mismatch("<p>a</p>", "<p>b</p>")

    assert result.describe() == "HTML does not match\nExpected: <p>a</p>\nActual:   <p>b</p>"
    assert result.describe("main").splitlines()[1] == "Selector: main"
