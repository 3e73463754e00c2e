import pytest

from htmlequiv import DEFAULT, FRAGMENT, CompareOptions, ConfigurationError, ElementSelectionMode, HtmlComparer

SINGLE = HtmlComparer(CompareOptions(element_selection_mode=ElementSelectionMode.SINGLE))


@pytest.mark.parametrize("selector", [None, "", " \t"])
def test_invalid_selector_raises(selector):
    with pytest.raises(ConfigurationError):
        DEFAULT.contains("<p>text</p>", selector)


@pytest.mark.parametrize("html", [None, "", "   "])
def test_blank_html_contains_nothing(html):
    assert DEFAULT.contains(html, "p") is False


def test_element_found():
    assert DEFAULT.contains("<div><p class='lead'>text</p></div>", "div > p.lead") is True


def test_element_not_found():
    assert DEFAULT.contains("<div><p>text</p></div>", "span") is False


def test_document_structure_is_searchable():
    assert DEFAULT.contains("<p>text</p>", "html > body > p")
    assert DEFAULT.contains("<title>x</title>", "head > title")


def test_fragment_has_body_as_root():
    assert FRAGMENT.contains("<p>text</p>", "p")
    assert not FRAGMENT.contains("<p>text</p>", "body")


def test_single_mode_requires_exactly_one_match():
    assert SINGLE.contains("<p>one</p>", "p")
    assert not SINGLE.contains("<p>one</p><p>two</p>", "p")
    assert not SINGLE.contains("<p>one</p>", "span")


@pytest.mark.parametrize("mode", [ElementSelectionMode.FIRST, ElementSelectionMode.ALL, ElementSelectionMode.ANY])
def test_other_modes_accept_several_matches(mode):
    comparer = HtmlComparer(CompareOptions(element_selection_mode=mode))

    assert comparer.contains("<p>one</p><p>two</p>", "p")


def test_document_selectors(simple_html):
    assert DEFAULT.contains(simple_html, "nav a.active")
    assert DEFAULT.contains(simple_html, "#indented > span")
    assert not DEFAULT.contains(simple_html, "footer")
    assert not SINGLE.contains(simple_html, "li.item")
    assert SINGLE.contains(simple_html, "h1")
