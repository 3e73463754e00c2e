import pytest
from bs4 import BeautifulSoup, Tag

from htmlequiv.parsing import parse_fragment, render_open_tag
from htmlequiv.tree import (
    NodeKind,
    NodeTreeView,
    attribute_map,
    class_list,
    element_id,
    is_inline,
    node_kind,
)


def describe(nodes):
    """Render nodes as tag names and text contents for easy comparison."""
    return [f"<{node.name}>" if isinstance(node, Tag) else str(node) for node in nodes]


def test_view_walks_in_document_order():
    body = parse_fragment("<div><p>a<b>b</b></p><!--comment--><span>c</span></div>")

    assert describe(NodeTreeView(body)) == ["<div>", "<p>", "a", "<b>", "b", "<span>", "c"]


def test_view_excludes_root_by_default():
    body = parse_fragment("<div><span>x</span></div>")
    div = body.div

    assert describe(NodeTreeView(div)) == ["<span>", "x"]


def test_view_with_root_excludes_siblings():
    body = parse_fragment("<p>before</p><div><span>y</span></div><p>after</p>")
    div = body.div

    assert describe(NodeTreeView(div, include_root=True)) == ["<div>", "<span>", "y"]


def test_view_skips_empty_text_by_default():
    body = parse_fragment("<div> <p>x</p>\n</div>")

    assert describe(NodeTreeView(body)) == ["<div>", "<p>", "x"]


def test_view_keeps_empty_text_when_asked():
    body = parse_fragment("<div> <p>x</p>\n</div>")

    assert describe(NodeTreeView(body, skip_empty_text=False)) == ["<div>", " ", "<p>", "x", "\n"]


def test_view_keeps_non_breaking_space():
    body = parse_fragment("<p>&nbsp;</p>")

    assert describe(NodeTreeView(body)) == ["<p>", "\xa0"]


def test_view_is_restartable():
    body = parse_fragment("<ul><li>1</li><li>2</li></ul>")
    view = NodeTreeView(body)

    first = describe(view)
    assert first == describe(view)
    assert first == ["<ul>", "<li>", "1", "<li>", "2"]


def test_view_children_uses_same_filter():
    body = parse_fragment("<div> <!--c--> <p>x</p> text </div>")
    view = NodeTreeView(body)

    assert describe(view.children(body.div)) == ["<p>", " text "]
    assert view.children(body.div.p.string) == []


def test_node_kind():
    soup = BeautifulSoup("<!DOCTYPE html><p>x<!--c--></p>", "html5lib")
    paragraph = soup.p

    assert node_kind(soup.contents[0]) is NodeKind.OTHER
    assert node_kind(paragraph) is NodeKind.ELEMENT
    assert node_kind(paragraph.contents[0]) is NodeKind.TEXT
    assert node_kind(paragraph.contents[1]) is NodeKind.COMMENT


@pytest.mark.parametrize(
    "markup, expected",
    [
        pytest.param("<p class='b a  b'>x</p>", ["b", "a"], id="duplicates dropped"),
        pytest.param("<p class=' one\ttwo\n'>x</p>", ["one", "two"], id="ascii whitespace"),
        pytest.param("<p>x</p>", [], id="no class"),
        pytest.param("<p class=''>x</p>", [], id="empty class"),
    ],
)
def test_class_list(markup, expected):
    assert class_list(parse_fragment(markup).p) == expected


def test_element_id():
    body = parse_fragment("<p id='one'>x</p><p>y</p>")
    first, second = body.find_all("p")

    assert element_id(first) == "one"
    assert element_id(second) is None


def test_attribute_map_excludes_id_and_class():
    paragraph = parse_fragment("<p id='a' class='b' title='c' data-x=''>x</p>").p

    assert attribute_map(paragraph) == {(None, "title"): "c", (None, "data-x"): ""}


def test_is_inline():
    body = parse_fragment("<div><span>x</span><strong>y</strong></div>")

    assert is_inline(body.span)
    assert is_inline(body.strong)
    assert not is_inline(body.div)
    assert not is_inline(None)


def test_render_open_tag():
    paragraph = parse_fragment("<p id='one' title='a \"quoted\" value'>text</p>").p

    assert render_open_tag(paragraph) == '<p id="one" title="a &quot;quoted&quot; value">'
