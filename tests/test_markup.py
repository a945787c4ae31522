"""Unit tests for the markup node serializer."""

from __future__ import annotations

from markupsafe import Markup

from form_printer.markup import MarkupNode, render


def test_void_elements_never_close() -> None:
    node = MarkupNode("input", {"type": "text"}, ["ignored"])
    assert render(node) == '<input type="text">'


def test_single_text_child_is_inline() -> None:
    assert render(MarkupNode("label", {"for": "a"}, "Name")) == '<label for="a">Name</label>'


def test_single_simple_child_is_inline() -> None:
    node = MarkupNode("p", {}, [MarkupNode("span", {}, "x")])
    assert render(node, 4) == "    <p><span>x</span></p>"


def test_two_children_are_put_on_indented_lines() -> None:
    node = MarkupNode("div", {}, [MarkupNode("span", {}, "a"), "b"])
    assert render(node, 2, 4) == "  <div>\n      <span>a</span>\n      b\n  </div>"


def test_complex_single_child_is_expanded() -> None:
    inner = MarkupNode("ul", {}, [MarkupNode("li", {}, "1"), MarkupNode("li", {}, "2")])
    outer = MarkupNode("nav", {}, [inner])
    expected = "\n".join(
        [
            "<nav>",
            "  <ul>",
            "    <li>1</li>",
            "    <li>2</li>",
            "  </ul>",
            "</nav>",
        ]
    )
    assert render(outer) == expected


def test_whitespace_insensitive_nodes_concatenate_children() -> None:
    node = MarkupNode(
        "div", {}, [MarkupNode("input", {"type": "submit"}), MarkupNode("input", {"type": "reset"})]
    )
    node.skip_ws = True
    assert render(node, 2) == '  <div><input type="submit"><input type="reset"></div>'


def test_attribute_order_and_flags() -> None:
    node = MarkupNode(
        "input",
        {"value": "v", "disabled": True, "checked": False, "id": "i", "type": "t", "name": "n"},
    )
    assert render(node) == '<input type="t" name="n" id="i" value="v" disabled>'


def test_text_and_attributes_are_escaped() -> None:
    node = MarkupNode("p", {"title": 'say "hi"'}, "<b>&</b>")
    assert render(node) == '<p title="say &#34;hi&#34;">&lt;b&gt;&amp;&lt;/b&gt;</p>'


def test_markup_content_is_inserted_verbatim() -> None:
    node = MarkupNode("p", {}, Markup("<em>ok</em>"))
    assert render(node) == "<p><em>ok</em></p>"


def test_push_and_unshift_accept_tuple_specs() -> None:
    node = MarkupNode("ul")
    node.push(("li", {}, "second"))
    node.unshift(("li", {"class": "first"}, "first"))
    assert [child.tag for child in node.content] == ["li", "li"]
    assert node.content[0].attrs == {"class": "first"}
    assert node.is_complex()


def test_empty_element_renders_open_and_close() -> None:
    assert str(MarkupNode("textarea", {"name": "t"})) == '<textarea name="t"></textarea>'
