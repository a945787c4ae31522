"""Unit tests for composite form entries (wrapper, label, message and control).

Usage
-----
Run ``pytest tests/test_element.py -v``. BeautifulSoup is used where the
assertions care about structure rather than exact whitespace.
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from form_printer.labels import MappingLabelHandler
from form_printer.printer import Checkbox, Element, File, IdManager


def _element(**config: typ.Any) -> Element:
    config.setdefault("idmanager", IdManager())
    return Element(config)


def test_text_field_end_to_end() -> None:
    element = _element(name="f", type="text", label="Field", values={"f": "x"})
    assert element.render() == "\n".join(
        [
            '<p id="Boxf" class="text">',
            '  <label for="Inputf">Field</label>',
            '  <input type="text" name="f" id="Inputf" value="x">',
            "</p>",
        ]
    )


def test_default_label_is_canonical_name() -> None:
    element = _element(name="emails[]", type="text")
    soup = BeautifulSoup(element.render(), "html.parser")
    label = soup.find("label")
    assert label.get_text() == "emails"
    assert label["for"] == "Inputemails0"


def test_default_label_uses_label_handler() -> None:
    labels = MappingLabelHandler({"city": "Town"})
    element = _element(name="city", type="text", labels=labels)
    soup = BeautifulSoup(element.render(), "html.parser")
    assert soup.find("label").get_text() == "Town"


def test_invalid_field_shows_message_before_control() -> None:
    element = _element(
        name="mail",
        type="text",
        values={"mail": "nope"},
        invalid={"mail": True},
        errmsg={"mail": "Not an address"},
    )
    assert [child.tag for child in element.content] == ["label", "span", "input"]
    error = element.content[1]
    assert error.attrs == {"class": "error"}
    assert error.content == ["Not an address"]


def test_valid_field_has_no_message() -> None:
    element = _element(name="mail", type="text", invalid={"mail": False}, errmsg={"mail": "x"})
    assert [child.tag for child in element.content] == ["label", "input"]


def test_disabled_control_is_followed_by_one_hidden_copy() -> None:
    element = _element(name="f", type="text", fixed=True, values={"f": "x"})
    soup = BeautifulSoup(element.render(), "html.parser")
    inputs = soup.find_all("input")
    assert len(inputs) == 2, "exactly one hidden copy is expected"
    control, hidden = inputs
    assert control.has_attr("disabled")
    assert hidden["type"] == "hidden"
    assert hidden["name"] == "f"
    assert hidden["value"] == "x"
    assert control.find_next_sibling() is hidden


def test_wrapper_keeps_css_class_and_tag() -> None:
    element = _element(name="n", type="text", tag="div", **{"class": "wide"})
    assert element.tag == "div"
    assert element.attrs == {"id": "Boxn", "class": "text wide"}
    control = element.content[-1]
    assert control.attrs["class"] == "wide"
    assert control.element_id == "Inputn"


def test_selection_builds_select_control() -> None:
    element = _element(
        name="country",
        type="select",
        selection={"de": "Germany", "fr": "France"},
        values={"country": "fr"},
    )
    soup = BeautifulSoup(element.render(), "html.parser")
    select = soup.find("select")
    assert select["id"] == "Selcountry"
    assert soup.find("label")["for"] == "Selcountry"
    assert soup.find("option", selected=True)["value"] == "fr"


class TestCheckbox:
    """Checkboxes bound to a list of checked values."""

    def _build(self, value: str) -> Checkbox:
        return Checkbox(
            {
                "type": "checkbox",
                "name": "opts[]",
                "value": value,
                "values": {"opts": ["a", "b"]},
                "idmanager": IdManager(),
            }
        )

    def test_checked_when_value_is_bound(self) -> None:
        control = self._build("b").content[-1]
        assert control.attrs["checked"] == "checked"
        assert control.attrs["value"] == "b"
        assert control.element_id == "Checkopts0"

    def test_unchecked_otherwise(self) -> None:
        control = self._build("c").content[-1]
        assert "checked" not in control.attrs
        assert control.attrs["value"] == "c"


class TestFile:
    """File uploads with an already stored file."""

    def test_stored_path_is_kept_in_hidden_field(self) -> None:
        field = File(
            {
                "type": "file",
                "name": "doc",
                "values": {"doc": "/uploads/a.pdf"},
                "idmanager": IdManager(),
            }
        )
        soup = BeautifulSoup(field.render(), "html.parser")
        upload = soup.find("input", type="file")
        assert upload["id"] == "Filedoc"
        assert not upload.has_attr("value")
        hidden = soup.find("input", type="hidden")
        assert hidden["name"] == "doc"
        assert hidden["value"] == "/uploads/a.pdf"

    def test_fixed_file_renders_only_hidden_field(self) -> None:
        field = File(
            {"type": "file", "name": "doc[]", "fixed": True, "values": {"doc": ["/a.pdf"]}}
        )
        assert field.render() == (
            '<p class="file"><input type="hidden" name="doc[]" value="/a.pdf"></p>'
        )

    def test_display_items_are_appended(self) -> None:
        field = File(
            {
                "type": "file",
                "name": "doc",
                "display": [("a", {"href": "/a.pdf"}, "current file")],
            }
        )
        link = BeautifulSoup(field.render(), "html.parser").find("a")
        assert link["href"] == "/a.pdf"
        assert link.get_text() == "current file"
