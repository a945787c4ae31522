"""Unit tests for repeating row groups and tables.

These tests pin the row arithmetic of :class:`~form_printer.printer.ArrayGroup`:
how parallel value arrays of different lengths are aligned, when the blank
trailing row is added, which fields are skipped once their per-row
properties run out, and why checkboxes stay out of the length alignment.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from form_printer.errors import MissingTypeError
from form_printer.printer import ArrayGroup, IdManager, Table

if typ.TYPE_CHECKING:
    from bs4 import Tag


def _rows(node: ArrayGroup, tag: str = "li") -> list[Tag]:
    soup = BeautifulSoup(node.render(), "html.parser")
    return soup.find_all(tag)


def _values(row: Tag) -> dict[str, str]:
    return {field["name"]: field["value"] for field in row.find_all("input")}


@pytest.fixture
def order_values() -> dict[str, list[str]]:
    """Parallel arrays of lengths 3, 1 and 0."""
    return {"qty": ["1", "2", "3"], "item": ["nut"], "note": []}


def _order_group(values: dict[str, typ.Any], **extra: typ.Any) -> ArrayGroup:
    return ArrayGroup(
        {
            "type": "arraygroup",
            "name": "rows",
            "values": values,
            "idmanager": IdManager(),
            "content": [
                {"type": "text", "name": "qty"},
                {"type": "text", "name": "item"},
                {"type": "text", "name": "note"},
            ],
            **extra,
        }
    )


def test_rows_are_padded_to_longest_array(order_values: dict[str, list[str]]) -> None:
    rows = _rows(_order_group(order_values))
    assert len(rows) == 4, "three stored rows plus one blank row"
    assert [_values(row) for row in rows] == [
        {"qty": "1", "item": "nut", "note": ""},
        {"qty": "2", "item": "", "note": ""},
        {"qty": "3", "item": "", "note": ""},
        {"qty": "", "item": "", "note": ""},
    ]


def test_caller_values_are_not_modified(order_values: dict[str, list[str]]) -> None:
    _order_group(order_values)
    assert order_values == {"qty": ["1", "2", "3"], "item": ["nut"], "note": []}


def test_blank_row_can_be_disabled(order_values: dict[str, list[str]]) -> None:
    assert len(_rows(_order_group(order_values, addempty=False))) == 3


def test_empty_group_renders_single_blank_row() -> None:
    rows = _rows(_order_group({}))
    assert len(rows) == 1
    assert _values(rows[0]) == {"qty": "", "item": "", "note": ""}


def test_rows_get_numbered_ids(order_values: dict[str, list[str]]) -> None:
    group = _order_group(order_values)
    assert group.tag == "ul"
    assert group.element_id == "Grouprows"
    rows = _rows(group)
    assert [row["id"] for row in rows] == ["Entryrows0", "Entryrows1", "Entryrows2", "Entryrows3"]
    assert [row.find("input")["id"] for row in rows] == [
        "Inputqty",
        "Inputqty1",
        "Inputqty2",
        "Inputqty3",
    ]


def test_per_row_error_messages() -> None:
    group = ArrayGroup(
        {
            "type": "arraygroup",
            "name": "rows",
            "values": {"qty": ["1", "x"]},
            "invalid": {"qty": [False, True]},
            "errmsg": {"qty": ["", "Not a number"]},
            "content": [{"type": "text", "name": "qty"}],
        }
    )
    rows = _rows(group)
    assert [row.find("span", class_="error") is not None for row in rows] == [
        False,
        True,
        False,
    ]
    assert rows[1].find("span", class_="error").get_text() == "Not a number"


def test_field_is_skipped_when_split_text_runs_out() -> None:
    group = ArrayGroup(
        {
            "type": "arraygroup",
            "values": {"qty": ["1", "2", "3"]},
            "addempty": False,
            "content": [
                {"type": "text", "name": "qty"},
                {"type": "label", "text": ["first", "second"]},
            ],
        }
    )
    rows = _rows(group)
    assert [[p.get_text() for p in row.find_all("p", id=False, class_=False)] for row in rows] == [
        ["first"],
        ["second"],
        [],
    ]


def test_checkboxes_do_not_take_part_in_alignment() -> None:
    group = ArrayGroup(
        {
            "type": "arraygroup",
            "values": {"qty": ["1", "2"], "sel": ["2", "9", "9", "9", "9"]},
            "content": [
                {"type": "text", "name": "qty"},
                {"type": "checkbox", "name": "sel[]", "value": ["1", "2"]},
            ],
        }
    )
    rows = _rows(group)
    assert len(rows) == 3, "the checkbox values must not stretch the group"
    boxes = [row.find("input", type="checkbox") for row in rows]
    assert boxes[0]["value"] == "1"
    assert not boxes[0].has_attr("checked")
    assert boxes[1]["value"] == "2"
    assert boxes[1]["checked"] == "checked"
    assert boxes[2] is None, "the blank row has no split value for the checkbox"


def test_nested_templates_are_aligned() -> None:
    group = ArrayGroup(
        {
            "type": "arraygroup",
            "values": {"street": ["Main St", "High St"], "city": ["Oslo"]},
            "addempty": False,
            "content": [
                {
                    "type": "div",
                    "content": [
                        {"type": "text", "name": "street"},
                        {"type": "text", "name": "city"},
                    ],
                }
            ],
        }
    )
    assert [_values(row) for row in _rows(group)] == [
        {"street": "Main St", "city": "Oslo"},
        {"street": "High St", "city": ""},
    ]


@pytest.mark.parametrize("template", ["plain text", {"name": "untyped"}])
def test_template_without_type_is_rejected(template: typ.Any) -> None:
    with pytest.raises(MissingTypeError):
        ArrayGroup({"type": "arraygroup", "content": [template]})


def test_table_layout() -> None:
    table = Table(
        {
            "type": "table",
            "name": "items",
            "addempty": True,
            "values": {"qty": ["1", "2"], "item": ["nut", "bolt"]},
            "idmanager": IdManager(),
            "content": [
                {"type": "cell", "name": "qty", "label": "Quantity"},
                {"type": "cell", "name": "item"},
            ],
        }
    )
    soup = BeautifulSoup(table.render(), "html.parser")
    assert soup.table["id"] == "viewitems"
    assert [th.get_text() for th in soup.thead.find_all("th")] == ["Quantity", "item"]
    body_rows = soup.tbody.find_all("tr")
    assert len(body_rows) == 2, "tables never add a blank row"
    assert [[td.get_text() for td in row.find_all("td")] for row in body_rows] == [
        ["1", "nut"],
        ["2", "bolt"],
    ]
    assert body_rows[0]["id"] == "Entryitems0"
