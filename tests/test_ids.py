"""Unit tests for DOM id generation and the navigation collector."""

from __future__ import annotations

import pytest

from form_printer.printer import IdManager, NavCollector, NavEntry


def test_first_id_is_returned_unchanged() -> None:
    ids = IdManager()
    assert ids.create_id("Inputcity") == "Inputcity"
    assert "Inputcity" in ids


def test_repeated_ids_are_numbered() -> None:
    ids = IdManager()
    produced = [ids.create_id("Boxname") for _ in range(4)]
    assert produced == ["Boxname", "Boxname1", "Boxname2", "Boxname3"]


def test_array_ids_start_at_zero() -> None:
    ids = IdManager()
    assert ids.create_id("Entryrows[]") == "Entryrows0"
    assert ids.create_id("Entryrows[]") == "Entryrows1"


@pytest.mark.parametrize(
    ("raw_id", "expected"),
    [
        ("Input first name", "Inputfirstname"),
        ("Input<x>", "Inputx"),
        ("12Boxa", "Boxa"),
        ("_:Fsmain", "Fsmain"),
        ("Box.a:b-c_d", "Box.a:b-c_d"),
    ],
)
def test_illegal_characters_are_removed(raw_id: str, expected: str) -> None:
    assert IdManager().create_id(raw_id) == expected


def test_ids_are_pairwise_distinct() -> None:
    ids = IdManager()
    raw = ["Boxa", "Boxa", "Box a", "Boxa[]", "Boxa[]", "Boxb"]
    produced = [ids.create_id(item) for item in raw]
    assert len(set(produced)) == len(produced), produced


def test_nav_collector_keeps_insertion_order() -> None:
    nav = NavCollector()
    nav.add("Person", "Fsperson")
    nav.add("Loose section")
    nav.add("Address", "Fsaddress")
    assert nav.entries() == [
        NavEntry("Fsperson", "Person"),
        NavEntry(1, "Loose section"),
        NavEntry("Fsaddress", "Address"),
    ]
    assert len(nav) == 3
