"""Per-render registries shared by every node of one form."""

from __future__ import annotations

import dataclasses as dc
import re

from .._constants import ARRAY_SUFFIX

_ILLEGAL_ID_CHARS = re.compile(r"^[^A-Za-z]+|[^A-Za-z0-9_:.-]")


class IdManager:
    """Hand out DOM ids that are unique within one form.

    The first request for a base id returns it unchanged so anchors stay
    predictable; later requests append an increasing counter. Array field
    names (ending in ``[]``) are numbered from ``0``:

    >>> ids = IdManager()
    >>> ids.create_id("Inputcity"), ids.create_id("Inputcity")
    ('Inputcity', 'Inputcity1')
    >>> ids.create_id("Entryrows[]"), ids.create_id("Entryrows[]")
    ('Entryrows0', 'Entryrows1')
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def create_id(self, raw_id: str) -> str:
        """Return a sanitized id for ``raw_id`` that was not handed out before."""
        suffix = ""
        if raw_id.endswith(ARRAY_SUFFIX):
            raw_id = raw_id[: -len(ARRAY_SUFFIX)]
            suffix = "0"
        base = _ILLEGAL_ID_CHARS.sub("", raw_id)
        if base in self._counters:
            self._counters[base] += 1
            suffix = str(self._counters[base])
        else:
            self._counters[base] = 0
        return f"{base}{suffix}"

    def __contains__(self, base: object) -> bool:
        return base in self._counters


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """Anchor link collected for the form navigation menu."""

    anchor: str | int
    caption: str


class NavCollector:
    """Ordered anchor → caption list filled by grouping nodes."""

    def __init__(self) -> None:
        self._entries: dict[str | int, str] = {}

    def add(self, caption: str, key: str | None = None) -> None:
        """Record ``caption`` under ``key``, or append it when no key is given."""
        if key is None:
            self._entries[len(self._entries)] = caption
        else:
            self._entries[key] = caption

    def entries(self) -> list[NavEntry]:
        return [NavEntry(anchor, caption) for anchor, caption in self._entries.items()]

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["IdManager", "NavCollector", "NavEntry"]
