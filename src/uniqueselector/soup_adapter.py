from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

_LOGGER = logging.getLogger("uniqueselector.adapter")


class SoupTreeAdapter:
    """TreeAdapter over a parsed BeautifulSoup document.

    bs4 compares tags structurally, so identity checks here always use ``is``.
    """

    def attribute(self, element: Tag, name: str) -> str | None:
        return _attribute_text(element.attrs.get(name))

    def attributes(self, element: Tag) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for name, raw in element.attrs.items():
            if not isinstance(name, str):
                continue
            value = _attribute_text(raw)
            if value is None:
                continue
            pairs.append((name, value))
        return pairs

    def tag_name(self, element: Tag) -> str:
        return element.name or ""

    def class_list(self, element: Tag) -> list[str]:
        raw = element.attrs.get("class")
        if raw is None:
            return []
        if isinstance(raw, str):
            return raw.split()
        return [item for item in raw if isinstance(item, str)]

    def parent(self, element: Tag) -> Tag | None:
        parent = element.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return parent

    def parent_scope(self, element: Tag) -> Tag | None:
        return element.parent

    def document(self, element: Tag) -> Tag:
        current = element
        while current.parent is not None:
            current = current.parent
        return current

    def child_index(self, element: Tag) -> int | None:
        parent = element.parent
        if parent is None:
            return None
        position = 0
        for sibling in parent.children:
            if not isinstance(sibling, Tag):
                continue
            position += 1
            if sibling is element:
                return position
        return None

    def query_all(self, scope: Tag, selector: str) -> list[Tag]:
        try:
            return list(scope.select(selector))
        except SelectorSyntaxError as exc:
            _LOGGER.debug("Selector rejected by soupsieve: %r (%s)", selector, exc)
            return []

    def same_element(self, left: Any, right: Any) -> bool:
        return left is right


def _attribute_text(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (list, tuple)):
        if not all(isinstance(item, str) for item in raw):
            return None
        return " ".join(raw)
    return None
