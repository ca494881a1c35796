from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError

if TYPE_CHECKING:
    from playwright.sync_api import ElementHandle, Page

_LOGGER = logging.getLogger("uniqueselector.adapter")

_ATTRIBUTES_SCRIPT = "(el) => Array.from(el.attributes || [], (attr) => [attr.name, attr.value])"
_CLASS_LIST_SCRIPT = "(el) => Array.from(el.classList || [])"
_TAG_NAME_SCRIPT = "(el) => el.tagName || ''"
_PARENT_ELEMENT_SCRIPT = "(el) => el.parentElement"
_PARENT_IS_DOCUMENT_SCRIPT = (
    "(el) => Boolean(el.parentNode) && el.parentNode.nodeType === Node.DOCUMENT_NODE"
)
_CHILD_INDEX_SCRIPT = """
(el) => {
  const parent = el.parentNode;
  if (!parent || !parent.children) {
    return null;
  }
  let position = 0;
  for (const child of parent.children) {
    position += 1;
    if (child === el) {
      return position;
    }
  }
  return null;
}
"""
_SAME_ELEMENT_SCRIPT = "(el, other) => el === other"


class PlaywrightTreeAdapter:
    """TreeAdapter over a live page driven by Playwright's sync API."""

    def __init__(self, page: Page) -> None:
        self.page = page

    def attribute(self, element: ElementHandle, name: str) -> str | None:
        return element.get_attribute(name)

    def attributes(self, element: ElementHandle) -> list[tuple[str, str]]:
        payload = element.evaluate(_ATTRIBUTES_SCRIPT)
        pairs: list[tuple[str, str]] = []
        for item in payload or []:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                continue
            name, value = item
            if isinstance(name, str) and isinstance(value, str):
                pairs.append((name, value))
        return pairs

    def tag_name(self, element: ElementHandle) -> str:
        return str(element.evaluate(_TAG_NAME_SCRIPT) or "")

    def class_list(self, element: ElementHandle) -> list[str]:
        payload = element.evaluate(_CLASS_LIST_SCRIPT)
        return [item for item in payload or [] if isinstance(item, str)]

    def parent(self, element: ElementHandle) -> ElementHandle | None:
        handle = element.evaluate_handle(_PARENT_ELEMENT_SCRIPT)
        parent = handle.as_element()
        if parent is None:
            handle.dispose()
        return parent

    def parent_scope(self, element: ElementHandle) -> ElementHandle | Page | None:
        parent = self.parent(element)
        if parent is not None:
            return parent
        if element.evaluate(_PARENT_IS_DOCUMENT_SCRIPT):
            return self.page
        return None

    def document(self, element: ElementHandle) -> Page:
        return self.page

    def child_index(self, element: ElementHandle) -> int | None:
        position = element.evaluate(_CHILD_INDEX_SCRIPT)
        if isinstance(position, int) and position > 0:
            return position
        return None

    def query_all(self, scope: ElementHandle | Page, selector: str) -> list[ElementHandle]:
        try:
            return list(scope.query_selector_all(selector))
        except PlaywrightError as exc:
            _LOGGER.debug("Selector rejected by browser: %r (%s)", selector, exc)
            return []

    def same_element(self, left: Any, right: Any) -> bool:
        if left is right:
            return True
        return bool(left.evaluate(_SAME_ELEMENT_SCRIPT, right))
