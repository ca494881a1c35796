from __future__ import annotations

from typing import Any

from .tree_adapter import TreeAdapter


def is_unique_in_scope(element: Any, scope: Any, selector: str | None, adapter: TreeAdapter) -> bool:
    if scope is None or not selector:
        return False
    matches = adapter.query_all(scope, selector)
    return len(matches) == 1 and adapter.same_element(matches[0], element)


def is_unique_in_parent(element: Any, selector: str | None, adapter: TreeAdapter) -> bool:
    return is_unique_in_scope(element, adapter.parent_scope(element), selector, adapter)


def is_unique_in_document(element: Any, selector: str | None, adapter: TreeAdapter) -> bool:
    return is_unique_in_scope(element, adapter.document(element), selector, adapter)
