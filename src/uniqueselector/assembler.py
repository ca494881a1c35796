from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Mapping

from .models import CHILD_COMBINATOR, SelectorOptions
from .resolver import resolve_all_selectors, resolve_selector
from .tree_adapter import TreeAdapter
from .uniqueness import is_unique_in_document

_LOGGER = logging.getLogger("uniqueselector.search")


def collect_ancestors(element: Any, adapter: TreeAdapter) -> list[Any]:
    """Return ``element`` followed by its element ancestors, innermost first."""
    chain: list[Any] = []
    current = element
    while current is not None:
        chain.append(current)
        current = adapter.parent(current)
    return chain


def unique_selector(
    element: Any,
    adapter: TreeAdapter,
    options: SelectorOptions | Mapping[str, Any] | None = None,
) -> str | None:
    """Build a selector that matches ``element`` and nothing else in its document.

    Each level (the element, then its ancestors) gets the first selector
    unique among its parent's descendants. Levels are prepended one at a
    time until the joined path is unique document-wide. Returns ``None`` when
    the whole ancestor chain is not enough.
    """
    resolved = SelectorOptions.from_value(options)
    levels = _resolve_levels(collect_ancestors(element, adapter), adapter, resolved)
    _LOGGER.debug("Per-level selectors (innermost first): %s", levels)

    selector = _first_unique_path(element, levels, adapter)
    if selector is None:
        _LOGGER.info("No unique selector found after climbing %d level(s).", len(levels))
    return selector


def all_unique_selectors(
    element: Any,
    adapter: TreeAdapter,
    options: SelectorOptions | Mapping[str, Any] | None = None,
) -> list[str]:
    """Return one unique path per viable selector of ``element`` itself.

    Ancestor levels are resolved once and shared by every first-level
    selector. Paths are not deduplicated.
    """
    resolved = SelectorOptions.from_value(options)
    chain = collect_ancestors(element, adapter)
    ancestor_levels = _resolve_levels(chain[1:], adapter, resolved)
    first_levels = resolve_all_selectors(
        element,
        adapter,
        resolved.selector_types,
        resolved.attributes_to_ignore,
    )
    _LOGGER.debug("First-level selectors: %s; ancestor selectors: %s", first_levels, ancestor_levels)

    results: list[str] = []
    for first_level in first_levels:
        selector = _first_unique_path(element, [first_level, *ancestor_levels], adapter)
        if selector is None:
            _LOGGER.info("First-level selector %r did not lead to a unique path.", first_level)
            continue
        results.append(selector)
    return results


def _resolve_levels(elements: Iterable[Any], adapter: TreeAdapter, options: SelectorOptions) -> list[str]:
    levels: list[str] = []
    for item in elements:
        selector = resolve_selector(item, adapter, options.selector_types, options.attributes_to_ignore)
        if selector:
            levels.append(selector)
    return levels


def _first_unique_path(element: Any, levels: Iterable[str], adapter: TreeAdapter) -> str | None:
    path: deque[str] = deque()
    for level in levels:
        path.appendleft(level)
        selector = CHILD_COMBINATOR.join(path)
        if is_unique_in_document(element, selector, adapter):
            _LOGGER.debug("Unique path found: %s", selector)
            return selector
        _LOGGER.debug("Path not unique yet: %s", selector)
    return None
