from __future__ import annotations

from typing import Any, Sequence

from .candidates import extract_candidates
from .combinations import find_unique_combination
from .models import (
    DEFAULT_ATTRIBUTES_TO_IGNORE,
    DEFAULT_SELECTOR_TYPES,
    UNIVERSAL_SELECTOR,
    CandidateSet,
    SelectorType,
)
from .tree_adapter import TreeAdapter
from .uniqueness import is_unique_in_parent


def resolve_selector(
    element: Any,
    adapter: TreeAdapter,
    selector_types: Sequence[SelectorType] = DEFAULT_SELECTOR_TYPES,
    attributes_to_ignore: Sequence[str] = DEFAULT_ATTRIBUTES_TO_IGNORE,
) -> str:
    """Return the first selector, in ``selector_types`` order, unique under the parent.

    Falls back to ``*`` when no selector type produced one.
    """
    candidates = extract_candidates(element, adapter, selector_types, attributes_to_ignore)
    for selector_type in selector_types:
        found = _resolve_type(element, selector_type, candidates, adapter)
        if found is not None:
            return found
    return UNIVERSAL_SELECTOR


def resolve_all_selectors(
    element: Any,
    adapter: TreeAdapter,
    selector_types: Sequence[SelectorType] = DEFAULT_SELECTOR_TYPES,
    attributes_to_ignore: Sequence[str] = DEFAULT_ATTRIBUTES_TO_IGNORE,
) -> list[str]:
    candidates = extract_candidates(element, adapter, selector_types, attributes_to_ignore)
    found: list[str] = []
    for selector_type in selector_types:
        selector = _resolve_type(element, selector_type, candidates, adapter)
        if selector is not None:
            found.append(selector)
    return found


def _resolve_type(
    element: Any,
    selector_type: SelectorType,
    candidates: CandidateSet,
    adapter: TreeAdapter,
) -> str | None:
    if selector_type == "ID":
        if candidates.id is not None and is_unique_in_parent(element, candidates.id, adapter):
            return candidates.id
        return None

    if selector_type == "Tag":
        if candidates.tag is not None and is_unique_in_parent(element, candidates.tag, adapter):
            return candidates.tag
        return None

    if selector_type == "Class":
        return find_unique_combination(element, candidates.classes, candidates.tag, adapter)

    if selector_type == "Attributes":
        return find_unique_combination(element, candidates.attributes, candidates.tag, adapter)

    if selector_type == "NthChild":
        # Structural position never fails for an element with a parent.
        return candidates.nth_child

    return None
