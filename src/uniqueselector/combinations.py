from __future__ import annotations

from itertools import combinations
from typing import Any, Sequence

from .models import MAX_COMBINATION_SIZE
from .tree_adapter import TreeAdapter
from .uniqueness import is_unique_in_parent


def generate_combinations(items: Sequence[str], max_size: int = MAX_COMBINATION_SIZE) -> list[str]:
    """Concatenate every 1..max_size subset of ``items``, smaller subsets first.

    Within one size the subsets follow index order, so ``[a, b, c]`` yields
    ``a, b, c, ab, ac, bc, abc``.
    """
    upper = min(max(0, int(max_size)), len(items))
    result: list[str] = []
    for size in range(1, upper + 1):
        for picked in combinations(items, size):
            result.append("".join(picked))
    return result


def find_first_unique(element: Any, selectors: Sequence[str], adapter: TreeAdapter) -> str | None:
    for selector in selectors:
        if is_unique_in_parent(element, selector, adapter):
            return selector
    return None


def find_unique_combination(
    element: Any,
    items: Sequence[str],
    tag: str | None,
    adapter: TreeAdapter,
    max_size: int = MAX_COMBINATION_SIZE,
) -> str | None:
    if not items:
        return None

    candidates = generate_combinations(items, max_size)
    found = find_first_unique(element, candidates, adapter)
    if found is not None:
        return found

    if tag:
        return find_first_unique(element, [tag + candidate for candidate in candidates], adapter)
    return None
