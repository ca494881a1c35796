from __future__ import annotations

from .assembler import all_unique_selectors, collect_ancestors, unique_selector
from .models import (
    DEFAULT_ATTRIBUTES_TO_IGNORE,
    DEFAULT_SELECTOR_TYPES,
    SELECTOR_TYPES,
    CandidateSet,
    SelectorOptions,
    SelectorType,
)
from .soup_adapter import SoupTreeAdapter
from .tree_adapter import TreeAdapter

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ATTRIBUTES_TO_IGNORE",
    "DEFAULT_SELECTOR_TYPES",
    "SELECTOR_TYPES",
    "CandidateSet",
    "SelectorOptions",
    "SelectorType",
    "SoupTreeAdapter",
    "TreeAdapter",
    "all_unique_selectors",
    "collect_ancestors",
    "unique_selector",
]
