from __future__ import annotations

import re
from typing import Any, Iterable, Sequence

from .models import DEFAULT_ATTRIBUTES_TO_IGNORE, SELECTOR_TYPES, CandidateSet, SelectorType
from .tree_adapter import TreeAdapter

_CSS_SAFE_ID_PATTERN = re.compile(r"^-?[A-Za-z_\u00a0-\U0010ffff][A-Za-z0-9_\u00a0-\U0010ffff-]*$")


def extract_candidates(
    element: Any,
    adapter: TreeAdapter,
    selector_types: Iterable[SelectorType] = SELECTOR_TYPES,
    attributes_to_ignore: Sequence[str] = DEFAULT_ATTRIBUTES_TO_IGNORE,
) -> CandidateSet:
    candidates = CandidateSet()
    for selector_type in selector_types:
        if selector_type == "ID":
            candidates.id = get_id(element, adapter)
        elif selector_type == "Tag":
            candidates.tag = get_tag(element, adapter)
        elif selector_type == "Class":
            candidates.classes = get_class_selectors(element, adapter)
        elif selector_type == "Attributes":
            candidates.attributes = get_attribute_selectors(element, adapter, attributes_to_ignore)
        elif selector_type == "NthChild":
            candidates.nth_child = get_nth_child(element, adapter)
    return candidates


def get_id(element: Any, adapter: TreeAdapter) -> str | None:
    raw = adapter.attribute(element, "id")
    if not isinstance(raw, str) or raw == "":
        return None
    if not _CSS_SAFE_ID_PATTERN.fullmatch(raw):
        return f'[id="{escape_css_string(raw)}"]'
    return f"#{raw}"


def get_tag(element: Any, adapter: TreeAdapter) -> str | None:
    name = adapter.tag_name(element)
    if not isinstance(name, str) or not name:
        return None
    return name.lower().replace(":", "\\:")


def get_class_selectors(element: Any, adapter: TreeAdapter) -> list[str]:
    return [f".{escape_css_identifier(token)}" for token in normalize_classes(adapter.class_list(element))]


def get_attribute_selectors(
    element: Any,
    adapter: TreeAdapter,
    attributes_to_ignore: Sequence[str] = DEFAULT_ATTRIBUTES_TO_IGNORE,
) -> list[str]:
    ignored = set(attributes_to_ignore)
    selectors: list[str] = []
    for name, value in adapter.attributes(element):
        if not isinstance(name, str) or not name or not isinstance(value, str):
            continue
        if name in ignored:
            continue
        selectors.append(f'[{escape_css_identifier(name)}="{escape_css_string(value)}"]')
    return selectors


def get_nth_child(element: Any, adapter: TreeAdapter) -> str | None:
    position = adapter.child_index(element)
    if position is None:
        return None
    return f":nth-child({position})"


def normalize_classes(raw: Sequence[str] | str | None) -> list[str]:
    if not raw:
        return []
    if isinstance(raw, str):
        items = raw.split()
    else:
        items = [item for item in raw if isinstance(item, str)]

    seen: set[str] = set()
    normalized: list[str] = []
    for item in items:
        clean = item.strip()
        if not clean or clean in seen:
            continue
        seen.add(clean)
        normalized.append(clean)
    return normalized


def escape_css_string(value: str) -> str:
    escaped: list[str] = []
    for char in value:
        code = ord(char)
        if char in ("\\", '"'):
            escaped.append(f"\\{char}")
        elif code == 0:
            escaped.append("\ufffd")
        elif code < 0x20 or code == 0x7F:
            escaped.append(f"\\{code:x} ")
        else:
            escaped.append(char)
    return "".join(escaped)


def escape_css_identifier(value: str) -> str:
    escaped: list[str] = []
    for index, char in enumerate(value):
        leading_digit = char in "0123456789" and (index == 0 or (index == 1 and value[0] == "-"))
        plain = ord(char) >= 0xA0 or (char.isascii() and (char.isalnum() or char in ("-", "_")))
        if plain and not leading_digit:
            escaped.append(char)
        else:
            escaped.append(f"\\{ord(char):x} ")
    return "".join(escaped)
