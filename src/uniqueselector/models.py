from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Sequence

SelectorType = Literal["ID", "Class", "Tag", "Attributes", "NthChild"]

SELECTOR_TYPES: tuple[SelectorType, ...] = ("ID", "Class", "Tag", "Attributes", "NthChild")
DEFAULT_SELECTOR_TYPES: tuple[SelectorType, ...] = ("ID", "Class", "Tag", "NthChild")
DEFAULT_ATTRIBUTES_TO_IGNORE: tuple[str, ...] = ("id", "class", "length")

UNIVERSAL_SELECTOR = "*"
CHILD_COMBINATOR = " > "
MAX_COMBINATION_SIZE = 3


@dataclass(slots=True)
class CandidateSet:
    id: str | None = None
    tag: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    nth_child: str | None = None


@dataclass(frozen=True, slots=True)
class SelectorOptions:
    selector_types: tuple[SelectorType, ...] = DEFAULT_SELECTOR_TYPES
    attributes_to_ignore: tuple[str, ...] = DEFAULT_ATTRIBUTES_TO_IGNORE

    @classmethod
    def from_value(cls, value: SelectorOptions | Mapping[str, Any] | None) -> SelectorOptions:
        if value is None:
            return cls()
        if isinstance(value, SelectorOptions):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(f"Options must be a mapping, got {type(value).__name__}.")

        raw_types = _first_present(value, "selector_types", "selectorTypes")
        raw_ignore = _first_present(value, "attributes_to_ignore", "attributesToIgnore")

        selector_types = DEFAULT_SELECTOR_TYPES if raw_types is None else parse_selector_types(raw_types)
        attributes_to_ignore = (
            DEFAULT_ATTRIBUTES_TO_IGNORE if raw_ignore is None else _parse_attribute_names(raw_ignore)
        )
        return cls(selector_types=selector_types, attributes_to_ignore=attributes_to_ignore)


def parse_selector_types(raw: Sequence[str] | str) -> tuple[SelectorType, ...]:
    if isinstance(raw, str):
        items = [item.strip() for item in raw.split(",") if item.strip()]
    elif isinstance(raw, Sequence):
        items = list(raw)
    else:
        raise ValueError("selector_types must be a sequence of selector type names.")

    parsed: list[SelectorType] = []
    for item in items:
        if item not in SELECTOR_TYPES:
            allowed = ", ".join(SELECTOR_TYPES)
            raise ValueError(f"Unknown selector type {item!r}; expected one of: {allowed}.")
        parsed.append(item)
    return tuple(parsed)


def _parse_attribute_names(raw: Sequence[str] | str) -> tuple[str, ...]:
    if isinstance(raw, str):
        return tuple(item.strip() for item in raw.split(",") if item.strip())
    if not isinstance(raw, Sequence):
        raise ValueError("attributes_to_ignore must be a sequence of attribute names.")
    return tuple(str(item) for item in raw)


def _first_present(value: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in value:
            return value[key]
    return None
