from __future__ import annotations

from typing import Any, Protocol, Sequence


class TreeAdapter(Protocol):
    """Read-only view of a host document used by the selector search.

    Elements and scopes are opaque handles owned by the host. ``parent`` only
    ever returns elements, while ``parent_scope`` returns whatever node a
    selector query should be run from for sibling-level uniqueness, which is
    the document itself for the root element.
    """

    def attribute(self, element: Any, name: str) -> str | None: ...

    def attributes(self, element: Any) -> Sequence[tuple[str, str]]: ...

    def tag_name(self, element: Any) -> str: ...

    def class_list(self, element: Any) -> Sequence[str]: ...

    def parent(self, element: Any) -> Any | None: ...

    def parent_scope(self, element: Any) -> Any | None: ...

    def document(self, element: Any) -> Any: ...

    def child_index(self, element: Any) -> int | None: ...

    def query_all(self, scope: Any, selector: str) -> Sequence[Any]: ...

    def same_element(self, left: Any, right: Any) -> bool: ...
