"""Top-level classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.doc_event import DocEvent
from apidoc.doc_method import DocMethod
from apidoc.doc_prop import DocProp

if TYPE_CHECKING:
    from apidoc.doc import Doc


def _as_inherits(value: Any) -> list[Any] | None:
    """Normalize ``extends``/``implements``: a bare name becomes a one-item list."""
    if not value:
        return None
    if isinstance(value, list):
        return value
    return [value]


class DocClass(DocElement):
    """A class; owns its props, methods and events."""

    def __init__(
        self,
        doc: Doc,
        data: dict[str, Any],
        doc_type: str = doc_types.CLASS,
    ) -> None:
        """Initialize the class and adopt its members."""
        super().__init__(doc, doc_type, data)
        self.extends = _as_inherits(data.get("extends"))
        self.implements = _as_inherits(data.get("implements"))
        self.examples = data.get("examples") or None
        self.construct: dict[str, Any] | None = data.get("construct")
        self.adopt_all(data.get("props"), DocProp)
        self.adopt_all(data.get("methods"), DocMethod)
        self.adopt_all(data.get("events"), DocEvent)
