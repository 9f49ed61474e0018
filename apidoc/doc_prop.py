"""Properties of classes, interfaces and typedefs."""

from typing import Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.flatten import flatten


class DocProp(DocElement):
    """A property."""

    def __init__(self, parent: DocElement, data: dict[str, Any]) -> None:
        """Initialize the property from its raw record."""
        super().__init__(parent.doc, doc_types.PROP, data, parent)
        self.type = flatten(data.get("type")) or None
        self.nullable = bool(data.get("nullable", False))
        self.examples = data.get("examples") or None

    @property
    def formatted_name(self) -> str:
        """``Parent#name``, or ``Parent.name`` for static properties."""
        parent = self.parent
        if parent is None:
            return self.name
        separator = "." if self.is_static else "#"
        return f"{parent.name}{separator}{self.name}"
