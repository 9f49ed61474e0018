"""Events emitted by classes."""

from typing import Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.doc_param import DocParam


class DocEvent(DocElement):
    """An event; its params are the listener arguments."""

    def __init__(self, parent: DocElement, data: dict[str, Any]) -> None:
        """Initialize the event and adopt its params."""
        super().__init__(parent.doc, doc_types.EVENT, data, parent)
        self.adopt_all(data.get("params"), DocParam)

    @property
    def anchor(self) -> str:
        """Events are anchored with an ``e-`` prefix."""
        return f"e-{self.name}"

    @property
    def formatted_name(self) -> str:
        """``Parent#name``."""
        parent = self.parent
        return f"{parent.name}#{self.name}" if parent is not None else self.name
