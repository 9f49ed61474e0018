"""Methods of classes and interfaces."""

from typing import Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.doc_param import DocParam
from apidoc.return_info import parse_returns

VOID_RETURN = "**Void**"


class DocMethod(DocElement):
    """A method; owns its params."""

    def __init__(self, parent: DocElement, data: dict[str, Any]) -> None:
        """Initialize the method and adopt its params."""
        super().__init__(parent.doc, doc_types.METHOD, data, parent)
        self.examples = data.get("examples") or None
        self.returns = parse_returns(data.get("returns"))
        self.adopt_all(data.get("params"), DocParam)

    @property
    def formatted_name(self) -> str:
        """``Parent#name()``, or ``Parent.name()`` for static methods."""
        parent = self.parent
        if parent is None:
            return f"{self.name}()"
        separator = "." if self.is_static else "#"
        return f"{parent.name}{separator}{self.name}()"

    @property
    def formatted_return(self) -> str:
        """Methods without a documented return value return nothing."""
        return super().formatted_return or VOID_RETURN
