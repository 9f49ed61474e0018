"""Top-level typedefs: object shapes, unions and function signatures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.doc_param import DocParam
from apidoc.doc_prop import DocProp
from apidoc.flatten import flatten
from apidoc.return_info import parse_returns

if TYPE_CHECKING:
    from apidoc.doc import Doc


class DocTypedef(DocElement):
    """A typedef; owns the props of object shapes and the params of callbacks."""

    def __init__(self, doc: Doc, data: dict[str, Any]) -> None:
        """Initialize the typedef and adopt its props and params."""
        super().__init__(doc, doc_types.TYPEDEF, data)
        self.type = flatten(data.get("type")) or None
        self.nullable = bool(data.get("nullable", False))
        self.examples = data.get("examples") or None
        self.returns = parse_returns(data.get("returns"))
        self.adopt_all(data.get("props"), DocProp)
        self.adopt_all(data.get("params"), DocParam)
