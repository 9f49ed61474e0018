"""Top-level interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apidoc import doc_types
from apidoc.doc_class import DocClass

if TYPE_CHECKING:
    from apidoc.doc import Doc


class DocInterface(DocClass):
    """An interface; shaped exactly like a class."""

    def __init__(self, doc: Doc, data: dict[str, Any]) -> None:
        """Initialize the interface and adopt its members."""
        super().__init__(doc, data, doc_types.INTERFACE)
