"""Parameters of methods, events and function typedefs."""

from typing import Any

from apidoc import doc_types
from apidoc.doc_element import DocElement
from apidoc.flatten import flatten


class DocParam(DocElement):
    """A single parameter."""

    def __init__(self, parent: DocElement, data: dict[str, Any]) -> None:
        """Initialize the param from its raw record."""
        super().__init__(parent.doc, doc_types.PARAM, data, parent)
        self.type = flatten(data.get("type")) or None
        self.nullable = bool(data.get("nullable", False))
        self.optional = bool(data.get("optional", False))
        self.default = data.get("default")
        self.variable = bool(data.get("variable", False))

    @property
    def formatted_name(self) -> str:
        """Optional params are shown in brackets."""
        return f"`[{self.name}]`" if self.optional else f"`{self.name}`"

    @property
    def formatted_type(self) -> str:
        """Variadic params are prefixed with ``...``."""
        rendered = super().formatted_type
        return f"...{rendered}" if self.variable else rendered

    @property
    def url(self) -> str | None:
        """Params have no page of their own; they live on their owner's."""
        parent = self.parent
        return parent.url if parent is not None else None

    def to_json(self) -> dict[str, Any]:
        """Dump the param, including its flags."""
        data = super().to_json()
        data["optional"] = self.optional
        if self.default is not None:
            data["default"] = self.default
        if self.variable:
            data["variable"] = True
        return data
