"""Base class for every documented element in the index tree."""

from __future__ import annotations

import re
import weakref
from typing import TYPE_CHECKING, Any

from apidoc import doc_types
from apidoc.doc_base import DocBase
from apidoc.element_card import BLANK_FIELD_NAME, ElementCard, md_codeblock
from apidoc.flatten import flatten
from apidoc.format_description import format_description

if TYPE_CHECKING:
    from apidoc.doc import Doc
    from apidoc.return_info import ReturnInfo

WORD_RE = re.compile(r"\w+")


class DocElement(DocBase):
    """A class, interface, typedef or member.

    Subclasses fill in the kind-specific fields (``type``, ``returns``,
    ``examples``, ``extends``/``implements``) and adopt their own children.
    The parent is held weakly; ownership runs from the tree downwards.
    """

    def __init__(
        self,
        doc: Doc,
        doc_type: str,
        data: dict[str, Any],
        parent: DocElement | None = None,
    ) -> None:
        """Initialize the fields every element kind shares."""
        super().__init__()
        self.doc = doc
        self.doc_type = doc_type
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self.name = str(data["name"])
        self.description: str | None = data.get("description")
        self.meta: dict[str, Any] = data.get("meta") or {}
        self.scope: str | None = data.get("scope")
        self.deprecated = bool(data.get("deprecated", False))
        self.access: str = data.get("access") or doc_types.PUBLIC
        self.type: list[str] | None = None
        self.nullable: bool | None = None
        self.returns: ReturnInfo | None = None
        self.examples: list[str] | None = None
        self.extends: list[Any] | None = None
        self.implements: list[Any] | None = None

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"<{type(self).__name__} {self.formatted_name}>"

    # -----------------------------
    # Identity and links
    # -----------------------------

    @property
    def parent(self) -> DocElement | None:
        """The owning element, or ``None`` for top-level elements."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_static(self) -> bool:
        """Whether the member belongs to the class rather than instances."""
        return self.scope == doc_types.STATIC

    @property
    def is_private(self) -> bool:
        """Whether the element is marked private."""
        return self.access == doc_types.PRIVATE

    @property
    def formatted_name(self) -> str:
        """Name used as link text."""
        return self.name

    @property
    def anchor(self) -> str:
        """Scroll target of this element on its parent's page."""
        return f"s-{self.name}" if self.is_static else self.name

    @property
    def url(self) -> str | None:
        """Documentation page for this element."""
        base = self.doc.base_docs_url
        if not base:
            return None
        parent = self.parent
        if parent is not None:
            path = f"{parent.doc_type}/{parent.name}?scrollTo={self.anchor}"
        else:
            path = f"{self.doc_type}/{self.name}"
        return f"{base}/{path}"

    @property
    def source_url(self) -> str | None:
        """Link to the line in the repository that documents this element."""
        repo_url = self.doc.repo_url
        if not repo_url or not self.meta.get("file"):
            return None
        path = self.meta.get("path")
        location = f"{path}/{self.meta['file']}" if path else self.meta["file"]
        return f"{repo_url}/{location}#L{self.meta.get('line', 1)}"

    @property
    def link(self) -> str:
        """Markdown link to this element."""
        return f"[{self.formatted_name}]({self.url})"

    # -----------------------------
    # Types
    # -----------------------------

    @property
    def type_element(self) -> DocElement | None:
        """The first top-level element named by this element's type, if any."""
        if not self.type:
            return None
        for text in self.type:
            if WORD_RE.fullmatch(text):
                element = self.doc.children.get(text.lower())
                if element is not None:
                    return element
        return None

    @property
    def formatted_type(self) -> str:
        """Bold, cross-linked rendering of ``type``."""
        return f"{'?' if self.nullable else ''}{self.doc.format_type(self.type or [])}"

    @property
    def formatted_return(self) -> str | None:
        """Rendered return type and description, if the element returns anything."""
        if self.returns is None:
            return None
        rendered = self.doc.format_type(self.returns.types)
        if self.returns.nullable:
            rendered = f"?{rendered}"
        if self.returns.description:
            rendered += f"\n{self.format_text(self.returns.description)}"
        return rendered

    @property
    def formatted_extends(self) -> str:
        """Rendered ``(extends ...)`` suffix."""
        return f"(extends {self.format_inherits(self.extends or [])})"

    @property
    def formatted_implements(self) -> str:
        """Rendered ``(implements ...)`` suffix."""
        return f"(implements {self.format_inherits(self.implements or [])})"

    def format_inherits(self, inherits: list[Any]) -> str:
        """Render a list of base types, each possibly a nested token array."""
        if inherits and isinstance(inherits[0], list):
            groups = [flatten(base) for base in inherits]
        else:
            groups = [[str(base)] for base in inherits]
        return " and ".join(self.doc.format_type(group) for group in groups)

    # -----------------------------
    # Descriptions
    # -----------------------------

    def format_text(self, text: str | None) -> str:
        """Render free text that belongs to this element."""
        return format_description(
            text,
            self.doc.link_for_reference,
            read_more_url=self.url,
            limit=self.doc.description_limit,
        )

    def format_description(self) -> str:
        """Render this element's description."""
        return self.format_text(self.description)

    # -----------------------------
    # Cards
    # -----------------------------

    def card(self, *, exclude_private: bool = False) -> ElementCard:
        """Build a display card for this element."""
        card = self.doc.base_card()
        headline = f"__**{self.link}**__"
        if self.extends:
            headline += f" {self.formatted_extends}"
        if self.implements:
            headline += f" {self.formatted_implements}"
        if self.is_private:
            headline += " **PRIVATE**"
        if self.deprecated:
            headline += " **DEPRECATED**"
        card.description = f"{headline}\n{self.format_description()}".rstrip()
        card.url = self.url
        self.format_card(card, exclude_private=exclude_private)
        if self.source_url:
            card.add_field(BLANK_FIELD_NAME, f"[View source]({self.source_url})")
        return card

    def format_card(self, card: ElementCard, *, exclude_private: bool = False) -> None:
        """Attach every field this element has to ``card``."""
        self._attach_members(
            card, "Properties", self.props, exclude_private=exclude_private
        )
        self._attach_members(
            card, "Methods", self.methods, exclude_private=exclude_private
        )
        self._attach_members(card, "Events", self.events, exclude_private=False)
        self._attach_params(card)
        self._attach_type(card)
        self._attach_returns(card)
        self._attach_examples(card)

    def _attach_members(
        self,
        card: ElementCard,
        title: str,
        members: list[DocElement] | None,
        *,
        exclude_private: bool,
    ) -> None:
        if not members:
            return
        if exclude_private:
            members = [m for m in members if not m.is_private]
        if not members:
            return
        card.add_field(title, " ".join(f"`{m.name}`" for m in members))

    def _attach_params(self, card: ElementCard) -> None:
        params = self.params
        if not params:
            return
        rendered = []
        for param in params:
            head = f"{param.formatted_name} {param.formatted_type}"
            body = param.format_description()
            rendered.append(f"{head}\n{body}" if body else head)
        card.add_chunked_fields("Params", rendered, "\n\n")

    def _attach_type(self, card: ElementCard) -> None:
        if not self.type:
            return
        card.add_field("Type", self.formatted_type)

    def _attach_returns(self, card: ElementCard) -> None:
        rendered = self.formatted_return
        if rendered:
            card.add_field("Returns", rendered)

    def _attach_examples(self, card: ElementCard) -> None:
        if not self.examples:
            return
        card.add_field(
            "Examples",
            "\n".join(md_codeblock("js", example) for example in self.examples),
        )

    # -----------------------------
    # Export
    # -----------------------------

    def to_json(self) -> dict[str, Any]:
        """Dump the element's structure. This is an export, never read back."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "internal_type": self.doc_type,
        }
        parent = self.parent
        if parent is not None:
            data["parent"] = parent.name
        if self.props:
            data["props"] = [prop.name for prop in self.props]
        if self.methods:
            data["methods"] = [method.name for method in self.methods]
        if self.events:
            data["events"] = [event.name for event in self.events]
        if self.params:
            data["params"] = [param.to_json() for param in self.params]
        if self.type:
            data["type"] = "".join(self.type)
        if self.examples:
            data["examples"] = list(self.examples)
        return data
