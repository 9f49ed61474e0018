"""The documentation index tree for one source version.

A ``Doc`` is built once from a fetched payload and never mutated afterwards:
it adopts every class, typedef and interface, flattens them into a fuzzy
search index, and is the single entry point for exact lookups, searches and
type/link formatting.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Sequence
from typing import Any

from apidoc.doc_base import DocBase
from apidoc.doc_class import DocClass
from apidoc.doc_element import DocElement
from apidoc.doc_interface import DocInterface
from apidoc.doc_typedef import DocTypedef
from apidoc.doc_types import TOP_LEVEL_KINDS
from apidoc.element_card import ElementCard
from apidoc.errors import MalformedSourceError
from apidoc.format_type import format_type
from apidoc.fuzzy_index import FuzzyIndex
from apidoc.load_config import load_config
from apidoc.search_entry import SearchEntry
from apidoc.source_identity import parse_source_identity

logger = logging.getLogger(__name__)

QUERY_SEPARATOR_RE = re.compile(r"[.#]")
SEARCH_RESULTS_TITLE = "Search results:"

FACTORIES = {
    "classes": DocClass,
    "typedefs": DocTypedef,
    "interfaces": DocInterface,
}


class Doc(DocBase):
    """Index of every documented element of one source."""

    def __init__(
        self,
        origin: str,
        payload: Any,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Build the tree and its search index.

        Raises ``MalformedSourceError`` if the origin URL is not recognised or
        the payload is not a mapping of record lists.
        """
        super().__init__()
        self.config = config or load_config()
        self.origin = origin
        self.identity = parse_source_identity(origin)
        self.site: dict[str, Any] = self.config["site"]
        self.description_limit: int = self.config["description_limit"]
        self.search_limit: int = self.config["search"]["limit"]

        self._adopt_payload(payload)

        search = self.config["search"]
        self.fuzzy_index = FuzzyIndex(
            self.to_search_entries(),
            threshold=search["threshold"],
            distance=search["distance"],
            max_pattern_length=search["max_pattern_length"],
            keys=search["keys"],
        )
        logger.debug(
            "Indexed %s: %d top-level elements, %d search entries",
            self.origin,
            len(self.children),
            len(self.fuzzy_index),
        )

    def _adopt_payload(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            msg = (
                "Documentation payload must be an object, "
                f"got {type(payload).__name__}"
            )
            raise MalformedSourceError(msg)
        for kind in TOP_LEVEL_KINDS:
            records = payload.get(kind)
            if records is not None and not isinstance(records, list):
                msg = f"'{kind}' must be a list of records"
                raise MalformedSourceError(msg)
            try:
                self.adopt_all(records, FACTORIES[kind])
            except (KeyError, TypeError, AttributeError) as exc:
                msg = f"Malformed record under '{kind}': {exc}"
                raise MalformedSourceError(msg) from exc

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"<Doc {self.project}/{self.repo}@{self.branch}>"

    # -----------------------------
    # Source identity and URLs
    # -----------------------------

    @property
    def project(self) -> str:
        """Owner of the documented repository."""
        return self.identity.project

    @property
    def repo(self) -> str:
        """Name of the documented repository."""
        return self.identity.repo

    @property
    def branch(self) -> str:
        """Branch the payload was generated from."""
        return self.identity.branch

    @property
    def title(self) -> str:
        """Display title of the documentation site."""
        return str(self.site.get("title") or self.repo)

    @property
    def color(self) -> int | None:
        """Accent color for cards."""
        return self.site.get("color")

    @property
    def repo_url(self) -> str:
        """Browsable root of the repository at this branch."""
        host = str(self.site.get("repo_host") or "https://github.com").rstrip("/")
        return f"{host}/{self.project}/{self.repo}/blob/{self.branch}"

    @property
    def base_url(self) -> str | None:
        """Root of the documentation website, if there is one."""
        base_url = self.site.get("base_url")
        return str(base_url).rstrip("/") if base_url else None

    @property
    def base_docs_url(self) -> str | None:
        """Root of this branch's documentation pages."""
        if not self.base_url:
            return None
        docs_path = str(self.site.get("docs_path") or "").strip("/")
        prefix = f"{self.base_url}/{docs_path}" if docs_path else self.base_url
        return f"{prefix}/{self.branch}"

    @property
    def icon(self) -> str | None:
        """Site icon shown on cards."""
        icon_path = self.site.get("icon_path")
        if not self.base_url or not icon_path:
            return None
        return f"{self.base_url}/{str(icon_path).lstrip('/')}"

    # -----------------------------
    # Resolution
    # -----------------------------

    def get(self, query: str) -> DocElement | None:
        """Resolve a ``Parent.member`` / ``Parent#member`` query exactly."""
        return self.resolve(QUERY_SEPARATOR_RE.split(query))

    def resolve(
        self,
        terms: Sequence[str],
        exclude: Collection[DocElement] = (),
    ) -> DocElement | None:
        """Walk ``terms`` down the tree.

        The first term names a top-level element. Each further term names a
        child of the current element; when more terms follow and the child
        has a known type, the walk continues inside that type, so
        ``guild.owner.username`` reaches ``User#username``. Children in
        ``exclude`` are skipped. Any miss yields ``None``.
        """
        terms = [term.lower() for term in terms if term]
        if not terms:
            return None

        element = self.find_child(terms[0])
        if element is None:
            return None

        remaining = terms[1:]
        for index, term in enumerate(remaining):
            child = element.find_child(term, exclude)
            if child is None:
                return None
            has_more = index < len(remaining) - 1
            type_element = child.type_element if has_more else None
            element = type_element or child
        return element

    def search(
        self,
        query: str,
        *,
        exclude_private: bool = False,
    ) -> list[DocElement] | None:
        """Fuzzy-search for elements, best match first.

        Returns at most ``search_limit`` distinct elements, or ``None`` when
        nothing matched.
        """
        results: list[DocElement] = []
        for candidate in self.fuzzy_index.search(query):
            if len(results) >= self.search_limit:
                break
            element = self.resolve(candidate.split("#"), exclude=results)
            if element is None or any(element is found for found in results):
                continue
            if exclude_private and element.is_private:
                continue
            results.append(element)
        return results or None

    # -----------------------------
    # Formatting
    # -----------------------------

    def link_for_type(self, token: str) -> str | None:
        """Link for a type token naming a top-level element."""
        element = self.children.get(token.lower())
        return element.link if element is not None else None

    def link_for_reference(self, target: str) -> str | None:
        """Link for an inline ``{@link target}`` reference."""
        element = self.get(target)
        return element.link if element is not None else None

    def format_type(self, types: Sequence[str]) -> str:
        """Render a type token list in bold with cross-links."""
        return format_type(types, self.link_for_type)

    def base_card(self) -> ElementCard:
        """Card pre-filled with the site's title, author line and color."""
        return ElementCard(
            title=self.title,
            author=f"{self.title} ({self.branch})",
            author_url=self.base_docs_url,
            icon=self.icon,
            color=self.color,
        )

    def resolve_card(
        self,
        query: str,
        *,
        exclude_private: bool = False,
    ) -> ElementCard | None:
        """Card for an exact match, else a card listing search results."""
        element = self.get(query)
        if element is not None:
            return element.card(exclude_private=exclude_private)

        results = self.search(query, exclude_private=exclude_private)
        if not results:
            return None
        card = self.base_card()
        card.title = SEARCH_RESULTS_TITLE
        card.description = "\n".join(f"**{result.link}**" for result in results)
        return card

    # -----------------------------
    # Export
    # -----------------------------

    def to_search_entries(self) -> list[SearchEntry]:
        """Flatten top-level elements and their direct children for searching."""
        parents = list(self.children.values())
        entries = [SearchEntry(id=parent.name, name=parent.name) for parent in parents]
        entries.extend(
            SearchEntry(id=f"{parent.name}#{child.name}", name=child.name)
            for parent in parents
            for child in parent.children.values()
        )
        return entries

    def to_json(self) -> dict[str, Any]:
        """Dump every top-level element grouped by kind."""
        data: dict[str, Any] = {}
        for kind in TOP_LEVEL_KINDS:
            elements = getattr(self, kind)
            if elements:
                data[kind] = [element.to_json() for element in elements]
        return data
