"""Keyed child collection shared by the index tree and its elements."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from typing import TYPE_CHECKING, Any

from apidoc import doc_types

if TYPE_CHECKING:
    from apidoc.doc_element import DocElement

METHOD_SUFFIX = "()"
EVENT_PREFIX = "e-"


def _is_excluded(child: DocElement, exclude: Collection[DocElement]) -> bool:
    return any(child is excluded for excluded in exclude)


class DocBase:
    """Owns child elements keyed by lowercased name."""

    def __init__(self) -> None:
        """Initialize an empty child collection."""
        self.children: dict[str, DocElement] = {}

    def add_child(self, child: DocElement) -> None:
        """Register a child; a later child with the same name replaces the earlier."""
        self.children[child.name.lower()] = child

    def adopt_all(
        self,
        records: Iterable[dict[str, Any]] | None,
        factory: Callable[[Any, dict[str, Any]], DocElement],
    ) -> None:
        """Build a child from every raw record and register it."""
        if not records:
            return
        for record in records:
            self.add_child(factory(self, record))

    def find_child(
        self,
        query: str,
        exclude: Collection[DocElement] = (),
    ) -> DocElement | None:
        """Look up a child by name, case-insensitively.

        An exact name wins. Otherwise ``name()`` only matches methods and
        ``e-name`` only matches events. Children present in ``exclude`` are
        never returned.
        """
        query = query.lower()
        child = self.children.get(query)
        if child is not None and not _is_excluded(child, exclude):
            return child

        if query.endswith(METHOD_SUFFIX):
            query = query[: -len(METHOD_SUFFIX)]
            doc_type = doc_types.METHOD
        elif query.startswith(EVENT_PREFIX):
            query = query[len(EVENT_PREFIX) :]
            doc_type = doc_types.EVENT
        else:
            return None

        child = self.children.get(query)
        if child is None or _is_excluded(child, exclude):
            return None
        if child.doc_type != doc_type:
            return None
        return child

    def children_of_type(self, doc_type: str) -> list[DocElement] | None:
        """Return children of one kind, or ``None`` if there are none."""
        filtered = [c for c in self.children.values() if c.doc_type == doc_type]
        return filtered or None

    @property
    def classes(self) -> list[DocElement] | None:
        """Child classes."""
        return self.children_of_type(doc_types.CLASS)

    @property
    def typedefs(self) -> list[DocElement] | None:
        """Child typedefs."""
        return self.children_of_type(doc_types.TYPEDEF)

    @property
    def interfaces(self) -> list[DocElement] | None:
        """Child interfaces."""
        return self.children_of_type(doc_types.INTERFACE)

    @property
    def props(self) -> list[DocElement] | None:
        """Child properties."""
        return self.children_of_type(doc_types.PROP)

    @property
    def methods(self) -> list[DocElement] | None:
        """Child methods."""
        return self.children_of_type(doc_types.METHOD)

    @property
    def events(self) -> list[DocElement] | None:
        """Child events."""
        return self.children_of_type(doc_types.EVENT)

    @property
    def params(self) -> list[DocElement] | None:
        """Child params."""
        return self.children_of_type(doc_types.PARAM)
