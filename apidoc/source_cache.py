"""Caller-owned cache of built documentation indexes, keyed by origin URL."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apidoc.doc import Doc

logger = logging.getLogger(__name__)


class SourceCache:
    """Holds one ``Doc`` per origin.

    Entries are replaced wholesale; a cached ``Doc`` is never modified.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self.mapping: dict[str, Doc] = {}

    def __len__(self) -> int:
        """Return the number of cached sources."""
        return len(self.mapping)

    def __contains__(self, origin: object) -> bool:
        """Check whether an origin is cached."""
        return origin in self.mapping

    def lookup(self, origin: str) -> Doc | None:
        """Return the cached index for an origin, if any."""
        doc = self.mapping.get(origin)
        if doc is not None:
            logger.debug("Cache hit for %s", origin)
        return doc

    def store(self, origin: str, doc: Doc) -> None:
        """Publish a fully built index, replacing any previous one."""
        replaced = origin in self.mapping
        self.mapping[origin] = doc
        action = "Refreshed" if replaced else "Stored"
        logger.info("%s cached docs for %s", action, origin)

    def evict(self, origin: str) -> bool:
        """Drop an origin; return whether it was cached."""
        if self.mapping.pop(origin, None) is None:
            return False
        logger.info("Evicted cached docs for %s", origin)
        return True

    def clear(self) -> None:
        """Drop every cached index."""
        self.mapping.clear()
