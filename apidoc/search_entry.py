"""Data models for the flattened search projection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchEntry:
    """One searchable element: ``id`` is ``Name`` or ``Parent#member``."""

    id: str
    name: str
