"""Data models for documented return values."""

from dataclasses import dataclass
from typing import Any

from apidoc.flatten import flatten


@dataclass(frozen=True)
class ReturnInfo:
    """The return type of a method or function typedef."""

    types: tuple[str, ...]
    description: str | None = None
    nullable: bool = False


def parse_returns(raw: Any) -> ReturnInfo | None:
    """Normalize the payload forms of ``returns``.

    Accepts a bare nested token array or a mapping with ``types``,
    ``description`` and ``nullable``.
    """
    if not raw:
        return None
    if isinstance(raw, dict):
        return ReturnInfo(
            types=tuple(flatten(raw.get("types"))),
            description=raw.get("description"),
            nullable=bool(raw.get("nullable")),
        )
    return ReturnInfo(types=tuple(flatten(raw)))
