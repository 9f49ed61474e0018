"""Utility for flattening nested type token arrays."""

from typing import Any


def flatten(value: Any) -> list[str]:
    """Flatten arbitrarily nested lists of type tokens into a single list.

    Payloads describe types as nested arrays, e.g.
    ``[[["Array", "<"], ["string", ">"]]]`` -> ``["Array", "<", "string", ">"]``.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        return [str(value)]
    tokens: list[str] = []
    for part in value:
        tokens.extend(flatten(part))
    return tokens
