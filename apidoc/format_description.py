"""Logic for rendering raw element descriptions for display."""

from collections.abc import Callable
from functools import partial

from apidoc.text_transforms import (
    collapse_newlines,
    rewrite_callouts,
    rewrite_links,
    truncate_description,
)

DESCRIPTION_LIMIT = 1500


def format_description(
    text: str | None,
    resolve_link: Callable[[str], str | None],
    *,
    read_more_url: str | None = None,
    limit: int = DESCRIPTION_LIMIT,
) -> str:
    """Run the description stages in order: links, newlines, callouts, length."""
    if not text:
        return ""
    stages: list[Callable[[str], str]] = [
        partial(rewrite_links, resolve_link=resolve_link),
        collapse_newlines,
        rewrite_callouts,
        partial(truncate_description, limit=limit, read_more_url=read_more_url),
    ]
    for stage in stages:
        text = stage(text)
    return text
