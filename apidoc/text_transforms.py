"""Pure string stages used to turn raw descriptions into display text."""

import re
from collections.abc import Callable

LINK_TAG_RE = re.compile(r"\{@link (.+?)\}")
# A fenced code block, or a newline that does not start a list item. The
# optional second group captures a list-item line the newline terminates.
NEWLINE_RE = re.compile(r"(```[\s\S]+?```)|(^[*-].+$)?\n(?![*-])", re.MULTILINE)
CALLOUT_RE = re.compile(r"<(info|warn)>([\s\S]+?)</\1>")

TRUNCATION_NOTICE = "...\nDescription truncated."


def rewrite_links(text: str, resolve_link: Callable[[str], str | None]) -> str:
    """Replace ``{@link Target}`` tags with the resolved link or the bare target."""

    def repl(m: re.Match) -> str:
        target = m.group(1)
        return resolve_link(target) or target

    return LINK_TAG_RE.sub(repl, text)


def collapse_newlines(text: str) -> str:
    """Join wrapped lines with a space, keeping lists and fenced code intact."""

    def repl(m: re.Match) -> str:
        if m.group(1):
            return m.group(1)
        if m.group(2):
            return m.group(0)
        return " "

    return NEWLINE_RE.sub(repl, text)


def rewrite_callouts(text: str) -> str:
    """Turn ``<info>``/``<warn>`` blocks into a bold paragraph."""
    return CALLOUT_RE.sub(r"\n**\2**\n", text)


def truncate_description(text: str, limit: int, read_more_url: str | None) -> str:
    """Cut ``text`` to ``limit`` characters, pointing at the full page."""
    if len(text) <= limit:
        return text
    notice = TRUNCATION_NOTICE
    if read_more_url:
        notice = f"{notice} View full description [here]({read_more_url})."
    return text[:limit] + notice
