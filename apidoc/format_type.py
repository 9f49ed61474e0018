"""Logic for rendering tokenized type expressions with cross-links."""

import re
from collections.abc import Callable, Sequence

PUNCTUATION_RE = re.compile(r"[<>*]+")
STARTS_WORD_RE = re.compile(r"\w")
ENDS_WORD_RE = re.compile(r"[\w>]$")


def escape_punctuation(token: str) -> str:
    """Backslash-escape every character of a generic/pointer punctuation token."""
    return "".join(f"\\{char}" for char in token)


def format_type(
    types: Sequence[str],
    link_for: Callable[[str], str | None],
) -> str:
    """Render a type token list in bold, linking known names.

    ``link_for`` receives a bare token and returns its link, or ``None``
    when the token does not name a known element. Adjacent word tokens are
    read as a union and joined with ``|``: ``["string", "number"]`` renders
    as ``**string|number**``.
    """
    parts: list[str] = []
    for index, text in enumerate(types):
        if PUNCTUATION_RE.fullmatch(text):
            parts.append(escape_punctuation(text))
            continue
        prepend_or = (
            index != 0
            and STARTS_WORD_RE.match(text) is not None
            and ENDS_WORD_RE.search(types[index - 1]) is not None
        )
        link = link_for(text)
        parts.append(("|" if prepend_or else "") + (link or text))
    return f"**{''.join(parts)}**"
