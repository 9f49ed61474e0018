"""Presentation-neutral summary card for a resolved element or search."""

from dataclasses import dataclass, field

# Continuation fields carry no heading of their own.
BLANK_FIELD_NAME = "\u200b"
FIELD_CHUNK_SIZE = 5


@dataclass(frozen=True)
class CardField:
    """A titled block of card content."""

    name: str
    value: str


@dataclass
class ElementCard:
    """Everything needed to display an element, independent of any chat client."""

    title: str
    author: str = ""
    author_url: str | None = None
    url: str | None = None
    icon: str | None = None
    color: int | None = None
    description: str = ""
    fields: list[CardField] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> None:
        """Append a field to the card."""
        self.fields.append(CardField(name=name, value=value))

    def add_chunked_fields(self, name: str, values: list[str], separator: str) -> None:
        """Add ``values`` in groups; only the first group carries ``name``."""
        for start in range(0, len(values), FIELD_CHUNK_SIZE):
            chunk = values[start : start + FIELD_CHUNK_SIZE]
            self.add_field(
                name if start == 0 else BLANK_FIELD_NAME,
                separator.join(chunk),
            )

    def to_markdown(self) -> str:
        """Render the card as a Markdown document."""
        parts: list[str] = []
        if self.author:
            parts += [f"*{self.author}*", ""]
        parts += [f"# {self.title}", ""]
        if self.description:
            parts += [self.description, ""]
        for f in self.fields:
            if f.name != BLANK_FIELD_NAME:
                parts += [f"## {f.name}", ""]
            parts += [f.value, ""]
        return "\n".join(parts).rstrip() + "\n"


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"
