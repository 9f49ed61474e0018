"""Approximate-match search over the flattened element projection."""

from collections.abc import Iterator, Sequence

from rapidfuzz import fuzz

from apidoc.search_entry import SearchEntry

DEFAULT_THRESHOLD = 0.5
DEFAULT_DISTANCE = 80
DEFAULT_MAX_PATTERN_LENGTH = 32
DEFAULT_KEYS = ("name", "id")


class FuzzyIndex:
    """Ranks search entries against a free-text query.

    Every key of an entry is scored independently and the best key wins.
    A score is the fraction of mismatched characters in the best partial
    alignment plus how far into the text that alignment starts, measured
    in units of ``distance``. Texts shorter than the query are compared
    whole. ``0.0`` is a perfect match at the start of the text; entries
    scoring above ``threshold`` are dropped.
    """

    def __init__(
        self,
        entries: Sequence[SearchEntry],
        *,
        threshold: float = DEFAULT_THRESHOLD,
        distance: int = DEFAULT_DISTANCE,
        max_pattern_length: int = DEFAULT_MAX_PATTERN_LENGTH,
        keys: Sequence[str] = DEFAULT_KEYS,
    ) -> None:
        """Initialize the index over a fixed list of entries."""
        self.entries = list(entries)
        self.threshold = threshold
        self.distance = max(distance, 1)
        self.max_pattern_length = max_pattern_length
        self.keys = tuple(keys)
        # Lowercased once; the index never changes after construction.
        self._haystacks = [
            tuple(str(getattr(entry, key)).lower() for key in self.keys)
            for entry in self.entries
        ]

    def __len__(self) -> int:
        """Return the number of indexed entries."""
        return len(self.entries)

    def search(self, query: str) -> Iterator[str]:
        """Yield matching entry ids, best match first.

        Ties keep the order in which entries were indexed.
        """
        pattern = query.strip().lower()[: self.max_pattern_length]
        if not pattern:
            return

        scored: list[tuple[float, int, str]] = []
        for position, (entry, haystacks) in enumerate(
            zip(self.entries, self._haystacks, strict=True)
        ):
            best = min(self.score(pattern, text) for text in haystacks)
            if best <= self.threshold:
                scored.append((best, position, entry.id))

        scored.sort()
        for _score, _position, entry_id in scored:
            yield entry_id

    def score(self, pattern: str, text: str) -> float:
        """Score ``pattern`` against ``text``; lower is better."""
        if not text:
            return 1.0
        if len(text) < len(pattern):
            # Errors are counted against the whole pattern, so a short name
            # contained in the query is not a perfect match.
            return 1.0 - fuzz.ratio(pattern, text) / 100.0
        alignment = fuzz.partial_ratio_alignment(pattern, text)
        if alignment is None:
            return 1.0
        errors = 1.0 - alignment.score / 100.0
        proximity = alignment.dest_start / self.distance
        return errors + proximity
