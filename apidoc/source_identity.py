"""Parsing of (project, repo, branch) out of a documentation payload URL."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from apidoc.errors import MalformedSourceError

MIN_PATH_SEGMENTS = 4
PAYLOAD_SUFFIX = ".json"


@dataclass(frozen=True)
class SourceIdentity:
    """Identifies the repository and branch a payload was generated from."""

    project: str
    repo: str
    branch: str


def parse_source_identity(origin: str) -> SourceIdentity:
    """Derive the source identity from an origin URL.

    Expects ``https://<host>/<project>/<repo>/.../<branch>.json``, e.g.
    ``https://raw.githubusercontent.com/Org/repo/docs/master.json``.
    Anything else raises ``MalformedSourceError``.
    """
    parts = urlsplit(origin)
    segments = [s for s in parts.path.split("/") if s]
    if (
        parts.scheme not in {"http", "https"}
        or not parts.netloc
        or len(segments) < MIN_PATH_SEGMENTS
        or not segments[-1].endswith(PAYLOAD_SUFFIX)
    ):
        msg = f"Unrecognised documentation origin: {origin!r}"
        raise MalformedSourceError(msg)

    branch = segments[-1][: -len(PAYLOAD_SUFFIX)]
    if not branch:
        msg = f"Documentation origin has no branch name: {origin!r}"
        raise MalformedSourceError(msg)
    return SourceIdentity(project=segments[0], repo=segments[1], branch=branch)
