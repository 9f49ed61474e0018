"""Logic for retrieving a documentation payload and building its index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from apidoc.doc import Doc
from apidoc.errors import MalformedSourceError
from apidoc.load_config import load_config

if TYPE_CHECKING:
    from apidoc.source_cache import SourceCache

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "master"
INVALID_SOURCE_MESSAGE = "invalid source name or URL."


def source_url(source: str, config: dict[str, Any]) -> str:
    """Map a registered source name to its URL; anything else is taken as a URL."""
    return str(config.get("sources", {}).get(source, source))


def fetch_doc(
    source: str = DEFAULT_SOURCE,
    *,
    cache: SourceCache,
    config: dict[str, Any] | None = None,
    force: bool = False,
    client: httpx.Client | None = None,
) -> Doc:
    """Return the index for ``source``, fetching and building it if needed.

    The index is only stored in ``cache`` once it is fully built, so a failed
    fetch never leaves a partial entry behind. Raises ``MalformedSourceError``
    when the payload cannot be retrieved or parsed.
    """
    config = config or load_config()
    url = source_url(source, config)
    if not force:
        cached = cache.lookup(url)
        if cached is not None:
            return cached

    logger.info("Fetching documentation from %s", url)
    payload = _download(url, client, timeout=config["fetch"]["timeout"])
    try:
        doc = Doc(url, payload, config)
    except MalformedSourceError as exc:
        logger.warning("Rejected documentation from %s: %s", url, exc)
        raise MalformedSourceError(INVALID_SOURCE_MESSAGE) from exc
    cache.store(url, doc)
    return doc


def _download(url: str, client: httpx.Client | None, *, timeout: float) -> Any:
    """GET ``url`` and decode its JSON body."""
    try:
        if client is None:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("Could not fetch documentation from %s: %s", url, exc)
        raise MalformedSourceError(INVALID_SOURCE_MESSAGE) from exc
