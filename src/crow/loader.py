"""Read markup or stylesheet source from a file path or an http(s) URL."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from crow.config import CrowConfig
from crow.errors import LoadError

__all__ = ["is_url", "load_source"]

logger = logging.getLogger(__name__)


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def load_source(
    location: str,
    config: CrowConfig | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Return the text at ``location``.

    URLs are fetched with httpx (``client`` if given, otherwise a client built
    from ``config``); anything else is read as a local file. Failures raise
    LoadError.
    """
    config = config or CrowConfig()
    if is_url(location):
        if client is not None:
            return _fetch(client, location)
        with httpx.Client(
            headers={"User-Agent": config.user_agent},
            timeout=httpx.Timeout(config.timeout),
            follow_redirects=config.follow_redirects,
        ) as owned:
            return _fetch(owned, location)

    logger.debug("Reading %s as %s", location, config.encoding)
    try:
        return Path(location).read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read {location}: {exc}", location=location, cause=exc) from exc


def _fetch(client: httpx.Client, url: str) -> str:
    logger.info("Fetching %s", url)
    try:
        resp = client.get(url)
    except httpx.TimeoutException as exc:
        raise LoadError(f"timed out fetching {url}", location=url, cause=exc) from exc
    except httpx.HTTPError as exc:
        raise LoadError(f"cannot fetch {url}: {exc}", location=url, cause=exc) from exc

    if resp.status_code >= 300:
        raise LoadError(f"cannot fetch {url}: HTTP {resp.status_code}", location=url)
    logger.debug("Fetched %d characters from %s", len(resp.text), url)
    return resp.text
