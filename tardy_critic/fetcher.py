from __future__ import annotations

import logging
from typing import Optional

import requests

from .exceptions import FeedFetchError

logger = logging.getLogger(__name__)

USER_AGENT = "tardy-critic/0.1 (+https://letterboxd.com/tardycritic/)"


def fetch_feed_document(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
) -> bytes:
    """
    Download a feed URL and return the raw response body.

    The body is returned as bytes so feedparser can honor the document's own
    encoding declaration.

    Without a session, a throwaway one is opened and closed around the call.

    Raises FeedFetchError on transport errors or a non-2xx status.
    """
    if session is None:
        with requests.Session() as owned:
            return fetch_feed_document(url, session=owned, timeout=timeout)

    try:
        response = session.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FeedFetchError(f"Failed to fetch feed: {url} ({e})") from e

    logger.debug("Fetched feed %s (%d bytes)", url, len(response.content))
    return response.content
