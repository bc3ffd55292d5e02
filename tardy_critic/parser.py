from __future__ import annotations

import io
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import feedparser
from bs4 import BeautifulSoup

from .exceptions import FeedParseError

logger = logging.getLogger(__name__)


def parse_document(document: Union[bytes, str]) -> List[Dict[str, Any]]:
    """
    Parse a raw RSS document and return its entries.

    The document is always treated as content: feedparser gets a stream, never
    a string it could mistake for a URL or a file path.

    Raises FeedParseError when the document is malformed (bozo), so a broken
    feed produces no records at all rather than partial ones.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    try:
        feed = feedparser.parse(io.BytesIO(document))
    except Exception as e:  # pragma: no cover - surface as domain error
        raise FeedParseError(f"Failed to parse feed document ({e})") from e

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        msg = "Invalid RSS document"
        if exc:
            msg += f" ({exc})"
        raise FeedParseError(msg)

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise FeedParseError("Feed has no entries list")
    return entries


def _text(entry: Dict[str, Any], key: str) -> Optional[str]:
    val = entry.get(key)
    if isinstance(val, str):
        val = val.strip()
        return val or None
    return None


def split_description(html: str) -> Tuple[Optional[str], str]:
    """
    Split a Letterboxd item description into (poster URL, review HTML).

    Letterboxd prefixes every description with a paragraph holding the poster
    `<img>`. That paragraph is removed only when it really holds the image; any
    other leading markup is kept as part of the review.
    """
    if not html:
        return None, ""

    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img")
    image_url = img.get("src") if img is not None else None

    first_p = soup.find("p")
    if img is not None and first_p is not None and img.find_parent("p") is first_p:
        first_p.decompose()
    else:
        logger.debug("Description has no leading poster paragraph; keeping it whole")

    return image_url or None, str(soup).strip()


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feedparser entry to a dict of review fields.

    feedparser exposes the `letterboxd:` namespace elements as lowercased
    `letterboxd_<name>` keys.
    Fields: link, item_title, title, year, image_url, review_html, published_at,
    watched_date, rating, rewatched
    """
    description = entry.get("summary") or entry.get("description") or ""
    image_url, review_html = split_description(description)

    # Exact match only: "yes", "No" and a missing element are all False.
    rewatched = entry.get("letterboxd_rewatch") == "Yes"

    return {
        "link": _text(entry, "link") or "",
        "item_title": _text(entry, "title"),
        "title": _text(entry, "letterboxd_filmtitle"),
        "year": _text(entry, "letterboxd_filmyear"),
        "image_url": image_url,
        "review_html": review_html,
        "published_at": _text(entry, "published"),
        "watched_date": _text(entry, "letterboxd_watcheddate"),
        "rating": _text(entry, "letterboxd_memberrating"),
        "rewatched": rewatched,
    }
