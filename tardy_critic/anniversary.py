from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List

from .config import DEFAULT_TMDB_IMAGE_BASE_URL
from .models import AnniversaryCandidate, Anniversaries
from .normalizer import to_anniversary_candidate

logger = logging.getLogger(__name__)

MIN_VOTE_COUNT = 2000
UPCOMING_LIMIT = 5


def utc_today() -> date:
    """Current calendar day in UTC; all anniversary comparisons use this."""
    return datetime.now(timezone.utc).date()


def _vote_count(result: Dict[str, Any]) -> int:
    try:
        return int(result.get("vote_count") or 0)
    except (TypeError, ValueError):
        return 0


def match_anniversaries(
    results: Iterable[Dict[str, Any]],
    today: date,
    *,
    min_vote_count: int = MIN_VOTE_COUNT,
    upcoming_limit: int = UPCOMING_LIMIT,
    image_base_url: str = DEFAULT_TMDB_IMAGE_BASE_URL,
) -> Anniversaries:
    """
    Split TMDB discover results into today's and upcoming tenth anniversaries.

    Steps: drop adult titles, drop titles under `min_vote_count` votes, compute
    anniversaries, partition by calendar day against `today`, sort upcoming by
    release date (ascending) and keep the first `upcoming_limit`.
    """
    candidates: List[AnniversaryCandidate] = []
    for result in results:
        if not isinstance(result, dict):
            continue
        if result.get("adult"):
            continue
        if _vote_count(result) < min_vote_count:
            continue
        try:
            candidates.append(to_anniversary_candidate(result, image_base_url=image_base_url))
        except (TypeError, ValueError) as e:
            logger.debug("Skipping TMDB result %r: %s", result.get("id"), e)

    on_today = [c for c in candidates if c.tenth_anniversary_date == today]
    upcoming = [c for c in candidates if c.tenth_anniversary_date > today]
    upcoming.sort(key=lambda c: c.release_date)

    return Anniversaries(today=on_today, upcoming=upcoming[: max(0, upcoming_limit)])
