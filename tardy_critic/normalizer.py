from __future__ import annotations

from datetime import date
from typing import Any, Dict

from .config import DEFAULT_TMDB_IMAGE_BASE_URL
from .models import AnniversaryCandidate, FilmReview

TMDB_MOVIE_URL = "https://www.themoviedb.org/movie/{id}"


def to_film_review(entry: Dict[str, Any]) -> FilmReview:
    """
    Convert a parsed entry dict into a FilmReview.
    Requires:
    - link (non-empty)
    Optional:
    - title, year, image_url, published_at, watched_date, rating, item_title
    """
    link = entry.get("link") or ""
    if not link:
        raise ValueError("Entry lacks required field for FilmReview: link")

    return FilmReview(
        link=link,
        review_html=entry.get("review_html") or "",
        rewatched=bool(entry.get("rewatched")),
        title=entry.get("title"),
        year=entry.get("year"),
        image_url=entry.get("image_url"),
        published_at=entry.get("published_at"),
        watched_date=entry.get("watched_date"),
        rating=entry.get("rating"),
        item_title=entry.get("item_title"),
    )


def to_anniversary_candidate(
    result: Dict[str, Any],
    *,
    image_base_url: str = DEFAULT_TMDB_IMAGE_BASE_URL,
) -> AnniversaryCandidate:
    """
    Convert one TMDB discover result into an AnniversaryCandidate.

    Raises ValueError when id, title or a valid release_date is missing, or when
    title or release_date is not a string.
    """
    tmdb_id = result.get("id")
    title = result.get("title")
    release = result.get("release_date")
    if tmdb_id is None or not title or not release:
        raise ValueError(f"TMDB result lacks id/title/release_date: {tmdb_id!r}")
    if not isinstance(title, str) or not isinstance(release, str):
        raise ValueError(f"TMDB result has non-string title/release_date: {tmdb_id!r}")

    release_date = date.fromisoformat(release)
    poster_path = result.get("poster_path")

    return AnniversaryCandidate(
        tmdb_id=int(tmdb_id),
        title=title,
        release_date=release_date,
        link=TMDB_MOVIE_URL.format(id=tmdb_id),
        poster_url=f"{image_base_url}{poster_path}" if poster_path else None,
        vote_count=int(result.get("vote_count") or 0),
    )
