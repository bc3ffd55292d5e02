from __future__ import annotations

from typing import Iterable, List, Set

from .models import FilmReview


def deduplicate(films: Iterable[FilmReview]) -> List[FilmReview]:
    """
    Remove duplicates by link.
    Keeps the first occurrence and preserves original order.
    """
    seen: Set[str] = set()
    out: List[FilmReview] = []

    for film in films:
        if film.link in seen:
            continue
        seen.add(film.link)
        out.append(film)
    return out
