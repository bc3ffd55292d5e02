from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta


ANNIVERSARY_YEARS = 10


@dataclass(frozen=True)
class FilmReview:
    """
    One reviewed film as published in the Letterboxd feed.

    `link` is the identity key. Letterboxd-specific fields are optional and stay
    None when the feed item does not carry them.
    """
    link: str
    review_html: str = ""
    rewatched: bool = False
    title: Optional[str] = None
    year: Optional[str] = None
    image_url: Optional[str] = None
    published_at: Optional[str] = None
    watched_date: Optional[str] = None
    rating: Optional[str] = None
    item_title: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title or self.item_title or self.link


@dataclass(frozen=True)
class AnniversaryCandidate:
    """A film whose release, ten years on, falls near the current date."""
    tmdb_id: int
    title: str
    release_date: date
    link: str
    poster_url: Optional[str] = None
    vote_count: int = 0
    tenth_anniversary_date: date = field(init=False)

    def __post_init__(self) -> None:
        # Calendar arithmetic: Feb 29 lands on Feb 28 in a non-leap year.
        anniversary = self.release_date + relativedelta(years=ANNIVERSARY_YEARS)
        object.__setattr__(self, "tenth_anniversary_date", anniversary)


@dataclass(frozen=True)
class Anniversaries:
    today: List[AnniversaryCandidate] = field(default_factory=list)
    upcoming: List[AnniversaryCandidate] = field(default_factory=list)


@dataclass(frozen=True)
class PageData:
    films: List[FilmReview]
    anniversaries: Anniversaries
    generated_on: date

    @property
    def latest(self) -> Optional[FilmReview]:
        return self.films[0] if self.films else None
