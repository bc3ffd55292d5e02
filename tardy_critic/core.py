from __future__ import annotations

import concurrent.futures as _fut
import logging
from datetime import date
from typing import Iterable, List, Optional

import requests

from .anniversary import match_anniversaries, utc_today
from .config import Settings
from .dedup import deduplicate
from .exceptions import DiscoveryError, FeedFetchError, FeedParseError
from .fetcher import fetch_feed_document
from .models import Anniversaries, FilmReview, PageData
from .normalizer import to_film_review
from .parser import parse_document, parse_entry
from .tmdb import TMDBClient

logger = logging.getLogger(__name__)


def _watched_on(film: FilmReview) -> Optional[date]:
    if not film.watched_date:
        return None
    try:
        return date.fromisoformat(film.watched_date)
    except ValueError:
        return None


def sort_by_watched_date(films: Iterable[FilmReview]) -> List[FilmReview]:
    """
    Most recently watched first. Films without a valid watched date go last,
    in their original order.
    """
    films = list(films)
    dated = [f for f in films if _watched_on(f) is not None]
    undated = [f for f in films if _watched_on(f) is None]
    dated.sort(key=_watched_on, reverse=True)
    return dated + undated


class ReviewLoader:
    """
    Builds the data behind one page view.

    Pipeline: fetch → parse → normalize → deduplicate → sort (most recently watched first),
    alongside TMDB discover → anniversary matching. Both upstreams are best-effort:
    failures are logged and that half of the page comes back empty.

    The loader holds configuration only. Every `load_page` opens its own HTTP
    sessions and closes them before returning, so page views share no
    connection pool or cookie jar. A `session` passed here replaces those
    per-page sessions.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[requests.Session] = None,
        tmdb_client: Optional[TMDBClient] = None,
    ) -> None:
        self.settings = settings
        self._session = session
        if tmdb_client is None and settings.tmdb_api_key:
            tmdb_client = TMDBClient(
                settings.tmdb_api_key,
                base_url=settings.tmdb_base_url,
                region=settings.tmdb_region,
                timeout=settings.timeout_sec,
                window_pad_months=settings.window_pad_months,
            )
        if tmdb_client is None:
            logger.warning("TMDB_API_KEY not set; anniversary panels will be empty")
        self._tmdb = tmdb_client

    def _pick(self, session: Optional[requests.Session]) -> Optional[requests.Session]:
        return self._session if self._session is not None else session

    def load_films(self, session: Optional[requests.Session] = None) -> List[FilmReview]:
        try:
            document = fetch_feed_document(
                self.settings.feed_url,
                session=self._pick(session),
                timeout=self.settings.timeout_sec,
            )
            entries = parse_document(document)
        except (FeedFetchError, FeedParseError) as e:
            logger.warning("Review feed unavailable: %s", e)
            return []

        films = []
        for entry in entries:
            try:
                films.append(to_film_review(parse_entry(entry)))
            except ValueError as e:
                logger.warning("Skipping feed item: %s", e)

        films = deduplicate(films)
        return sort_by_watched_date(films)

    def load_anniversaries(
        self,
        today: date,
        session: Optional[requests.Session] = None,
    ) -> Anniversaries:
        if self._tmdb is None:
            return Anniversaries()
        try:
            results = self._tmdb.discover_anniversary_candidates(today, session=self._pick(session))
        except DiscoveryError as e:
            logger.warning("Anniversary lookup unavailable: %s", e)
            return Anniversaries()

        return match_anniversaries(
            results,
            today,
            min_vote_count=self.settings.min_vote_count,
            upcoming_limit=self.settings.upcoming_limit,
            image_base_url=self.settings.tmdb_image_base_url,
        )

    def load_page(self, today: Optional[date] = None) -> PageData:
        today = today or utc_today()

        # The two upstreams are independent; only the result is merged.
        # Fresh sessions per page view, one per upstream thread.
        with requests.Session() as feed_session, requests.Session() as tmdb_session:
            with _fut.ThreadPoolExecutor(max_workers=2) as ex:
                films_future = ex.submit(self.load_films, feed_session)
                anniversaries_future = ex.submit(self.load_anniversaries, today, tmdb_session)
                films = films_future.result()
                anniversaries = anniversaries_future.result()

        logger.info(
            "Loaded %d films, %d anniversaries today, %d upcoming",
            len(films), len(anniversaries.today), len(anniversaries.upcoming),
        )
        return PageData(films=films, anniversaries=anniversaries, generated_on=today)
