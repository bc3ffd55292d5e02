"""
TMDB discovery client.

Only the one endpoint the anniversary panels need is wrapped. The API key is
passed in at construction; nothing here reads the environment.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import requests
from dateutil.relativedelta import relativedelta

from .config import DEFAULT_TMDB_BASE_URL
from .exceptions import DiscoveryError
from .models import ANNIVERSARY_YEARS

logger = logging.getLogger(__name__)


def anniversary_window(
    today: date,
    *,
    years: int = ANNIVERSARY_YEARS,
    pad_months: int = 2,
) -> Tuple[date, date]:
    """
    Release-date range whose anniversaries fall around `today`.

    TMDB filters on the primary release date, which can precede the wider
    release by weeks, so the range is padded on both sides.
    """
    anchor = today - relativedelta(years=years)
    pad = relativedelta(months=pad_months)
    return anchor - pad, anchor + pad


class TMDBClient:
    """
    The Movie Database API client (v3, api_key auth).

    Holds no connection state of its own: each call runs on the session it is
    given, or on a throwaway one. `session` at construction pins one session
    for every call.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_TMDB_BASE_URL,
        region: str = "US",
        timeout: float = 10.0,
        window_pad_months: int = 2,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ValueError("TMDB api_key is required.")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.region = region
        self.timeout = timeout
        self.window_pad_months = window_pad_months
        self._session = session

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> Dict[str, Any]:
        """GET an endpoint and return the decoded JSON object."""
        http = self._session if self._session is not None else session
        if http is None:
            with requests.Session() as owned:
                return self.get(endpoint, params, session=owned)

        query = {"api_key": self._api_key, **(params or {})}
        try:
            response = http.get(
                f"{self.base_url}{endpoint}",
                params=query,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            # Drop the query string so the key never lands in the logs.
            raise DiscoveryError(f"TMDB request failed: {endpoint} ({type(e).__name__})") from e
        except ValueError as e:
            raise DiscoveryError(f"TMDB returned a non-JSON body: {endpoint}") from e

        if not isinstance(payload, dict):
            raise DiscoveryError(f"TMDB returned an unexpected payload: {endpoint}")
        return payload

    def discover_anniversary_candidates(
        self,
        today: date,
        *,
        session: Optional[requests.Session] = None,
    ) -> List[Dict[str, Any]]:
        """First page of popular films released roughly ten years before `today`."""
        start, end = anniversary_window(today, pad_months=self.window_pad_months)
        payload = self.get("/discover/movie", {
            "language": "en-US",
            "region": self.region,
            "sort_by": "popularity.desc",
            "include_adult": "false",
            "primary_release_date.gte": start.isoformat(),
            "primary_release_date.lte": end.isoformat(),
            "page": 1,
        }, session=session)
        results = payload.get("results")
        if not isinstance(results, list):
            raise DiscoveryError("TMDB discover response has no results list")
        logger.debug("TMDB discover %s..%s returned %d results", start, end, len(results))
        return results
