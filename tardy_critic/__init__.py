"""
tardy_critic

A small movie-review site that republishes a Letterboxd RSS feed and highlights
films reaching their tenth anniversary.

Core ideas:
- Input: the Letterboxd RSS feed, TMDB /discover/movie
- Process: fetch → parse → normalize → deduplicate → sort (most recently watched first);
  discover → filter (adult, votes) → match anniversaries (today / upcoming)
- Output: PageData, rendered as HTML by the FastAPI app

Example
-------
from tardy_critic import ReviewLoader, Settings

loader = ReviewLoader(Settings(tmdb_api_key="..."))
page = loader.load_page()

for film in page.films:
    print(film.watched_date, film.title, film.year)
"""
from .config import Settings
from .core import ReviewLoader
from .models import AnniversaryCandidate, Anniversaries, FilmReview, PageData

__all__ = [
    "Settings",
    "ReviewLoader",
    "FilmReview",
    "AnniversaryCandidate",
    "Anniversaries",
    "PageData",
]
