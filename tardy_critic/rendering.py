"""
Server-side HTML for the two pages.

Feed-supplied text is escaped; the review body is already sanitized HTML
(feedparser cleans item descriptions) and is embedded as-is.
"""
from __future__ import annotations

import html
from typing import List, Optional

from .models import AnniversaryCandidate, FilmReview, PageData

SITE_TITLE = "Tardy Critic"

_STYLE = """
body { background: #14181c; color: #e6e6e6; font-family: Montserrat, system-ui, sans-serif; line-height: 1.4; }
main { max-width: 1200px; margin: 0 auto; padding: 0 1rem; }
a { color: inherit; }
h1 a { text-decoration: none; text-transform: uppercase; }
.latest { display: flex; gap: 2rem; margin-bottom: 2rem; }
.latest img { width: 230px; }
.grid { display: flex; flex-wrap: wrap; }
.poster { width: 100%; max-width: 200px; margin: 0 1rem 1rem 0; }
.poster img { width: 100%; }
.poster .caption { text-align: center; }
.rewatch { font-size: 0.8rem; text-transform: uppercase; opacity: 0.7; }
.anniversaries { display: flex; flex-wrap: wrap; gap: 2rem; }
.anniversaries ul { list-style: none; padding: 0; }
"""


def _e(value: Optional[str]) -> str:
    return html.escape(str(value)) if value else ""


def format_rating(rating: Optional[str]) -> str:
    """Render a numeric rating ("3.5") as stars ("★★★½"). Unparseable input is returned as-is."""
    if not rating:
        return ""
    try:
        value = float(rating)
    except ValueError:
        return rating
    whole = int(value)
    half = "½" if value - whole >= 0.5 else ""
    return "★" * whole + half


def _layout(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{_e(title)}</title>
<style>{_STYLE}</style>
</head>
<body>
<main>
<h1><a href="/">{SITE_TITLE}</a></h1>
{body}
</main>
</body>
</html>
"""


def _film_heading(film: FilmReview) -> str:
    heading = _e(film.display_title)
    if film.year:
        heading += f" ({_e(film.year)})"
    return heading


def render_latest(film: Optional[FilmReview]) -> str:
    if film is None:
        return ""
    poster = ""
    if film.image_url:
        poster = f'<a href="{_e(film.link)}"><img src="{_e(film.image_url)}" alt="{_e(film.display_title)}"></a>'
    meta = []
    if film.rating:
        meta.append(f'<span class="rating">{_e(format_rating(film.rating))}</span>')
    if film.rewatched:
        meta.append('<span class="rewatch">Rewatch</span>')
    if film.watched_date:
        meta.append(f'<span class="watched">Watched {_e(film.watched_date)}</span>')
    return f"""<section class="latest">
{poster}
<div>
<h2>Latest review</h2>
<h3><a href="{_e(film.link)}">{_film_heading(film)}</a></h3>
<p>{" ".join(meta)}</p>
<div class="review">{film.review_html}</div>
</div>
</section>"""


def _anniversary_list(heading: str, candidates: List[AnniversaryCandidate]) -> str:
    if not candidates:
        return ""
    rows = []
    for c in candidates:
        poster = ""
        if c.poster_url:
            poster = f'<img src="{_e(c.poster_url)}" alt="{_e(c.title)}" width="92"> '
        rows.append(
            f'<li>{poster}<a href="{_e(c.link)}">{_e(c.title)}</a> '
            f'<time datetime="{c.tenth_anniversary_date.isoformat()}">'
            f'{c.tenth_anniversary_date.strftime("%b %d, %Y")}</time></li>'
        )
    return f'<div><h2>{_e(heading)}</h2><ul>{"".join(rows)}</ul></div>'


def render_anniversaries(page: PageData) -> str:
    panels = (
        _anniversary_list("Ten years ago today", page.anniversaries.today)
        + _anniversary_list("Coming up", page.anniversaries.upcoming)
    )
    if not panels:
        return ""
    return f'<section class="anniversaries">{panels}</section>'


def render_grid(films: List[FilmReview]) -> str:
    cards = []
    for film in films:
        image = ""
        if film.image_url:
            image = f'<img src="{_e(film.image_url)}" alt="{_e(film.display_title)}">'
        cards.append(
            f'<div class="poster"><a href="{_e(film.link)}">{image}</a>'
            f'<div class="caption">{_film_heading(film)}</div></div>'
        )
    return f'<section class="grid">{"".join(cards)}</section>'


def render_home(page: PageData) -> str:
    body = render_latest(page.latest) + render_anniversaries(page) + render_grid(page.films)
    if not page.films:
        body += "<p>No reviews to show right now.</p>"
    return _layout(SITE_TITLE, body)


def render_about() -> str:
    body = """<h2>About</h2>
<p>
We believe that reviewing movies ten years after their release provides a unique perspective on the film, as it's removed from the initial hype and promotion surrounding its debut. By giving each film time to simmer and re-watching it with a fresh set of eyes, we can more accurately assess its impact and relevance.
</p>
<p>
We're always looking for ways to improve our reviews and expand our coverage. We're open to feedback and suggestions on how we can better serve our readers and provide a more insightful and engaging analysis of each film.
</p>
<h3>How it began...</h3>
<img alt="Twitter conversation where the idea began" src="/Tardy-Critic-Humble-Beginnings.png">"""
    return _layout(f"About {SITE_TITLE}", body)
