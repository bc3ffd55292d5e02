from unittest.mock import Mock

import pytest
import requests


FEED_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:letterboxd="https://letterboxd.com" xmlns:tmdb="https://themoviedb.org" xmlns:dc="http://purl.org/dc/elements/1.1/">
<channel>
<title>Letterboxd - Tardy Critic</title>
<link>https://letterboxd.com/tardycritic/</link>
<description>Letterboxd - Tardy Critic</description>
"""

FEED_FOOTER = """</channel>
</rss>
"""


def make_item(
    slug,
    *,
    title="Whiplash",
    year="2014",
    watched="2024-03-01",
    rewatch="No",
    rating="4.5",
    review="<p>Not quite my tempo.</p>",
    poster=None,
):
    """One Letterboxd review <item>; pass None to leave an optional element out."""
    poster = poster or f"https://a.ltrbxd.com/resized/{slug}.jpg"
    parts = [
        "<item>",
        f"<title>{title}, {year} - ★★★★</title>",
        f"<link>https://letterboxd.com/tardycritic/film/{slug}/</link>",
        f'<guid isPermaLink="false">letterboxd-review-{slug}</guid>',
        "<pubDate>Sat, 2 Mar 2024 10:00:00 +1300</pubDate>",
    ]
    if watched is not None:
        parts.append(f"<letterboxd:watchedDate>{watched}</letterboxd:watchedDate>")
    if rewatch is not None:
        parts.append(f"<letterboxd:rewatch>{rewatch}</letterboxd:rewatch>")
    if title is not None:
        parts.append(f"<letterboxd:filmTitle>{title}</letterboxd:filmTitle>")
    if year is not None:
        parts.append(f"<letterboxd:filmYear>{year}</letterboxd:filmYear>")
    if rating is not None:
        parts.append(f"<letterboxd:memberRating>{rating}</letterboxd:memberRating>")
    parts.append(
        f'<description><![CDATA[ <p><img src="{poster}"/></p> {review} ]]></description>'
    )
    parts.append("<dc:creator>Tardy Critic</dc:creator>")
    parts.append("</item>")
    return "\n".join(parts)


def make_feed(*items):
    return (FEED_HEADER + "\n".join(items) + FEED_FOOTER).encode("utf-8")


def make_response(*, content=b"", json_data=None, status_error=None, json_error=None):
    response = Mock()
    response.content = content
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def sample_feed():
    return make_feed(
        make_item("whiplash-2014", watched="2024-01-01", rewatch="Yes"),
        make_item("birdman", title="Birdman", watched="2023-06-15", rating="3.5"),
        make_item("boyhood", title="Boyhood", watched="2024-03-01", rating=None),
    )
