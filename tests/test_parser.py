"""Tests for RSS document parsing and per-item field extraction."""
import pytest

from tardy_critic.exceptions import FeedParseError
from tardy_critic.parser import parse_document, parse_entry, split_description

from conftest import make_feed, make_item


class TestParseDocument:

    def test_one_entry_per_item(self, sample_feed):
        entries = parse_document(sample_feed)
        assert len(entries) == 3
        assert all(e.get("link") for e in entries)

    def test_empty_channel_yields_no_entries(self):
        assert parse_document(make_feed()) == []

    def test_malformed_document_raises(self):
        broken = b"<rss version='2.0'><channel><item><title>Broken</item></channel>"
        with pytest.raises(FeedParseError):
            parse_document(broken)

    def test_str_document_is_parsed_as_content(self, sample_feed):
        assert len(parse_document(sample_feed.decode("utf-8"))) == 3

    def test_path_like_str_is_not_opened(self, tmp_path, sample_feed):
        feed_file = tmp_path / "feed.xml"
        feed_file.write_bytes(sample_feed)

        with pytest.raises(FeedParseError):
            parse_document(str(feed_file))


class TestSplitDescription:

    def test_poster_paragraph_is_removed(self):
        html = '<p><img src="https://a.ltrbxd.com/poster.jpg"/></p> <p>Great.</p><p>Really.</p>'
        image_url, review = split_description(html)
        assert image_url == "https://a.ltrbxd.com/poster.jpg"
        assert review == "<p>Great.</p><p>Really.</p>"

    def test_image_url_found_even_when_not_first_attribute(self):
        html = '<p><img alt="poster" src="https://a.ltrbxd.com/poster.jpg"/></p><p>Fine.</p>'
        image_url, review = split_description(html)
        assert image_url == "https://a.ltrbxd.com/poster.jpg"
        assert review == "<p>Fine.</p>"

    def test_leading_text_paragraph_is_kept(self):
        html = "<p>No poster here.</p><p>Second.</p>"
        image_url, review = split_description(html)
        assert image_url is None
        assert review == "<p>No poster here.</p><p>Second.</p>"

    def test_empty_description(self):
        assert split_description("") == (None, "")


class TestParseEntry:

    def _entry(self, **kwargs):
        return parse_document(make_feed(make_item("whiplash-2014", **kwargs)))[0]

    def test_letterboxd_fields(self):
        parsed = parse_entry(self._entry(rewatch="Yes"))

        assert parsed["link"] == "https://letterboxd.com/tardycritic/film/whiplash-2014/"
        assert parsed["title"] == "Whiplash"
        assert parsed["year"] == "2014"
        assert parsed["watched_date"] == "2024-03-01"
        assert parsed["rating"] == "4.5"
        assert parsed["rewatched"] is True
        assert parsed["published_at"] == "Sat, 2 Mar 2024 10:00:00 +1300"
        assert parsed["item_title"].startswith("Whiplash, 2014")

    def test_poster_and_review_extracted(self):
        parsed = parse_entry(self._entry())

        assert parsed["image_url"] == "https://a.ltrbxd.com/resized/whiplash-2014.jpg"
        assert "Not quite my tempo." in parsed["review_html"]
        assert "<img" not in parsed["review_html"]

    @pytest.mark.parametrize("raw", ["yes", "No", "YES"])
    def test_rewatch_requires_exact_yes(self, raw):
        assert parse_entry(self._entry(rewatch=raw))["rewatched"] is False

    def test_rewatch_absent_is_false(self):
        assert parse_entry(self._entry(rewatch=None))["rewatched"] is False

    def test_rewatch_empty_is_false(self):
        assert parse_entry(self._entry(rewatch=""))["rewatched"] is False

    def test_missing_optional_fields_stay_none(self):
        parsed = parse_entry(self._entry(rating=None, watched=None, year=None))

        assert parsed["rating"] is None
        assert parsed["watched_date"] is None
        assert parsed["year"] is None
