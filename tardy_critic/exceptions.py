class FeedFetchError(Exception):
    """Raised when the Letterboxd RSS feed cannot be downloaded."""


class FeedParseError(Exception):
    """Raised when a downloaded feed document is not well-formed RSS."""


class DiscoveryError(Exception):
    """Raised when the TMDB discovery request fails or returns an unexpected shape."""
