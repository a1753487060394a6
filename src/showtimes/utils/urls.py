"""URL helpers for the identifiers and redirects embedded in result pages."""

from urllib.parse import parse_qs, urljoin, urlsplit

from showtimes.config import settings


def query_param(url: str | None, name: str) -> str | None:
    """
    Return the first value of query parameter ``name`` in ``url``.

    Args:
        url: Absolute or relative URL (may be None)
        name: Parameter name, e.g. "tid" or "mid"

    Returns:
        Parameter value, or None if the URL or the parameter is missing
    """
    if not url:
        return None
    values = parse_qs(urlsplit(url).query).get(name)
    if not values:
        return None
    return values[0]


def uncloak_url(href: str | None, base_url: str | None = None) -> str | None:
    """
    Resolve a cloaked redirect link to its real destination.

    The service wraps outbound links as ``/url?q=<destination>&sa=...``.
    The href is rebased onto the service origin and its ``q`` parameter
    is returned.

    Example:
        "/url?q=http://www.imdb.com/title/tt0000001/&sa=X"
            → "http://www.imdb.com/title/tt0000001/"
    """
    if not href:
        return None
    absolute = urljoin(base_url or settings.base_url, href)
    return query_param(absolute, "q")
