"""URL validation helpers used before any browser work starts."""

from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def normalize_url(url: str) -> str:
    """Prefix https:// when no scheme is given."""
    if not url.startswith("http://") and not url.startswith("https://"):
        return f"https://{url}"
    return url
