"""URL validation utilities."""

from __future__ import annotations

from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """Check if a string is an absolute HTTP/HTTPS URL."""
    try:
        parsed = urlparse(url)
        return parsed.scheme in ("http", "https") and bool(parsed.hostname)
    except ValueError:
        return False
