from urllib.parse import urlparse

from faleproxy.exceptions import InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str) -> str:
    """Return `url` stripped of surrounding whitespace if it is an absolute http(s) URL.

    Raises InvalidUrlError otherwise.
    """
    if not isinstance(url, str):
        raise InvalidUrlError(repr(url), "is not a string")
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
        # Accessing .port validates the port component
        parsed.port
    except ValueError as e:
        raise InvalidUrlError(candidate, f"could not be parsed: {e}") from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidUrlError(candidate, "must use http or https")
    if not parsed.hostname:
        raise InvalidUrlError(candidate, "has no host")
    return candidate
