"""Custom exceptions for faleproxy services."""


class ProxyError(Exception):
    """Base class for failures while fetching or rewriting a page."""


class InvalidUrlError(ProxyError):
    """Raised when a requested URL is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "is not a valid absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"URL '{url}' {reason}")


class HttpFetchError(ProxyError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class RewriteError(ProxyError):
    """Raised when fetched HTML cannot be parsed or serialized."""

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(f"Could not rewrite document: {original}")
