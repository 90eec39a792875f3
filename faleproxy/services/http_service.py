import requests
from typing import Callable, Optional

from faleproxy.domain.http_response import HttpResponse
from faleproxy.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection so tests can
    swap in a mock instead of patching `requests`.
    A timeout of None leaves the client's default behaviour in place.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: Optional[int] = None):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type.

        Transport errors and error statuses (>= 400) raise HttpFetchError.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct)
