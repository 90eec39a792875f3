import logging
from typing import Optional

from faleproxy.domain.rewrite_result import RewriteResult
from faleproxy.services.fetcher import Fetcher
from faleproxy.services.html_rewriter import DocumentRewriter
from faleproxy.services.url_validator import validate_url

logger = logging.getLogger(__name__)


def is_markup(content_type: Optional[str]) -> bool:
    """True for content the HTML rewriter can safely parse.

    A missing Content-Type is treated as HTML.
    """
    ct = (content_type or '').split(';', 1)[0].strip().lower()
    return ct == '' or ct.startswith('text/') or ct == 'application/xhtml+xml'


class ProxyService:
    """Fetches a page and returns it with the configured term substituted.

    Raises the `ProxyError` hierarchy; translating errors into HTTP
    responses is left to the API layer. Bodies that are not text or HTML
    are passed through unchanged.
    """

    def __init__(self, fetcher: Fetcher, rewriter: DocumentRewriter):
        self.fetcher = fetcher
        self.rewriter = rewriter

    def fetch_and_rewrite(self, url: str) -> RewriteResult:
        target = validate_url(url)
        logger.info("Fetching %s", target)
        response = self.fetcher.fetch(target)

        if not is_markup(response.content_type):
            logger.info(
                "Content type not supported %s (status %s). Returning %s unchanged",
                response.content_type, response.status_code, target,
            )
            return RewriteResult(success=True, content=response.text, original_url=url, title=None)

        document = self.rewriter.rewrite(response.text)
        logger.info(
            "Rewrote %s (status %s): %d replacement(s)",
            target, response.status_code, document.replacements,
        )
        return RewriteResult(
            success=True,
            content=document.content,
            original_url=url,
            title=document.title,
        )
