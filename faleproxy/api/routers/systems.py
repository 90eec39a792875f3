from fastapi import APIRouter

from faleproxy.services.http_service import HttpService
from faleproxy.services.term_rewriter import TermRewriter


def create_systems_router(term_rewriter: TermRewriter, http_service: HttpService, bind: dict):
    """Create systems router reporting the live rewrite and outbound settings.

    Only the values listed here are exposed; the raw environment is not echoed.
    """
    router = APIRouter(prefix="/systems", tags=["System"])

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        return {
            "terms": {
                "source": term_rewriter.source,
                "target": term_rewriter.target,
            },
            "outbound": {
                "user_agent": http_service.user_agent,
                "http_timeout": http_service.timeout,
            },
            "server": {
                "host": bind.get("HOST"),
                "port": bind.get("PORT"),
            },
        }

    return router
