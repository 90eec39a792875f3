import logging
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from faleproxy.exceptions import ProxyError
from faleproxy.services.proxy_service import ProxyService

logger = logging.getLogger(__name__)

URL_REQUIRED = "URL is required"
FETCH_FAILED = "Failed to fetch content"


class FetchRequest(BaseModel):
    # Left untyped: a non-string url is a malformed URL (500), not a 422
    url: Any = None


def _parse_request(payload: Any) -> FetchRequest:
    """Read a FetchRequest from any JSON body; non-object bodies carry no url."""
    if not isinstance(payload, dict):
        return FetchRequest()
    return FetchRequest.model_validate(payload)


def _is_missing(url: Any) -> bool:
    if isinstance(url, str):
        return not url.strip()
    return not url


def create_fetch_router(proxy_service: ProxyService):
    router = APIRouter(tags=["Proxy"])

    @router.post("/fetch")
    def fetch(payload: Any = Body(default=None)):
        url = _parse_request(payload).url
        if _is_missing(url):
            return JSONResponse(status_code=400, content={"error": URL_REQUIRED})

        try:
            result = proxy_service.fetch_and_rewrite(url)
        except ProxyError as e:
            logger.warning("Fetch failed for %r: %s", url, e)
            return JSONResponse(status_code=500, content={"error": f"{FETCH_FAILED}: {e}"})
        except Exception:
            logger.exception("Unexpected error while proxying %r", url)
            return JSONResponse(status_code=500, content={"error": FETCH_FAILED})

        return result.to_payload()

    return router
