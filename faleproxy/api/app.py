from fastapi import FastAPI

from faleproxy.api.routers import create_fetch_router, create_systems_router


def create_app(container) -> FastAPI:
    """Build the FastAPI application from a configured `Container`."""
    app = FastAPI(title="faleproxy")
    app.include_router(create_fetch_router(container.proxy_service()))
    app.include_router(
        create_systems_router(
            term_rewriter=container.term_rewriter(),
            http_service=container.http_service(),
            bind=container.config(),
        )
    )
    return app
