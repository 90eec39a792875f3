"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from faleproxy.services.http_service import HttpService
from faleproxy.services.fetcher import HttpServiceFetcher
from faleproxy.services.term_rewriter import TermRewriter
from faleproxy.services.html_rewriter import HtmlRewriter
from faleproxy.services.proxy_service import ProxyService
from faleproxy import config as env


# Environment variables used by the container (read via `faleproxy.config` helpers).
#
# USER_AGENT (str, default: "FaleProxy/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds | optional)
#   Timeout for outbound HTTP requests. Unset keeps the requests default.
#
# FALEPROXY_SOURCE_TERM (str, default: "Yale")
#   Word replaced in fetched pages.
#
# FALEPROXY_TARGET_TERM (str, default: "Fale")
#   Replacement word.
#
# HOST (str, default: "0.0.0.0") / PORT (int, default: 3001)
#   Bind address for the HTTP server started by run.py.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "FaleProxy/0.1"),
    "HTTP_TIMEOUT": env.get_optional_int_env("HTTP_TIMEOUT"),
    "FALEPROXY_SOURCE_TERM": env.get_str_env("FALEPROXY_SOURCE_TERM", "Yale"),
    "FALEPROXY_TARGET_TERM": env.get_str_env("FALEPROXY_TARGET_TERM", "Fale"),
    "HOST": env.get_str_env("HOST", "0.0.0.0"),
    "PORT": env.get_int_env("PORT", 3001),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the faleproxy application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT,
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    term_rewriter = providers.Singleton(
        TermRewriter,
        source=config.FALEPROXY_SOURCE_TERM.as_(str),
        target=config.FALEPROXY_TARGET_TERM.as_(str),
    )

    html_rewriter = providers.Singleton(
        HtmlRewriter,
        term_rewriter=term_rewriter,
    )

    proxy_service = providers.Singleton(
        ProxyService,
        fetcher=page_fetcher,
        rewriter=html_rewriter,
    )
