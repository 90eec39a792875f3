import importlib

MODULES = [
    'faleproxy.config',
    'faleproxy.exceptions',
    'faleproxy.domain',
    'faleproxy.services.http_service',
    'faleproxy.services.fetcher',
    'faleproxy.services.url_validator',
    'faleproxy.services.term_rewriter',
    'faleproxy.services.html_rewriter',
    'faleproxy.services.proxy_service',
    'faleproxy.container',
    'faleproxy.api.app',
    'faleproxy.api.routers',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
