"""End-to-end tests through the FastAPI app with the outbound HTTP client mocked."""
from types import SimpleNamespace

import pytest
import requests
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from faleproxy.api.app import create_app
from faleproxy.container import Container
from faleproxy.services.http_service import HttpService


def _fake_http_client(pages):
    def get(url, headers=None, timeout=None):
        if url not in pages:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        return SimpleNamespace(
            status_code=200,
            text=pages[url],
            headers={"Content-Type": "text/html; charset=utf-8"},
            raise_for_status=lambda: None,
        )
    return get


@pytest.fixture
def client(sample_html_with_yale):
    container = Container()
    container.config.FALEPROXY_SOURCE_TERM.from_value("Yale")
    container.config.FALEPROXY_TARGET_TERM.from_value("Fale")
    container.http_service.override(
        HttpService(
            user_agent="TestBot/1.0",
            http_client=_fake_http_client({"https://example.com/": sample_html_with_yale}),
        )
    )
    yield TestClient(create_app(container))
    container.http_service.reset_override()


def test_replaces_yale_with_fale_in_fetched_content(client):
    response = client.post("/fetch", json={"url": "https://example.com/"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["originalUrl"] == "https://example.com/"
    assert data["title"] == "Fale University Test Page"

    soup = BeautifulSoup(data["content"], "html.parser")
    assert soup.title.get_text() == "Fale University Test Page"
    assert soup.h1.get_text() == "Welcome to Fale University"
    assert "Fale University is a private" in soup.find("p").get_text()

    hrefs = [a.get("href") for a in soup.find_all("a")]
    assert any(href and "yale.edu" in href for href in hrefs)
    assert soup.find("a").get_text() == "About Fale"


def test_invalid_url_returns_500(client):
    response = client.post("/fetch", json={"url": "not-a-valid-url"})
    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to fetch content")


def test_unreachable_url_returns_500(client):
    response = client.post("/fetch", json={"url": "https://unreachable.example/"})
    assert response.status_code == 500
    assert "no route to" in response.json()["error"]


def test_missing_url_returns_400(client):
    response = client.post("/fetch", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "URL is required"}


def test_missing_body_returns_400(client):
    response = client.post("/fetch")
    assert response.status_code == 400
    assert response.json()["error"] == "URL is required"


def test_health(client):
    assert client.get("/systems/health").json() == {"status": "ok"}


@pytest.mark.parametrize("url", [5, ["https://example.com/"], {"href": "https://example.com/"}])
def test_non_string_url_returns_500(client, url):
    response = client.post("/fetch", json={"url": url})
    assert response.status_code == 500
    assert "is not a string" in response.json()["error"]


@pytest.mark.parametrize("body", [[], "x", 3])
def test_non_object_body_returns_400(client, body):
    response = client.post("/fetch", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "URL is required"}


def test_systems_config_reports_terms(client):
    data = client.get("/systems/config").json()
    assert data["terms"] == {"source": "Yale", "target": "Fale"}
    assert data["outbound"]["user_agent"] == "TestBot/1.0"
