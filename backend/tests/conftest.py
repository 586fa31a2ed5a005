"""Pytest fixtures for rank check tests."""

import json
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from rank_checker.tracking.schemas import SearchRequestParams


def make_http_response(body: str, status_code: int = 200) -> MagicMock:
    """Stand-in for requests.Response with the attributes the client reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    resp.text = body
    resp.content = body.encode("utf-8")
    return resp


def make_session(body: str, status_code: int = 200) -> MagicMock:
    session = MagicMock()
    session.get.return_value = make_http_response(body, status_code)
    return session


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's env vars out of Settings."""
    for key in (
        "HASDATA_API_KEY",
        "RANK_CHECKER_API_KEY",
        "RANK_CHECKER_QUERY",
        "RANK_CHECKER_LOCATION",
        "RANK_CHECKER_FILTER",
        "RANK_CHECKER_DEVICE_TYPE",
        "RANK_CHECKER_SEARCHED_DOMAIN",
        "RANK_CHECKER_OUTPUT_PATH",
        "RANK_CHECKER_EMPTY_POLICY",
        "RANK_CHECKER_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def coffee_params():
    return SearchRequestParams(query="Coffee", searched_domain="wikipedia.org")


@pytest.fixture
def captured_at():
    return datetime(2024, 5, 17, 9, 3, 7)


@pytest.fixture
def coffee_response():
    """Single Wikipedia result for 'Coffee'."""
    return {
        "organicResults": [
            {
                "position": 1,
                "link": "https://en.wikipedia.org/wiki/Coffee",
                "title": "Coffee",
                "displayedLink": "wikipedia.org",
                "source": "Wikipedia",
                "snippet": "...",
            }
        ],
        "requestMetadata": {
            "googleUrl": "https://google.com/search?q=coffee",
            "googleHtmlFile": "f.html",
        },
    }


@pytest.fixture
def coffee_body(coffee_response):
    return json.dumps(coffee_response)


@pytest.fixture
def mixed_response():
    """Five results, three of which mention wikipedia.org somewhere in the link."""
    return {
        "organicResults": [
            {"position": 1, "link": "https://www.starbucks.com/", "title": "Starbucks"},
            {
                "position": 2,
                "link": "https://en.wikipedia.org/wiki/Coffee",
                "title": "Coffee - Wikipedia",
                "displayedLink": "en.wikipedia.org › wiki › Coffee",
                "source": "Wikipedia",
                "snippet": "Coffee is a beverage brewed from roasted coffee beans.",
            },
            {"position": 3, "title": "No link at all"},
            {
                "position": 4,
                "link": "https://example.com/redirect?to=wikipedia.org",
                "title": "Redirect, with, commas",
                "snippet": 'He said "brew it"\nthen left',
            },
            {"position": 5, "link": "https://simple.wikipedia.org/wiki/Coffee", "title": "Coffee"},
        ],
        "requestMetadata": {
            "googleUrl": "https://www.google.com/search?q=Coffee",
            "googleHtmlFile": "https://storage.hasdata.com/abc.html",
        },
    }


@pytest.fixture
def session_factory():
    return make_session
