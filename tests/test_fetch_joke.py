import requests

import fetch_joke


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        return self._payload


def test_fetch_random_joke_passes_category(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse({"value": "Chuck Norris counted to infinity. Twice.", "categories": ["dev"]})

    monkeypatch.setattr(fetch_joke.requests, "get", fake_get)

    result = fetch_joke.fetch_random_joke("dev")

    assert result == {"value": "Chuck Norris counted to infinity. Twice.", "categories": ["dev"]}
    assert calls[0][0] == fetch_joke.RANDOM_URL
    assert calls[0][1] == {"category": "dev"}


def test_fetch_random_joke_reports_errors(monkeypatch):
    def fake_get(url, params=None, timeout=None):
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr(fetch_joke.requests, "get", fake_get)

    assert fetch_joke.fetch_random_joke() == {"error": "no route to host"}


def test_fetch_categories(monkeypatch):
    monkeypatch.setattr(fetch_joke.requests, "get", lambda url, timeout=None: FakeResponse(["dev", "food"]))

    assert fetch_joke.fetch_categories() == {"categories": ["dev", "food"]}


def test_fetch_categories_http_error(monkeypatch):
    monkeypatch.setattr(fetch_joke.requests, "get", lambda url, timeout=None: FakeResponse([], status_code=500))

    assert "error" in fetch_joke.fetch_categories()
