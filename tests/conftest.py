import pytest


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, error: Exception | None = None):
        self._payload = payload
        self.status_code = status_code
        self._error = error

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._error:
            raise self._error
        return self._payload


@pytest.fixture
def upstream(monkeypatch):
    """Route outbound GETs to canned responses keyed by URL prefix."""
    routes: dict = {}
    calls: list = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        for prefix in sorted(routes, key=len, reverse=True):
            if url.startswith(prefix):
                handler = routes[prefix]
                return handler(url, params) if callable(handler) else handler
        raise AssertionError(f"unexpected upstream call: {url}")

    monkeypatch.setattr("metasearch.ingest.http.requests.get", fake_get)
    return routes, calls
