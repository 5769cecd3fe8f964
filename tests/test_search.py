import threading
import time

import pytest

from metasearch.schemas import SourceItem
from metasearch.search import dedupe_by_url, search_sources


def _item(url: str, source: str, title: str = "t") -> SourceItem:
    return SourceItem(title=title, url=url, source=source)


def _fixed(items):
    return lambda query: list(items)


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_blank_query_makes_no_calls(raw) -> None:
    called = []

    def spy(query):
        called.append(query)
        return []

    resp = search_sources(raw, fetchers=[("a", spy), ("b", spy), ("c", spy)])

    assert resp.items == []
    assert resp.took_ms == 0
    assert resp.query == ""
    assert called == []


def test_query_is_trimmed_before_fan_out() -> None:
    seen = []

    def spy(query):
        seen.append(query)
        return []

    resp = search_sources("  sora 2  ", fetchers=[("a", spy)])

    assert resp.query == "sora 2"
    assert seen == ["sora 2"]


def test_merge_keeps_source_priority_and_counts() -> None:
    wiki = [_item("https://w/1", "encyclopedia"), _item("https://w/2", "encyclopedia")]
    ddg = [_item("https://d/1", "instant_answer")]
    hn = [_item("https://h/1", "news"), _item("https://h/2", "news")]

    resp = search_sources("q", fetchers=[
        ("wikipedia", _fixed(wiki)),
        ("duckduckgo", _fixed(ddg)),
        ("hackernews", _fixed(hn)),
    ])

    assert len(resp.items) == len(wiki) + len(ddg) + len(hn)
    assert [i.source for i in resp.items] == [
        "encyclopedia", "encyclopedia", "instant_answer", "news", "news",
    ]


def test_duplicate_url_keeps_higher_priority_source() -> None:
    shared = "https://en.wikipedia.org/wiki/Sora"
    wiki = [SourceItem(title="Sora", url=shared, snippet="from wiki", source="encyclopedia")]
    ddg = [SourceItem(title="Sora heading", url=shared, snippet="from ddg", source="instant_answer")]

    resp = search_sources("sora", fetchers=[("wikipedia", _fixed(wiki)), ("duckduckgo", _fixed(ddg))])

    assert len(resp.items) == 1
    assert resp.items[0].title == "Sora"
    assert resp.items[0].snippet == "from wiki"


def test_dedupe_by_url_first_wins_within_one_source() -> None:
    items = [_item("u1", "news", "a"), _item("u2", "news"), _item("u1", "news", "b")]
    out = dedupe_by_url(items)
    assert [i.url for i in out] == ["u1", "u2"]
    assert out[0].title == "a"


def test_slow_source_is_dropped_not_awaited() -> None:
    release = threading.Event()

    def slow(query):
        release.wait(5)
        return [_item("https://late", "news")]

    fast = _fixed([_item("https://fast", "encyclopedia")])

    started = time.monotonic()
    resp = search_sources("q", fetchers=[("fast", fast), ("slow", slow)], timeout_ms=100)
    elapsed = time.monotonic() - started
    release.set()

    assert [i.url for i in resp.items] == ["https://fast"]
    assert elapsed < 2
    assert 0 <= resp.took_ms < 2000


def test_sources_run_concurrently_each_with_own_budget() -> None:
    def sleepy(url, source):
        def fetch(query):
            time.sleep(0.4)
            return [_item(url, source)]
        return fetch

    started = time.monotonic()
    resp = search_sources("q", fetchers=[
        ("wikipedia", sleepy("https://w", "encyclopedia")),
        ("duckduckgo", sleepy("https://d", "instant_answer")),
        ("hackernews", sleepy("https://h", "news")),
    ], timeout_ms=1000)
    elapsed = time.monotonic() - started

    assert [i.url for i in resp.items] == ["https://w", "https://d", "https://h"]
    assert elapsed < 0.8
    assert 390 <= resp.took_ms < 800


def test_raising_source_yields_empty_branch() -> None:
    def broken(query):
        raise RuntimeError("boom")

    resp = search_sources("q", fetchers=[
        ("broken", broken),
        ("ok", _fixed([_item("https://ok", "news")])),
    ])

    assert [i.url for i in resp.items] == ["https://ok"]


def test_payload_uses_wire_names_and_drops_missing_snippet() -> None:
    resp = search_sources("q", fetchers=[("a", _fixed([_item("https://a", "news")]))])
    payload = resp.to_payload()

    assert set(payload) == {"query", "items", "tookMs"}
    assert payload["items"] == [{"title": "t", "url": "https://a", "source": "news"}]
