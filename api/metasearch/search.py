# Fan out one query to every source, then merge in fixed source order.
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Callable, List, Optional, Sequence, Tuple
from .ingest.wikipedia import fetch_wikipedia
from .ingest.duckduckgo import fetch_duckduckgo
from .ingest.hackernews import fetch_hackernews
from .schemas import SearchResponse, SourceItem
from .settings import settings

_logger = logging.getLogger(__name__)

Fetcher = Callable[[str], List[SourceItem]]

def default_fetchers() -> List[Tuple[str, Fetcher]]:
    # Order is merge priority
    return [
        ("wikipedia", fetch_wikipedia),
        ("duckduckgo", fetch_duckduckgo),
        ("hackernews", fetch_hackernews),
    ]

def dedupe_by_url(items: Sequence[SourceItem]) -> List[SourceItem]:
    seen = set()
    out = []
    for it in items:
        if it.url in seen:
            continue
        seen.add(it.url)
        out.append(it)
    return out

def _settle(name: str, future: Future, deadline: float) -> List[SourceItem]:
    """Result of one branch, or [] once its deadline has passed."""
    try:
        return future.result(timeout=max(0.0, deadline - time.monotonic()))
    except FutureTimeout:
        _logger.warning("source %s timed out, ignoring its result", name)
        return []
    except Exception as e:
        _logger.warning("source %s failed: %s", name, e)
        return []

def search_sources(raw_query: Optional[str],
                   fetchers: Optional[Sequence[Tuple[str, Fetcher]]] = None,
                   timeout_ms: Optional[int] = None) -> SearchResponse:
    """
    Run every fetcher concurrently and merge their items.

    - An empty or whitespace-only query returns at once, without any
      upstream call and with took_ms == 0.
    - Each branch gets timeout_ms from launch; a late branch counts as
      empty and is left running in the background, never cancelled.
    - Items are concatenated in fetcher order and de-duplicated by url,
      first occurrence wins.
    """
    query = (raw_query or "").strip()
    if not query:
        return SearchResponse(query=query, items=[], took_ms=0)

    fetchers = list(fetchers or default_fetchers())
    if timeout_ms is None:
        timeout_ms = settings.SOURCE_TIMEOUT_MS

    start = time.monotonic()
    deadline = start + timeout_ms / 1000.0
    pool = ThreadPoolExecutor(max_workers=len(fetchers), thread_name_prefix="source")
    try:
        futures = [(name, pool.submit(fn, query)) for name, fn in fetchers]
        results = [(name, _settle(name, f, deadline)) for name, f in futures]
    finally:
        # abandoned branches finish on their own
        pool.shutdown(wait=False)

    merged: List[SourceItem] = []
    for _, items in results:
        merged.extend(items)
    items = dedupe_by_url(merged)

    took_ms = int((time.monotonic() - start) * 1000)
    _logger.info("search %r: %s -> %d items in %d ms", query,
                 ", ".join(f"{name}={len(r)}" for name, r in results), len(items), took_ms)
    return SearchResponse(query=query, items=items, took_ms=took_ms)
