import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional
from urllib.parse import quote
from .http import get_json, strip_html
from ..schemas import SourceItem
from ..settings import settings

_logger = logging.getLogger(__name__)

# characters encodeURIComponent leaves alone, so page links match the site's own
_TITLE_SAFE = "!~*'()"

def page_url(title: str) -> str:
    return settings.WIKIPEDIA_PAGE_URL + quote(title, safe=_TITLE_SAFE)

def _search_titles(query: str) -> Optional[List[Dict[str, Any]]]:
    js = get_json(settings.WIKIPEDIA_SEARCH_URL, params={
        "action": "query",
        "list": "search",
        "srsearch": query,
        "format": "json",
        "srlimit": settings.MAX_RESULTS,
        "utf8": 1,
    })
    if js is None:
        return None
    pages = (js.get("query") or {}).get("search") or []
    return [p for p in pages[:settings.MAX_RESULTS] if isinstance(p, dict) and p.get("title")]

def _summary_extract(title: str) -> Optional[str]:
    # Non-success status just means no long extract; exceptions propagate
    js = get_json(settings.WIKIPEDIA_SUMMARY_URL + quote(title, safe=_TITLE_SAFE))
    if not isinstance(js, dict):
        return None
    return js.get("extract") or None

def fetch_wikipedia(query: str) -> List[SourceItem]:
    """
    Search Wikipedia, then fetch each hit's page summary concurrently.

    Snippet preference: summary extract, then the search snippet with its
    <span class="searchmatch"> markup removed, then nothing.
    """
    try:
        pages = _search_titles(query)
        if not pages:
            return []
        titles = [p["title"] for p in pages]
        with ThreadPoolExecutor(max_workers=len(titles)) as pool:
            extracts = list(pool.map(_summary_extract, titles))
        out = []
        for p, extract in zip(pages, extracts):
            out.append(SourceItem(
                title=p["title"],
                url=page_url(p["title"]),
                snippet=extract or strip_html(p.get("snippet")),
                source="encyclopedia",
            ))
        return out
    except Exception as e:
        _logger.warning("wikipedia fetch failed for %r: %s", query, e)
        return []
