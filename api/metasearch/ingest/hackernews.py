import logging
from typing import Any, Dict, List, Optional
from .http import get_json, strip_html
from ..schemas import SourceItem
from ..settings import settings

_logger = logging.getLogger(__name__)

STORY_TITLE = "Hacker News story"

def _item_url(hit: Dict[str, Any]) -> str:
    if hit.get("url"):
        return hit["url"]
    # Ask HN / text posts have no external link
    return f"{settings.HN_ITEM_URL}?id={hit.get('objectID')}"

def _highlighted_title(hit: Dict[str, Any]) -> Optional[str]:
    hl = hit.get("_highlightResult") or {}
    value = (hl.get("title") or {}).get("value")
    return strip_html(value)

def fetch_hackernews(query: str) -> List[SourceItem]:
    """Search stories on the Algolia Hacker News API. Returns [] on any failure."""
    try:
        js = get_json(settings.HN_SEARCH_URL, params={
            "query": query,
            "tags": "story",
            "hitsPerPage": settings.MAX_RESULTS,
        })
        if not isinstance(js, dict):
            return []
        return [
            SourceItem(
                title=h.get("title") or STORY_TITLE,
                url=_item_url(h),
                snippet=_highlighted_title(h),
                source="news",
            )
            for h in (js.get("hits") or [])
        ]
    except Exception as e:
        _logger.warning("hackernews fetch failed for %r: %s", query, e)
        return []
