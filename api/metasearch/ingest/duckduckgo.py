import logging
from typing import List
from .http import get_json
from ..schemas import SourceItem
from ..settings import settings

_logger = logging.getLogger(__name__)

ABSTRACT_TITLE = "DuckDuckGo Instant Answer"
RELATED_TITLE = "Related"

def _topic_title(text: str) -> str:
    # "Sora (model) - An AI video generator..." -> "Sora (model)"
    return text.split(" - ", 1)[0] or RELATED_TITLE

def fetch_duckduckgo(query: str) -> List[SourceItem]:
    """
    Query the DuckDuckGo Instant Answer API.

    Emits the abstract (if any) followed by the first few related topics
    that carry both a link and text. Returns [] on any failure.
    """
    try:
        js = get_json(settings.DUCKDUCKGO_URL, params={
            "q": query,
            "format": "json",
            "no_redirect": 1,
            "no_html": 1,
        })
        if not isinstance(js, dict):
            return []
        out: List[SourceItem] = []
        if js.get("AbstractURL") and js.get("AbstractText"):
            out.append(SourceItem(
                title=js.get("Heading") or ABSTRACT_TITLE,
                url=js["AbstractURL"],
                snippet=js["AbstractText"],
                source="instant_answer",
            ))
        topics = js.get("RelatedTopics")
        if isinstance(topics, list):
            for t in topics[:settings.RELATED_TOPICS_LIMIT]:
                # grouped topics ({"Name": ..., "Topics": [...]}) carry no FirstURL
                if not isinstance(t, dict) or not (t.get("FirstURL") and t.get("Text")):
                    continue
                out.append(SourceItem(
                    title=_topic_title(t["Text"]),
                    url=t["FirstURL"],
                    snippet=t["Text"],
                    source="instant_answer",
                ))
        return out
    except Exception as e:
        _logger.warning("duckduckgo fetch failed for %r: %s", query, e)
        return []
