import requests
import warnings
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from typing import Any, Dict, Optional
from ..settings import settings

def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": settings.USER_AGENT,
        "Cache-Control": "no-store",
    }

def get_json(url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
    """
    GET a JSON document from an upstream source.

    Returns None when the upstream answers with a non-success status.
    Network and decoding errors propagate; each fetcher absorbs them.
    """
    r = requests.get(url, params=params, headers=_headers(), timeout=settings.HTTP_TIMEOUT_SECONDS)
    if not r.ok:
        return None
    return r.json()

# plain-text snippets such as "index.html" are not file paths
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

def strip_html(fragment: Optional[str]) -> Optional[str]:
    """Drop markup tags, keeping text and stray "<" characters as they are."""
    if not fragment:
        return None
    if "<" not in fragment:
        return fragment
    text = BeautifulSoup(fragment, "html.parser").get_text()
    return text or None
