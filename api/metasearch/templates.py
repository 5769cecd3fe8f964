import pathlib
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"

SOURCE_LABELS = {
    "encyclopedia": "Wikipedia",
    "instant_answer": "DuckDuckGo",
    "news": "Hacker News",
}

def source_label(tag: str) -> str:
    return SOURCE_LABELS.get(tag, tag)

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["source_label"] = source_label

def render(name: str, ctx: dict, status_code: int = 200) -> HTMLResponse:
    # result pages depend on live upstream data, never cache them
    html = _env.get_template(name).render(**ctx)
    return HTMLResponse(html, status_code=status_code, headers={"Cache-Control": "no-store"})
