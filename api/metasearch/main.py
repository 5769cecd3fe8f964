import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse
from .search import search_sources
from .settings import settings
from .templates import render

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

DEFAULT_QUERY = "why is sora 2 good"

app = FastAPI(title="Metasearch")

@app.get("/", response_class=HTMLResponse)
def home(q: str | None = Query(None)):
    # First visit runs the sample query
    if q is None:
        q = DEFAULT_QUERY
    result = search_sources(q) if q.strip() else None
    return render("index.html", {"title": "Why is Sora 2 good?", "q": q, "result": result})

@app.get("/api/search")
def api_search(q: str | None = Query(None)):
    resp = search_sources(q)
    return JSONResponse(resp.to_payload(), headers={"Cache-Control": "no-store"})

@app.get("/healthz")
def healthz():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("metasearch.main:app", host=settings.API_HOST, port=settings.API_PORT)
