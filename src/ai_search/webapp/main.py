from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..llm.config import LLMConfig
from ..logging_utils import configure_logging
from ..search import EmptyQueryError, resolve_with_source, validate_query
from ..settings import Settings, get_settings
from .schema import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="AI Search")
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@app.on_event("startup")
async def startup() -> None:
    configure_logging(get_settings().log_level)


def get_llm_config(settings: Settings = Depends(get_settings)) -> LLMConfig:
    return settings.llm_config()


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    # overridden in tests to fake the provider
    return None


async def run_search(
    raw_query: Optional[str],
    cfg: LLMConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SearchResponse:
    try:
        query = validate_query(raw_query)
    except EmptyQueryError as e:
        return SearchResponse.invalid(e.message)
    rs = await resolve_with_source(query, cfg.api_key, config=cfg, transport=transport)
    logger.info("query=%r source=%s results=%d", query, rs.source, len(rs))
    return SearchResponse.from_result_set(rs)


def _render(request: Request, settings: Settings, query: str = "", response: Optional[SearchResponse] = None):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "message": settings.app_message,
            "query": query,
            "response": response,
        },
    )


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, settings: Settings = Depends(get_settings)):
    return _render(request, settings)


@app.post("/", response_class=HTMLResponse)
async def search_form(
    request: Request,
    query: str = Form(""),
    settings: Settings = Depends(get_settings),
    cfg: LLMConfig = Depends(get_llm_config),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    # no-JS path: full page re-render
    response = await run_search(query, cfg, transport)
    return _render(request, settings, query=query, response=response)


@app.post("/api/search", response_model=SearchResponse)
async def api_search(
    request: Request,
    cfg: LLMConfig = Depends(get_llm_config),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = SearchRequest.model_validate(await request.json())
        except ValueError:
            return JSONResponse({"results": [], "error": "Invalid JSON body.", "source": None}, status_code=400)
        raw = body.query
    else:
        form = await request.form()
        value = form.get("query")
        raw = value if isinstance(value, str) else None
    return await run_search(raw, cfg, transport)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def run(host: str = "0.0.0.0", port: int = 8000):
    uvicorn.run("ai_search.webapp.main:app", host=host, port=port, reload=False)
