"""
Thin FastAPI REST layer wrapping the Subscene client and parsers.

Run with::

    uvicorn subscene.server:app --reload --port 8100
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from subscene import __version__
from subscene.client import SubsceneClient
from subscene.errors import HTTPError, NotFound, ParseError, SubsceneError, TransportError
from subscene.parsers import detect_page_type, parse_detail_page, parse_search_page

logger = logging.getLogger(__name__)

app = FastAPI(
    title='Subscene Client API',
    version=__version__,
    description='Release search and subtitle lookup for subscene.com.',
)

_client: Optional[SubsceneClient] = None


def get_client() -> SubsceneClient:
    """Process-wide client; override with ``app.dependency_overrides``."""
    global _client
    if _client is None:
        _client = SubsceneClient()
    return _client


def _raise_http(exc: Exception) -> None:
    """Map client errors onto REST status codes."""
    if isinstance(exc, NotFound):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(exc, TransportError):
        raise HTTPException(status_code=504, detail=str(exc)) from exc
    if isinstance(exc, (HTTPError, ParseError)):
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if isinstance(exc, ValueError):
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    raise HTTPException(status_code=500, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# Request / response schemas (Pydantic models for FastAPI validation)
# ---------------------------------------------------------------------------

class HtmlPayload(BaseModel):
    """POST body for all parse endpoints."""
    html: str


class LanguageFilterPayload(BaseModel):
    """PUT body for the language filter: names or exact ids."""
    names: Optional[str] = None
    ids: Optional[str] = None


class LanguageFilterResponse(BaseModel):
    language_filter: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = 'ok'
    version: str = __version__


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get('/api/health', response_model=HealthResponse)
def health_check():
    """Simple liveness probe."""
    return HealthResponse()


@app.get('/api/search')
def api_search(q: Optional[str] = None, client: SubsceneClient = Depends(get_client)) -> List[dict]:
    """Release search; without ``q`` returns the unfiltered listing."""
    try:
        return [r.to_dict() for r in client.search(q)]
    except SubsceneError as exc:
        _raise_http(exc)


@app.get('/api/subtitles/{subtitle_id}')
def api_subtitle(subtitle_id: str, url: Optional[str] = None,
                 client: SubsceneClient = Depends(get_client)) -> dict:
    """Subtitle detail by id, or by an explicit listing ``url``."""
    try:
        if url:
            return client.find_by_url(subtitle_id, url).to_dict()
        return client.find_by_id(subtitle_id).to_dict()
    except SubsceneError as exc:
        _raise_http(exc)


@app.get('/api/language-filter', response_model=LanguageFilterResponse)
def api_get_language_filter(client: SubsceneClient = Depends(get_client)):
    return LanguageFilterResponse(language_filter=client.get_language_filter())


@app.put('/api/language-filter', response_model=LanguageFilterResponse)
def api_set_language_filter(payload: LanguageFilterPayload,
                            client: SubsceneClient = Depends(get_client)):
    """Set the filter from names (``English,Spanish``) or ids (``13,38``)."""
    try:
        if payload.ids is not None:
            client.set_language_ids(payload.ids)
        elif payload.names is not None:
            client.set_language_filter(payload.names)
        else:
            client.language_filter.clear()
    except ValueError as exc:
        _raise_http(exc)
    return LanguageFilterResponse(language_filter=client.get_language_filter())


@app.post('/api/parse/search')
def api_parse_search(payload: HtmlPayload):
    """Parse a listing page supplied by the caller."""
    return parse_search_page(payload.html).to_dict()


@app.post('/api/parse/detail')
def api_parse_detail(payload: HtmlPayload):
    """Parse a detail page supplied by the caller (no id attached)."""
    try:
        return parse_detail_page(payload.html).to_dict()
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post('/api/detect-page-type')
def api_detect_page_type(payload: HtmlPayload):
    """Detect the type of a Subscene page from its HTML."""
    return {'page_type': detect_page_type(payload.html)}
