"""
Route definitions for the catalogue pages.

Endpoints under /catalog:
- GET  /authors  : list of all authors, sorted by family name
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from .authors import ResponseSink, show_all_authors
from .store import get_author_collection


router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/authors")
async def list_authors(authors=Depends(get_author_collection)) -> Response:
    """
    Returns the author list as a JSON array of display strings, or the
    plain message "No authors found" when there is nothing to list (or
    the collection could not be read).
    """
    sink = ResponseSink()
    await show_all_authors(sink, authors)
    return sink.to_response()
