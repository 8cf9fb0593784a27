"""
Author list page.

``get_author_list()`` reads every author from the collection, sorted by
family name, and renders each one as ``"Family, First : 1775 - 1817"``.
``show_all_authors()`` writes that list to a response, or the message
``"No authors found"`` when there is nothing to show. Neither function
raises: lookup failures are logged and degrade to the empty/fallback
result.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from fastapi.responses import HTMLResponse, JSONResponse, Response

from .store import AUTHOR_SORT


logger = logging.getLogger(__name__)

NO_AUTHORS_FOUND = "No authors found"

Body = Union[List[str], str]


def format_author(author: Mapping[str, Any]) -> str:
    """Render one author document as a single display line.

    When ``first_name`` is missing or empty the whole "family, first"
    part is left out, so only the lifespan remains
    (``" : 1775 - 1817"``). Existing pages and clients rely on that
    output.
    """
    first_name = author.get("first_name")
    name = f"{author['family_name']}, {first_name}" if first_name else ""
    birth_year = author["date_of_birth"].year
    death_year = author["date_of_death"].year
    return f"{name} : {birth_year} - {death_year}"


async def get_author_list(authors) -> List[str]:
    """Return every author as a formatted string, ordered by family name.

    Parameters
    ----------
    authors
        The author collection: anything whose ``find()`` returns a
        cursor supporting ``sort()`` and an awaitable ``to_list()``
        (a PyMongo async collection or ``InMemoryAuthorCollection``).

    Returns
    -------
    List[str]
        One formatted line per author. An empty list is returned when
        the collection is empty or when reading it fails.
    """
    try:
        documents = await authors.find({}).sort(AUTHOR_SORT).to_list()
        return [format_author(doc) for doc in documents]
    except Exception as exc:
        logger.error("Error fetching author list: %s", exc)
        return []


class ResponseSink:
    """Collects the body a page handler sends.

    ``send()`` accepts either a list of strings or a plain string, like
    an Express-style response object. ``to_response()`` turns
    the collected body into a FastAPI response: lists are sent as JSON
    arrays, strings as HTML.
    """

    def __init__(self) -> None:
        self.body: Optional[Body] = None

    def send(self, body: Body) -> None:
        self.body = body

    def to_response(self) -> Response:
        if isinstance(self.body, str):
            return HTMLResponse(self.body)
        return JSONResponse(self.body)


async def show_all_authors(response, authors) -> None:
    """Send the author list to ``response``, or ``NO_AUTHORS_FOUND``.

    ``response.send()`` is called exactly once.
    """
    try:
        author_list = await get_author_list(authors)
    except Exception as exc:
        logger.error("Author lookup failed: %s", exc)
        author_list = []

    if author_list:
        response.send(author_list)
    else:
        response.send(NO_AUTHORS_FOUND)
