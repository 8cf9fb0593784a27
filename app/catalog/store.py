"""
Author collections for the catalogue.

The author list page only needs one capability from the persistence
layer: ``find()`` returning a cursor that can be ``sort()``-ed and then
awaited with ``to_list()``. PyMongo's asynchronous collections provide
exactly that. ``InMemoryAuthorCollection`` provides the same shape over
a plain list of documents so that the application can run (and be
tested) without a MongoDB server; it is populated from the bundled
``sample_authors.json`` dataset.

``get_author_collection()`` is the FastAPI dependency that picks one of
the two depending on whether ``MONGODB_URI`` is configured.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pymongo import ASCENDING, DESCENDING, AsyncMongoClient

from ..config import Config
from .schemas import Author


logger = logging.getLogger(__name__)

# Sort specification used by the author list page.
AUTHOR_SORT: List[Tuple[str, int]] = [("family_name", ASCENDING)]

SortSpec = Union[str, Sequence[Tuple[str, int]]]


class InMemoryCursor:
    """Cursor over copies of in-memory documents.

    Mirrors the subset of PyMongo's ``AsyncCursor`` used by the
    catalogue: ``sort()`` is chainable and ``to_list()`` is awaitable.
    """

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    def sort(self, key_or_list: SortSpec, direction: Optional[int] = None) -> "InMemoryCursor":
        if isinstance(key_or_list, str):
            keys = [(key_or_list, ASCENDING if direction is None else direction)]
        else:
            keys = list(key_or_list)
        # Stable sorts applied from the last key to the first give a
        # multi-key ordering.
        for field, order in reversed(keys):
            if order not in (ASCENDING, DESCENDING):
                raise ValueError(f"Unsupported sort direction for {field!r}: {order!r}")
            self._documents.sort(
                key=lambda doc: doc.get(field),
                reverse=(order == DESCENDING),
            )
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if length is None:
            return list(self._documents)
        return self._documents[:length]


class InMemoryAuthorCollection:
    """A read-only, list-backed stand-in for the ``authors`` collection."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None):
        self._documents = list(documents or [])

    def find(self, filter: Optional[Dict[str, Any]] = None) -> InMemoryCursor:
        """Return a cursor over every document matching ``filter``.

        Only equality filters are supported, which is all the catalogue
        ever issues (``{}`` for "everything").
        """
        criteria = filter or {}
        matched = [
            copy.deepcopy(doc)
            for doc in self._documents
            if all(doc.get(k) == v for k, v in criteria.items())
        ]
        return InMemoryCursor(matched)

    def __len__(self) -> int:
        return len(self._documents)


def load_sample_authors(path: Path) -> List[Author]:
    """Load the sample authors used when no database is configured.

    Parameters
    ----------
    path : Path
        Location of a JSON file holding a list of author objects.

    Returns
    -------
    List[Author]
        Validated authors. Entries that fail validation are skipped; a
        missing or malformed file yields an empty list.
    """
    authors: List[Author] = []
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read sample authors from %s: %s", path, exc)
        return authors
    if not isinstance(raw, list):
        logger.warning("Sample authors file %s does not hold a list", path)
        return authors
    for entry in raw:
        try:
            authors.append(Author(**entry))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping invalid sample author %r: %s", entry, exc)
    return authors


def sample_author_collection(path: Optional[Path] = None) -> InMemoryAuthorCollection:
    """Build an in-memory collection from the sample dataset."""
    authors = load_sample_authors(path or Config.sample_authors_file())
    return InMemoryAuthorCollection([a.model_dump() for a in authors])


_mongo_client: Optional[AsyncMongoClient] = None
_sample_collection: Optional[InMemoryAuthorCollection] = None


def _get_mongo_client(uri: str) -> AsyncMongoClient:
    global _mongo_client
    if _mongo_client is None:
        # The client connects lazily, on the first operation.
        _mongo_client = AsyncMongoClient(
            uri, serverSelectionTimeoutMS=Config.mongodb_timeout_ms()
        )
        logger.info("Created MongoDB client for database %s", Config.mongodb_db())
    return _mongo_client


async def get_author_collection():
    """FastAPI dependency returning the collection that holds authors.

    Returns the MongoDB collection when ``MONGODB_URI`` is set, and the
    in-memory sample collection otherwise. It runs on the event loop
    rather than in the threadpool, so the shared client and sample
    collection are only ever created once.
    """
    global _sample_collection
    uri = Config.mongodb_uri()
    if uri:
        client = _get_mongo_client(uri)
        return client[Config.mongodb_db()][Config.authors_collection()]
    if _sample_collection is None:
        _sample_collection = sample_author_collection()
        logger.info("Using %d sample authors (MONGODB_URI not set)", len(_sample_collection))
    return _sample_collection


async def close_mongo_client() -> None:
    """Close the shared MongoDB client, if one was created."""
    global _mongo_client
    if _mongo_client is not None:
        await _mongo_client.close()
        _mongo_client = None
