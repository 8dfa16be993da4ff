"""
Route definitions for the shelf API.

Endpoints under /api/shelf:
- GET  /books            : list books in insertion order
- POST /books            : add a list of books to the shelf
- GET  /books/arranged   : books sorted by a field (stable)
- GET  /books/grouped    : books grouped by publication year or author
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from fastapi import APIRouter, Body, Depends, Query
from typing_extensions import Literal  # Py3.8 compatibility

from .schemas import Book
from .store import Shelf

logger = logging.getLogger(__name__)

SortField = Literal["title", "author", "published_on", "year"]
SortOrder = Literal["asc", "desc"]
GroupField = Literal["year", "author"]

# Sort keys for the fields a client may arrange by. ``title`` is the
# books' natural order, so it maps to ``None``.
SORT_KEYS: Dict[str, Callable[[Book], object]] = {
    "author": lambda b: b.author,
    "published_on": lambda b: b.published_on,
    "year": lambda b: b.publication_year,
}

router = APIRouter(prefix="/api/shelf", tags=["shelf"])

# Process-wide shelf served by the API. Like any Shelf it expects a
# single writer; it is swapped out in tests via ``get_shelf``.
SHELF = Shelf()


def get_shelf() -> Shelf:
    return SHELF


@router.get("/books", response_model=List[Book])
def list_books(shelf: Shelf = Depends(get_shelf)) -> List[Book]:
    """Return every book on the shelf, in the order it was added."""
    return list(shelf.books())


@router.post("/books", response_model=List[Book])
def add_books(
    books: List[Book] = Body(..., description="Livres à ajouter, dans l'ordre"),
    shelf: Shelf = Depends(get_shelf),
) -> List[Book]:
    """Append ``books`` to the shelf and return its new contents.

    An empty list is accepted and leaves the shelf unchanged.
    """
    shelf.add(*books)
    logger.info("Shelf API added %d book(s)", len(books))
    return list(shelf.books())


@router.get("/books/arranged", response_model=List[Book])
def arrange_books(
    sort: SortField = Query(default="title", description="Tri"),
    order: SortOrder = Query(default="asc", description="Ordre (asc/desc)"),
    shelf: Shelf = Depends(get_shelf),
) -> List[Book]:
    """Return the books sorted by ``sort``.

    Books that tie on the chosen field keep their insertion order,
    in both directions. The shelf's own order is left untouched.
    """
    return shelf.arrange(SORT_KEYS.get(sort), reverse=(order == "desc"))


@router.get("/books/grouped", response_model=Dict[str, List[Book]])
def group_books(
    by: GroupField = Query(default="year", description="Regroupement"),
    shelf: Shelf = Depends(get_shelf),
) -> Dict[str, List[Book]]:
    """Return the books grouped by publication year or author.

    JSON object keys are always strings, so years come back as
    ``"2008"`` and so on. Each group keeps insertion order.
    """
    if by == "author":
        groups = shelf.group_by(lambda b: b.author)
    else:
        groups = shelf.group_by_publication_year()
    return {str(k): v for k, v in groups.items()}
