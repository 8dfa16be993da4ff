"""
Shelf package: an in-memory, insertion-ordered collection of books.

``Shelf`` (in ``store``) holds ``Book`` values (in ``schemas``) and
offers read-only access, stable arrangement by any criterion and
grouping by a derived key. The ``router`` module exposes the same
operations over HTTP for a front-end that wants to browse a shelf.
"""

from .schemas import Book  # noqa: F401
from .store import BookView, Shelf, UnsupportedOperationError  # noqa: F401
from .router import router as shelf_router  # noqa: F401
