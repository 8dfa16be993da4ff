"""
In-memory shelf of books.

A ``Shelf`` keeps its books in a plain list, in the order they were
added. Everything else it offers is a projection over that list:
``books()`` hands out a read-only snapshot, ``arrange()`` returns a
freshly sorted copy and ``group_by()`` buckets the books by a derived
key. None of these touch the stored order.

The shelf is not thread-safe; it is meant to be owned and mutated by
a single caller at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, TypeVar, overload

from .schemas import Book

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class UnsupportedOperationError(TypeError):
    """Raised when a caller tries to mutate a read-only ``BookView``."""


class BookView(Sequence):
    """Read-only sequence of books.

    Supports indexing, slicing, ``len()``, iteration and ``in`` like a
    list, and compares equal to any other non-string sequence with the
    same books in the same order. Every list-style mutator raises
    ``UnsupportedOperationError``.
    """

    __slots__ = ("_books",)

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books = tuple(books)

    @overload
    def __getitem__(self, index: int) -> Book: ...

    @overload
    def __getitem__(self, index: slice) -> "BookView": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BookView(self._books[index])
        return self._books[index]

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BookView):
            return self._books == other._books
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._books == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BookView({list(self._books)!r})"

    def _unsupported(self, *args: Any, **kwargs: Any):
        raise UnsupportedOperationError("BookView is read-only; add books through the Shelf")

    __setitem__ = _unsupported
    __delitem__ = _unsupported
    __iadd__ = _unsupported
    __imul__ = _unsupported
    append = _unsupported
    extend = _unsupported
    insert = _unsupported
    remove = _unsupported
    pop = _unsupported
    clear = _unsupported
    sort = _unsupported
    reverse = _unsupported


class Shelf:
    """An ordered, growable collection of ``Book`` values."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def add(self, *books: Book) -> None:
        """Append ``books`` to the end of the shelf, in the given order.

        Calling it without arguments leaves the shelf unchanged.
        Duplicates are kept: a shelf is a sequence, not a set.
        """
        if not books:
            return
        self._books.extend(books)
        logger.debug("Added %d book(s); shelf now holds %d", len(books), len(self._books))

    def books(self) -> BookView:
        """Return a read-only snapshot of the books in insertion order."""
        return BookView(self._books)

    def arrange(
        self,
        key: Optional[Callable[[Book], Any]] = None,
        *,
        reverse: bool = False,
        comparator: Optional[Callable[[Book, Book], int]] = None,
    ) -> List[Book]:
        """Return a new list of the books sorted by a criterion.

        Parameters
        ----------
        key : Optional[Callable[[Book], Any]]
            Sort key extracted from each book. When neither ``key`` nor
            ``comparator`` is given the natural order (title ascending)
            is used.
        reverse : bool
            Sort in descending order of the criterion.
        comparator : Optional[Callable[[Book, Book], int]]
            Three-way comparison function, as an alternative to ``key``.

        Returns
        -------
        List[Book]
            A new list; the shelf itself keeps its insertion order.
            The sort is stable, so books that compare equal under the
            criterion stay in insertion order (also when ``reverse`` is
            set).
        """
        if key is not None and comparator is not None:
            raise ValueError("arrange() takes either key or comparator, not both")
        if comparator is not None:
            key = cmp_to_key(comparator)
        return sorted(self._books, key=key, reverse=reverse)

    def group_by(self, key: Callable[[Book], K]) -> Dict[K, List[Book]]:
        """Partition the books by ``key(book)``.

        Keys appear in order of first occurrence and each bucket keeps
        the books in insertion order. Only keys that occur on the shelf
        are present, so no bucket is ever empty.
        """
        groups: Dict[K, List[Book]] = {}
        for book in self._books:
            groups.setdefault(key(book), []).append(book)
        return groups

    def group_by_publication_year(self) -> Dict[int, List[Book]]:
        """Partition the books by the calendar year of ``published_on``."""
        return self.group_by(lambda book: book.publication_year)
