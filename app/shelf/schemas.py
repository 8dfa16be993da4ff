"""
Pydantic schema definitions for the shelf module.

The ``Book`` model is the single value type held by a shelf. It is
frozen, so a book never changes once constructed, and it carries a
natural ordering by title so that a plain ``sorted()`` call arranges
books lexicographically. Equality stays structural (all three fields),
which is what pydantic gives us out of the box.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single book record.

    Only the attributes needed to order and group a shelf are kept:
    ``title``, ``author`` and ``published_on``. Comparison operators
    look at ``title`` alone (case-sensitive), so two books with the
    same title but different authors sort as equal while still being
    unequal under ``==``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    published_on: date

    @property
    def publication_year(self) -> int:
        return self.published_on.year

    @staticmethod
    def compare(a: "Book", b: "Book") -> int:
        """Three-way comparison of two books by title.

        Returns a negative number, zero or a positive number, so the
        result can be handed to ``functools.cmp_to_key`` or to
        ``Shelf.arrange(comparator=...)``.
        """
        return (a.title > b.title) - (a.title < b.title)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title < other.title

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title <= other.title

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title > other.title

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.title >= other.title
