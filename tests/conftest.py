"""Shared fixtures: the four reference books and a fresh shelf."""

from datetime import date

import pytest

from app.shelf import Book, Shelf


@pytest.fixture
def shelf() -> Shelf:
    return Shelf()


@pytest.fixture
def effective_java() -> Book:
    return Book(title="Effective Java", author="Joshua Bloch", published_on=date(2008, 5, 8))


@pytest.fixture
def code_complete() -> Book:
    return Book(title="Code Complete", author="Steve McConnel", published_on=date(2004, 6, 9))


@pytest.fixture
def mythical_man_month() -> Book:
    return Book(
        title="The Mythical Man-Month",
        author="Frederick Phillips Brooks",
        published_on=date(1975, 1, 1),
    )


@pytest.fixture
def clean_code() -> Book:
    return Book(title="Clean Code", author="Robert C. Martin", published_on=date(2008, 8, 1))
