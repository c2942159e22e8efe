"""
In-memory database for the bookshelf service.

Records live only for the lifetime of the process.
"""
from domain.models import SEED_BOOKS
from repositories import BooksRepository


def create_books_repo() -> BooksRepository:
    """Return a fresh store holding the seed records."""
    return BooksRepository(SEED_BOOKS)
