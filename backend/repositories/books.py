"""
Book repository backed by an in-process dictionary.
"""
import logging
import threading
from typing import Dict, Iterable, List, Optional

from domain.errors import AlreadyExistsError, DoesNotExistError, MissingFieldError
from domain.models import Book

logger = logging.getLogger(__name__)


def _validate(book: Book) -> None:
    missing = book.missing_fields()
    if missing:
        raise MissingFieldError(book.isbn, missing)


class BooksRepository:
    """
    CRUD operations for books, keyed by ISBN.

    Every operation holds the lock for its whole critical section, so concurrent
    request handlers never observe a half-applied mutation.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._lock = threading.Lock()
        self._books: Dict[str, Book] = {}
        for book in books or []:
            self._books[book.isbn] = book

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list_books(self) -> List[Book]:
        """All books, ascending by title."""
        with self._lock:
            books = list(self._books.values())
        return sorted(books, key=lambda b: b.title)

    def get_book(self, isbn: str) -> Optional[Book]:
        with self._lock:
            return self._books.get(isbn)

    def create_book(self, book: Book) -> Book:
        _validate(book)
        with self._lock:
            if book.isbn in self._books:
                raise AlreadyExistsError(book.isbn)
            self._books[book.isbn] = book
        logger.info("Created book %s", book.isbn)
        return book

    def update_book(self, isbn: str, book: Book) -> Book:
        """
        Replace the book stored at ``isbn`` with ``book``.

        The record is re-keyed under ``book.isbn``; a different record already
        stored under that key is overwritten.
        """
        _validate(book)
        with self._lock:
            if isbn not in self._books:
                raise DoesNotExistError(isbn)
            del self._books[isbn]
            self._books[book.isbn] = book
        if book.isbn != isbn:
            logger.debug("Re-keyed book %s as %s", isbn, book.isbn)
        logger.info("Updated book %s", book.isbn)
        return book

    def delete_book(self, isbn: str) -> Book:
        with self._lock:
            book = self._books.pop(isbn, None)
        if book is None:
            raise DoesNotExistError(isbn)
        logger.info("Deleted book %s", isbn)
        return book
