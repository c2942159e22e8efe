from .books import BooksRepository

__all__ = ["BooksRepository"]
