from fastapi import Request

from repositories import BooksRepository


def books_repo(request: Request) -> BooksRepository:
    """The store owned by the running application."""
    return request.app.state.books_repo
