"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
or: python -m scripts.serve
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from api.cors import BooksCORSMiddleware, COLLECTION_PATH, ITEM_PREFIX
from api.database import create_books_repo
from api.routes import books, echo
from repositories import BooksRepository

ECHO_PATH = "/api/echo"
WELCOME_TEXT = "Welcome To Cloud Native Go!"


async def welcome(request: Request) -> PlainTextResponse:
    """Welcome page, served for every path no other route claims."""
    return PlainTextResponse(WELCOME_TEXT)


def create_app(books_repo: Optional[BooksRepository] = None) -> FastAPI:
    """Build the application around ``books_repo`` (a freshly seeded store by default)."""
    app = FastAPI(
        title="Bookshelf API",
        description="In-memory CRUD collection of books keyed by ISBN",
        version="0.1.0",
    )
    app.state.books_repo = books_repo if books_repo is not None else create_books_repo()

    app.add_middleware(BooksCORSMiddleware)

    app.include_router(books.router, prefix=COLLECTION_PATH, tags=["books"])

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Routes without a method list match any method; order matters, typed routes first
    app.add_route(COLLECTION_PATH, books.unsupported_method, include_in_schema=False)
    app.add_route(ITEM_PREFIX + "{isbn:path}", books.unsupported_method, include_in_schema=False)
    app.add_route(ECHO_PATH, echo.echo)
    app.add_route("/{path:path}", welcome, include_in_schema=False)

    return app


app = create_app()
