"""
Books API routes.

Bodies are written by hand rather than through response models: the content
type literal and the plain-text error bodies are part of the wire contract.
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from starlette.requests import ClientDisconnect

from api.dependencies import books_repo
from domain.codec import BookDecodeError, decode_book, encode_book, encode_books
from domain.errors import AlreadyExistsError, DoesNotExistError, MissingFieldError
from domain.models import Book
from repositories import BooksRepository

router = APIRouter()
logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset-utf-8"

UNSUPPORTED_METHOD = "Unsupported request method."
NOT_FOUND = "Item was not found."
MALFORMED_BODY = "Malformed request body."
CREATE_FAILED = "There was an error creating the item"
MODIFY_FAILED = "There was an error modifying the item"
DELETE_FAILED = "There was an error deleting the item"

def _text(status_code: int, message: str = "") -> Response:
    """Plain-text body without an explicit content type."""
    return Response(content=message, status_code=status_code)

def _json(body: bytes) -> Response:
    return Response(content=body, status_code=200, headers={"Content-Type": JSON_CONTENT_TYPE})

def _book_response(book: Book) -> Response:
    try:
        body = encode_book(book)
    except (TypeError, ValueError):
        logger.exception("Failed to encode book %s", book.isbn)
        return _text(500)
    return _json(body)

async def _read_book(request: Request) -> Book:
    body = await request.body()
    return decode_book(body)

@router.options("")
async def preflight_books():
    """CORS preflight."""
    return _text(200)

@router.get("")
async def list_books(repo: BooksRepository = Depends(books_repo)):
    """List all books ordered by title."""
    try:
        body = encode_books(repo.list_books())
    except (TypeError, ValueError):
        logger.exception("Failed to encode book list")
        return _text(500)
    return _json(body)

@router.post("")
async def create_book(request: Request, repo: BooksRepository = Depends(books_repo)):
    """Create a new book."""
    try:
        book = await _read_book(request)
    except ClientDisconnect:
        return _text(500)
    except BookDecodeError as e:
        logger.warning("Rejected malformed book body: %s", e)
        return _text(400, MALFORMED_BODY)

    try:
        created = repo.create_book(book)
    except (AlreadyExistsError, MissingFieldError) as e:
        logger.warning("Create of %r rejected: %s", book.isbn, e)
        return _text(409, e.message)
    except Exception:
        logger.exception("Create of %r failed", book.isbn)
        return _text(409, CREATE_FAILED)
    return _book_response(created)

@router.get("/{isbn:path}")
async def get_book(isbn: str, repo: BooksRepository = Depends(books_repo)):
    """Get a book by ISBN."""
    book = repo.get_book(isbn)
    if book is None:
        return _text(404, NOT_FOUND)
    return _book_response(book)

@router.put("/{isbn:path}")
async def update_book(isbn: str, request: Request, repo: BooksRepository = Depends(books_repo)):
    """Replace the book at ``isbn``; the body's ISBN becomes the new key."""
    try:
        book = await _read_book(request)
    except ClientDisconnect:
        return _text(500)
    except BookDecodeError as e:
        logger.warning("Rejected malformed book body for %r: %s", isbn, e)
        return _text(400, MALFORMED_BODY)

    try:
        updated = repo.update_book(isbn, book)
    except (DoesNotExistError, MissingFieldError) as e:
        logger.warning("Update of %r rejected: %s", isbn, e)
        return _text(409, e.message)
    except Exception:
        logger.exception("Update of %r failed", isbn)
        return _text(409, MODIFY_FAILED)
    return _book_response(updated)

@router.delete("/{isbn:path}")
async def delete_book(isbn: str, repo: BooksRepository = Depends(books_repo)):
    """Delete a book and answer with the removed record."""
    try:
        deleted = repo.delete_book(isbn)
    except DoesNotExistError as e:
        logger.warning("Delete of %r rejected: %s", isbn, e)
        return _text(409, e.message)
    except Exception:
        logger.exception("Delete of %r failed", isbn)
        return _text(409, DELETE_FAILED)
    return _book_response(deleted)

async def unsupported_method(request: Request) -> Response:
    """Answer for any method the typed routes above do not handle."""
    logger.warning("Unsupported method %s on %s", request.method, request.url.path)
    return _text(400, UNSUPPORTED_METHOD)
