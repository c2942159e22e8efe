"""
JSON codec for Book records.

Decoding is lenient about shape (unknown keys are ignored, missing or null keys
become empty strings and are rejected later by store validation, key names match
case-insensitively) but strict about syntax and value types.
"""
import json
from typing import Any, Dict, Iterable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from domain.models import Book


class BookDecodeError(ValueError):
    """Raised when a request body cannot be decoded into a Book."""


class BookPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    title: str = ""
    author: str = ""
    isbn: str = ""

    @field_validator("title", "author", "isbn", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def _fold_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map keys onto the payload fields ignoring case; later keys win."""
    folded: Dict[str, Any] = {}
    for key, value in data.items():
        name = key.lower()
        if name in BookPayload.model_fields:
            folded[name] = value
    return folded


def encode_book(book: Book) -> bytes:
    """Encode a single book as a compact JSON object."""
    return json.dumps(book.to_dict(), separators=(",", ":")).encode("utf-8")


def encode_books(books: Iterable[Book]) -> bytes:
    """Encode books as a JSON array, preserving the given order."""
    return json.dumps([b.to_dict() for b in books], separators=(",", ":")).encode("utf-8")


def decode_book(data: bytes) -> Book:
    try:
        raw = json.loads(data)
    except ValueError as exc:
        raise BookDecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise BookDecodeError(f"expected a JSON object, got {type(raw).__name__}")
    try:
        payload = BookPayload.model_validate(_fold_keys(raw))
    except ValidationError as exc:
        raise BookDecodeError(str(exc)) from exc
    return Book.from_dict(payload.model_dump())
