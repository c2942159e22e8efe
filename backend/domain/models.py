"""
Core domain models for the bookshelf service.
These are framework-agnostic and can be used across all layers.
"""
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Book:
    """
    A book record keyed by its ISBN.

    The ISBN is an opaque key; it is never checked against an ISBN checksum scheme.
    """
    title: str
    author: str
    isbn: str

    def missing_fields(self) -> List[str]:
        """Names of required fields that are empty strings (whitespace counts as a value)."""
        return [name for name in ("title", "author", "isbn") if len(getattr(self, name)) < 1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            title=data.get("title", ""),
            author=data.get("author", ""),
            isbn=data.get("isbn", ""),
        )


# Records every fresh process starts with
SEED_BOOKS: List[Book] = [
    Book(title="Cloud Native Go", author="M. L. Reimer", isbn="0123456789"),
    Book(title="Hello World", author="E. Pavlova", isbn="0987654321"),
]
