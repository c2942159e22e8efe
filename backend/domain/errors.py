"""
Domain errors raised by the book store.

The message of each error is the plain-text body the API answers with.
"""


class BookStoreError(Exception):
    """Base class for book store failures."""

    message = "There was an error with the item"

    def __init__(self, isbn: str = ""):
        super().__init__(self.message)
        self.isbn = isbn


class AlreadyExistsError(BookStoreError):
    message = "Item already exists"


class MissingFieldError(BookStoreError):
    message = "Item is missing a required field"

    def __init__(self, isbn: str = "", fields=None):
        super().__init__(isbn)
        self.fields = list(fields or [])


class DoesNotExistError(BookStoreError):
    message = "Item does not exist"
