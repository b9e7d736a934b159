"""Domain errors raised by the book store and catalog service."""


class BookError(Exception):
    """Base class for catalog errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(BookError):
    """A required field or identifier is missing or blank."""


class BookNotFoundError(BookError):
    """No book is stored under the requested identifier."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__(f"book not found: {book_id}")
