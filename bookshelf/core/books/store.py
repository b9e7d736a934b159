"""In-memory book storage."""

import threading
from abc import ABC, abstractmethod
from typing import Optional

import structlog

from bookshelf.api.schemas.books import Book
from bookshelf.core.books.errors import BookNotFoundError, InvalidInputError

logger = structlog.get_logger(__name__)


class BookRepository(ABC):
    """Storage operations for books. Performs no validation of book fields."""

    @abstractmethod
    def get_all(self) -> list[Book]:
        """Return every stored book, in no particular order."""
        pass

    @abstractmethod
    def get_by_id(self, book_id: str) -> Book:
        """
        Return the book stored under ``book_id``.

        Raises:
            BookNotFoundError: If no book has that identifier
        """
        pass

    @abstractmethod
    def create(self, book: Optional[Book]) -> Book:
        """
        Assign a fresh identifier to ``book`` and store it.

        Raises:
            InvalidInputError: If ``book`` is None
        """
        pass

    @abstractmethod
    def update(self, book_id: str, book: Book) -> Book:
        """
        Replace the stored book wholesale, pinning its identifier to ``book_id``.

        Raises:
            BookNotFoundError: If no book has that identifier
        """
        pass

    @abstractmethod
    def delete(self, book_id: str) -> None:
        """
        Remove a book.

        Raises:
            BookNotFoundError: If no book has that identifier
        """
        pass

    @abstractmethod
    def search_by_author(self, query: str) -> list[Book]:
        """Case-insensitive substring match on author. Blank query matches nothing."""
        pass

    @abstractmethod
    def search_by_title(self, query: str) -> list[Book]:
        """Case-insensitive substring match on title. Blank query matches nothing."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored books."""
        pass


class InMemoryBookStore(BookRepository):
    """
    Simple in-memory store for books.

    Books handed out by this store are the stored objects themselves, not
    copies: mutating a returned book changes what later reads see.

    Identifiers come from a counter that only moves forward, so an id freed
    by a delete is never handed out again. All access goes through one lock.
    """

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def get_all(self) -> list[Book]:
        with self._lock:
            return list(self._books.values())

    def get_by_id(self, book_id: str) -> Book:
        with self._lock:
            book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def create(self, book: Optional[Book]) -> Book:
        if book is None:
            raise InvalidInputError("book is required")
        with self._lock:
            self._last_id += 1
            book.id = str(self._last_id)
            self._books[book.id] = book
        logger.debug("Book stored", book_id=book.id)
        return book

    def update(self, book_id: str, book: Book) -> Book:
        with self._lock:
            if book_id not in self._books:
                raise BookNotFoundError(book_id)
            book.id = book_id
            self._books[book_id] = book
        logger.debug("Book replaced", book_id=book_id)
        return book

    def delete(self, book_id: str) -> None:
        with self._lock:
            if self._books.pop(book_id, None) is None:
                raise BookNotFoundError(book_id)
        logger.debug("Book removed", book_id=book_id)

    def search_by_author(self, query: str) -> list[Book]:
        return self._search(query, lambda b: b.author)

    def search_by_title(self, query: str) -> list[Book]:
        return self._search(query, lambda b: b.title)

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def _search(self, query: str, field) -> list[Book]:
        if not query or not query.strip():
            return []
        needle = query.lower()
        with self._lock:
            return [b for b in self._books.values() if needle in field(b).lower()]
