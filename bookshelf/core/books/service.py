"""Catalog service - validation in front of the book store."""

import threading
from abc import ABC, abstractmethod
from typing import Optional

import structlog

from bookshelf.api.schemas.books import Book
from bookshelf.core.books.errors import InvalidInputError
from bookshelf.core.books.store import BookRepository, InMemoryBookStore

logger = structlog.get_logger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class BookService(ABC):
    """Catalog operations exposed to the HTTP layer."""

    @abstractmethod
    def get_all_books(self) -> list[Book]:
        pass

    @abstractmethod
    def get_book_by_id(self, book_id: str) -> Book:
        pass

    @abstractmethod
    def create_book(self, book: Optional[Book]) -> Book:
        pass

    @abstractmethod
    def update_book(self, book_id: str, book: Optional[Book]) -> Book:
        pass

    @abstractmethod
    def delete_book(self, book_id: str) -> None:
        pass

    @abstractmethod
    def search_books_by_author(self, author: str) -> list[Book]:
        pass

    @abstractmethod
    def search_books_by_title(self, title: str) -> list[Book]:
        pass

    @abstractmethod
    def count_books(self) -> int:
        pass


class CatalogService(BookService):
    """
    Default catalog service.

    Rejects blank identifiers, blank queries and books without a title or
    author before the repository is called. Repository errors propagate
    unchanged.
    """

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def get_all_books(self) -> list[Book]:
        return self._repository.get_all()

    def get_book_by_id(self, book_id: str) -> Book:
        self._require_id(book_id)
        return self._repository.get_by_id(book_id)

    def create_book(self, book: Optional[Book]) -> Book:
        self._validate(book)
        created = self._repository.create(book)
        logger.info("Book created", book_id=created.id, title=created.title)
        return created

    def update_book(self, book_id: str, book: Optional[Book]) -> Book:
        self._require_id(book_id)
        self._validate(book)
        updated = self._repository.update(book_id, book)
        logger.info("Book updated", book_id=book_id)
        return updated

    def delete_book(self, book_id: str) -> None:
        self._require_id(book_id)
        self._repository.delete(book_id)
        logger.info("Book deleted", book_id=book_id)

    def search_books_by_author(self, author: str) -> list[Book]:
        if _is_blank(author):
            raise InvalidInputError("author query is required")
        return self._repository.search_by_author(author)

    def search_books_by_title(self, title: str) -> list[Book]:
        if _is_blank(title):
            raise InvalidInputError("title query is required")
        return self._repository.search_by_title(title)

    def count_books(self) -> int:
        return self._repository.count()

    @staticmethod
    def _require_id(book_id: str) -> None:
        if _is_blank(book_id):
            raise InvalidInputError("book id is required")

    @staticmethod
    def _validate(book: Optional[Book]) -> None:
        if book is None:
            raise InvalidInputError("book is required")
        if _is_blank(book.title):
            raise InvalidInputError("title is required")
        if _is_blank(book.author):
            raise InvalidInputError("author is required")


# Singleton instance
_service: CatalogService | None = None
_service_lock = threading.Lock()


def get_catalog_service() -> BookService:
    """Get or create the catalog service singleton."""
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = CatalogService(InMemoryBookStore())
    return _service
