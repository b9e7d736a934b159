"""Book catalog module."""

from bookshelf.core.books.errors import BookError, BookNotFoundError, InvalidInputError
from bookshelf.core.books.service import BookService, CatalogService, get_catalog_service
from bookshelf.core.books.store import BookRepository, InMemoryBookStore

__all__ = [
    "BookError",
    "BookNotFoundError",
    "InvalidInputError",
    "BookRepository",
    "InMemoryBookStore",
    "BookService",
    "CatalogService",
    "get_catalog_service",
]
