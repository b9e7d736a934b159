"""API schemas."""

from bookshelf.api.schemas.books import Book, ErrorResponse, MessageResponse

__all__ = ["Book", "ErrorResponse", "MessageResponse"]
