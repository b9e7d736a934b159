"""Book catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from bookshelf.api.schemas.books import Book, ErrorResponse, MessageResponse
from bookshelf.config import Settings, get_settings
from bookshelf.core.books.service import BookService, get_catalog_service

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}


@router.get("", response_model=list[Book])
async def list_books(
    response: Response,
    service: Annotated[BookService, Depends(get_catalog_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> list[Book]:
    """
    List all books.

    A non-empty list is answered with 201 while ``list_created_status`` is
    enabled; an empty list is always 200.
    """
    books = service.get_all_books()
    if books and settings.list_created_status:
        response.status_code = 201
    return books


@router.post("", response_model=Book, status_code=201)
async def create_book(
    book: Book,
    service: Annotated[BookService, Depends(get_catalog_service)],
) -> Book:
    """Create a book. Any ``id`` in the body is replaced by the assigned one."""
    return service.create_book(book)


@router.get("/search", response_model=list[Book])
async def search_books(
    service: Annotated[BookService, Depends(get_catalog_service)],
    author: str | None = Query(default=None, description="Author substring"),
    title: str | None = Query(default=None, description="Title substring"),
):
    """
    Search by author or title (case-insensitive substring).

    When both are given, ``author`` wins.
    """
    if author:
        return service.search_books_by_author(author)
    if title:
        return service.search_books_by_title(title)
    return JSONResponse(status_code=400, content={"error": "no search query"})


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def get_book(
    book_id: str,
    service: Annotated[BookService, Depends(get_catalog_service)],
) -> Book:
    """Get a single book."""
    return service.get_book_by_id(book_id)


@router.put("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def update_book(
    book_id: str,
    book: Book,
    service: Annotated[BookService, Depends(get_catalog_service)],
) -> Book:
    """Replace a book. The identifier always comes from the path."""
    service.update_book(book_id, book)
    return service.get_book_by_id(book_id)


@router.delete("/{book_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_book(
    book_id: str,
    service: Annotated[BookService, Depends(get_catalog_service)],
) -> MessageResponse:
    """Delete a book."""
    service.delete_book(book_id)
    return MessageResponse(message="Book deleted successfully")
