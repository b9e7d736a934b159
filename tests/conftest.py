"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.schemas.books import Book
from bookshelf.core.books.service import CatalogService, get_catalog_service
from bookshelf.core.books.store import InMemoryBookStore
from bookshelf.main import app


@pytest.fixture
def store():
    """Empty in-memory book store."""
    return InMemoryBookStore()


@pytest.fixture
def catalog(store):
    """Catalog service backed by the test store."""
    return CatalogService(store)


@pytest.fixture
def client(catalog):
    """Create a test client whose requests use the test catalog."""
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_book():
    """A valid book without an identifier."""
    return Book(
        title="The Go Programming Language",
        author="Alan Donovan",
        published_year=2015,
        isbn="978-0134190440",
        description="Introduction to Go",
    )
