"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookshelf.core.books.service import BookService, get_catalog_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    service: Annotated[BookService, Depends(get_catalog_service)],
) -> dict:
    """Readiness check - verifies the catalog is reachable."""
    return {
        "status": "ready",
        "books": service.count_books(),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
