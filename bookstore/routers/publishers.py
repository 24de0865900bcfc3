"""
Publishers Router

CRUD endpoints for publishers.
Follows the same patterns as the authors router.
"""

from typing import List

from fastapi import APIRouter, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import DbSession
from bookstore.schemas import BookResponse, PublisherCreate, PublisherResponse
from bookstore.services import publishers as publisher_service
from bookstore.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/publishers",
    tags=["Publishers"],
    responses={
        404: {"description": "Publisher not found"},
    },
)


@router.get(
    "/",
    response_model=List[PublisherResponse],
    summary="List all publishers",
)
@limiter.limit(settings.rate_limit_default)
def list_publishers(request: Request, db: DbSession) -> List[PublisherResponse]:
    publishers = publisher_service.list_publishers(db)
    return [PublisherResponse.model_validate(p) for p in publishers]


@router.get(
    "/{publisher_id}",
    response_model=PublisherResponse,
    summary="Get a publisher by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_publisher(request: Request, publisher_id: int, db: DbSession) -> PublisherResponse:
    publisher = publisher_service.get_publisher(db, publisher_id)
    return PublisherResponse.model_validate(publisher)


@router.get(
    "/{publisher_id}/books",
    response_model=List[BookResponse],
    summary="Get books by publisher",
)
@limiter.limit(settings.rate_limit_default)
def get_publisher_books(request: Request, publisher_id: int, db: DbSession) -> List[BookResponse]:
    books = publisher_service.list_publisher_books(db, publisher_id)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "/",
    response_model=PublisherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new publisher",
    responses={400: {"description": "Name or address is blank"}},
)
@limiter.limit(settings.rate_limit_write)
def create_publisher(
    request: Request,
    publisher_data: PublisherCreate,
    db: DbSession,
) -> PublisherResponse:
    publisher = publisher_service.create_publisher(db, publisher_data)
    return PublisherResponse.model_validate(publisher)


@router.delete(
    "/{publisher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a publisher",
    description="Permanently delete a publisher and every book it published.",
)
@limiter.limit(settings.rate_limit_write)
def delete_publisher(request: Request, publisher_id: int, db: DbSession) -> None:
    publisher_service.delete_publisher(db, publisher_id)
