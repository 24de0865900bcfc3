"""
Tags Router

CRUD endpoints for tags.
"""

from typing import List

from fastapi import APIRouter, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import DbSession
from bookstore.schemas import BookResponse, TagCreate, TagResponse
from bookstore.services import tags as tag_service
from bookstore.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/tags",
    tags=["Tags"],
    responses={
        404: {"description": "Tag not found"},
    },
)


@router.get("/", response_model=List[TagResponse], summary="List all tags")
@limiter.limit(settings.rate_limit_default)
def list_tags(request: Request, db: DbSession) -> List[TagResponse]:
    return [TagResponse.model_validate(t) for t in tag_service.list_tags(db)]


@router.get("/{tag_id}", response_model=TagResponse, summary="Get a tag by ID")
@limiter.limit(settings.rate_limit_default)
def get_tag(request: Request, tag_id: int, db: DbSession) -> TagResponse:
    return TagResponse.model_validate(tag_service.get_tag(db, tag_id))


@router.get(
    "/{tag_id}/books",
    response_model=List[BookResponse],
    summary="Get books with a tag",
)
@limiter.limit(settings.rate_limit_default)
def get_tag_books(request: Request, tag_id: int, db: DbSession) -> List[BookResponse]:
    books = tag_service.list_tag_books(db, tag_id)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "/",
    response_model=TagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new tag",
    responses={400: {"description": "Name is blank"}},
)
@limiter.limit(settings.rate_limit_write)
def create_tag(request: Request, tag_data: TagCreate, db: DbSession) -> TagResponse:
    return TagResponse.model_validate(tag_service.create_tag(db, tag_data))


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a tag",
    description="Delete a tag. Books that carried it are kept.",
)
@limiter.limit(settings.rate_limit_write)
def delete_tag(request: Request, tag_id: int, db: DbSession) -> None:
    tag_service.delete_tag(db, tag_id)
