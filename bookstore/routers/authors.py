"""
Authors Router

Create, list, get and delete authors, plus the books-by-author lookup.
Domain errors raised by the service are turned into HTTP responses by the
exception handlers in bookstore.main.
"""

from typing import List

from fastapi import APIRouter, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import DbSession
from bookstore.schemas import AuthorCreate, AuthorResponse, BookResponse
from bookstore.services import authors as author_service
from bookstore.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get a list of all authors in the catalog.",
)
@limiter.limit(settings.rate_limit_default)
def list_authors(request: Request, db: DbSession) -> List[AuthorResponse]:
    """List all authors."""
    authors = author_service.list_authors(db)
    return [AuthorResponse.model_validate(a) for a in authors]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_author(request: Request, author_id: int, db: DbSession) -> AuthorResponse:
    """Get a single author by ID."""
    author = author_service.get_author(db, author_id)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="Get all books written by a specific author.",
)
@limiter.limit(settings.rate_limit_default)
def get_author_books(request: Request, author_id: int, db: DbSession) -> List[BookResponse]:
    books = author_service.list_author_books(db, author_id)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={400: {"description": "Name or email is blank"}},
)
@limiter.limit(settings.rate_limit_write)
def create_author(
    request: Request,
    author_data: AuthorCreate,
    db: DbSession,
) -> AuthorResponse:
    """Create a new author."""
    author = author_service.create_author(db, author_data)
    return AuthorResponse.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Permanently delete an author and all of the author's books.",
)
@limiter.limit(settings.rate_limit_write)
def delete_author(request: Request, author_id: int, db: DbSession) -> None:
    """Delete an author."""
    author_service.delete_author(db, author_id)
