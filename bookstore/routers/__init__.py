"""
API Routers Package

Router Structure:
- books.py: /api/v1/books/* endpoints
- authors.py: /api/v1/authors/* endpoints
- publishers.py: /api/v1/publishers/* endpoints
- tags.py: /api/v1/tags/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore.routers.authors import router as authors_router
from bookstore.routers.books import router as books_router
from bookstore.routers.publishers import router as publishers_router
from bookstore.routers.tags import router as tags_router

__all__ = [
    "books_router",
    "authors_router",
    "publishers_router",
    "tags_router",
]
