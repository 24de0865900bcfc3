"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Annotated type aliases keep route signatures short:

    def list_books(db: DbSession):

instead of:

    def list_books(db: Session = Depends(get_db)):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.database import get_db

DbSession = Annotated[Session, Depends(get_db)]
