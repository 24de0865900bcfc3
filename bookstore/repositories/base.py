"""
Base Repository

Shared data access operations for every catalog entity.

Repositories wrap a Session and never commit: they add, flush and delete,
and the calling service decides when the unit of work is committed. That
keeps multi-step writes (e.g. deleting an author together with its books)
inside a single transaction.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookstore.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Generic repository for a model with an integer ``id`` primary key.

    Subclasses only set ``model``:

        class AuthorRepository(BaseRepository[Author]):
            model = Author
    """

    model: type[ModelT]

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, entity_id: int) -> ModelT | None:
        """Return the entity with this id, or None."""
        return self.db.get(self.model, entity_id)

    def exists(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.db.execute(stmt).first() is not None

    def list_all(self) -> list[ModelT]:
        """Return every entity, oldest id first."""
        stmt = select(self.model).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self.db.execute(stmt).scalar() or 0

    def add(self, entity: ModelT) -> ModelT:
        """
        Stage a new entity and flush it so the database assigns its id.

        Args:
            entity: Transient model instance

        Returns:
            The same instance, now with ``id`` populated
        """
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()


class NamedRepository(BaseRepository[ModelT]):
    """Repository for models with a ``name`` column used as a lookup key."""

    def find_by_name(self, name: str) -> ModelT | None:
        """
        Find an entity by exact name.

        Names are not unique. When several rows share a name, the one with
        the lowest id wins so lookups are deterministic.
        """
        stmt = (
            select(self.model)
            .where(self.model.name == name)
            .order_by(self.model.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()
