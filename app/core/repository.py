"""Base repository pattern implementation.

This module provides a generic repository that the domain services build on.
Every write commits immediately: operations are single-statement and there is
no unit of work spanning several entities.
"""

from typing import Any, Generic, TypeVar, cast
from uuid import UUID

from sqlalchemy.orm import Query, Session

from app.core.exceptions import NotFoundError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic repository with common CRUD operations.

    Example:
        ```python
        class ClientRepository(BaseRepository[Client]):
            def __init__(self, db: Session):
                super().__init__(db, Client)
        ```
    """

    not_found_message = "Recurso no encontrado"

    def __init__(self, db: Session, model: type[ModelType]):
        self.db = db
        self.model = model

    def query(self) -> Query:
        return self.db.query(self.model)

    def get_by_id(self, entity_id: UUID) -> ModelType | None:
        result = self.query().filter(self.model.id == entity_id).first()  # type: ignore[attr-defined]
        return cast(ModelType | None, result)

    def get_or_404(self, entity_id: UUID) -> ModelType:
        """Get a single entity by ID or raise NotFoundError."""
        instance = self.get_by_id(entity_id)
        if instance is None:
            raise NotFoundError(self.not_found_message, resource=self.model.__name__)
        return instance

    def exists(self, entity_id: UUID) -> bool:
        return self.get_by_id(entity_id) is not None

    def create(self, **kwargs: Any) -> ModelType:
        instance = self.model(**kwargs)
        self.db.add(instance)
        self.db.commit()
        self.db.refresh(instance)
        return instance

    def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """Apply the given attributes; last write wins, there is no version check."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        self.db.commit()
        self.db.refresh(instance)
        return instance

    def delete(self, instance: ModelType) -> None:
        self.db.delete(instance)
        self.db.commit()
