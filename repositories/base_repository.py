"""
Base repository shared by the form, response and access-token repositories.
"""

from typing import TypeVar, Generic, Optional, Type, Any
from sqlmodel import Session, SQLModel

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Generic repository holding a session and the entity class it manages.

    Type Parameters:
        T: SQLModel entity type
    """

    def __init__(self, db_session: Session, model_class: Type[T]):
        self.db = db_session
        self.model_class = model_class

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by primary key.

        Returns:
            Entity if found, None otherwise
        """
        return self.db.get(self.model_class, id)

    def create(self, entity: T) -> T:
        """
        Insert a new entity and commit.

        Returns:
            Created entity with its generated ID
        """
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def save(self, entity: T) -> T:
        """Commit pending changes on an already-tracked entity."""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
