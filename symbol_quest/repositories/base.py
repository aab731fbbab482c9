"""Generic repository over a SQLAlchemy session."""
from typing import Generic, List, Optional, Type, TypeVar

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Common CRUD operations for one model class.

    Subclasses add their own query methods using `self._session`
    and `self._model`.
    """

    def __init__(self, session, model: Type[T]):
        self._session = session
        self._model = model

    def find_by_id(self, id) -> Optional[T]:
        """Find entity by primary key."""
        return self._session.get(self._model, str(id))

    def find_all(self, limit: int = 100, offset: int = 0) -> List[T]:
        """Find entities with pagination."""
        return self._session.query(self._model).offset(offset).limit(limit).all()

    def save(self, entity: T) -> T:
        """Insert or update entity and commit."""
        self._session.add(entity)
        self._session.commit()
        return entity

    def delete(self, id) -> bool:
        """Delete entity by primary key. Returns True if deleted."""
        entity = self.find_by_id(id)
        if not entity:
            return False
        self._session.delete(entity)
        self._session.commit()
        return True
