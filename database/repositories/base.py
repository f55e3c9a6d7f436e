import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from core.errors import InvalidInputError

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT')


class BaseRepository(Generic[ModelT]):
    """
    Keyed CRUD over one entity type.

    Identifiers are allocated by the database on ``create`` and never
    reused. No method enforces cross-entity invariants; that belongs to
    the ScoringEngine.
    """
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def list(self) -> List[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def list_by(self, field: str, value: Any) -> List[ModelT]:
        column = self._column(field)
        stmt = select(self.model).where(column == value).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self.db.execute(stmt).scalar_one()

    def create(self, **fields: Any) -> ModelT:
        for field in fields:
            self._column(field)
        entity = self.model(**fields)
        self.db.add(entity)
        self.db.flush()  # Allocate ID
        return entity

    def update(self, entity_id: int, updates: Dict[str, Any]) -> Optional[ModelT]:
        """Shallow-merge ``updates`` over the stored entity."""
        entity = self.get(entity_id)
        if entity is None:
            return None
        for field, value in updates.items():
            if field == 'id':
                raise InvalidInputError.for_field('id', "identifier is immutable")
            self._column(field)
            setattr(entity, field, value)
        self.db.flush()
        return entity

    def delete(self, entity_id: int) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.flush()
        return True

    def _column(self, field: str):
        table = self.model.__table__
        if field not in table.columns:
            raise InvalidInputError.for_field(field, f"unknown field for {self.model.__name__}")
        return table.columns[field]
