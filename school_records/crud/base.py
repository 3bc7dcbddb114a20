# school_records/crud/base.py
"""
Общий store для всех сущностей: прямое отображение модели на таблицу,
без бизнес-логики. Все чтения видят только живые записи (deleted_at IS NULL).
Любая ошибка SQLAlchemy откатывает сессию и пробрасывается как StorageError.
"""
import logging
from datetime import date, datetime
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from school_records.core.errors import NotFoundError, StorageError
from school_records.db.base import Base, utcnow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    entity_name = "record"

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _live(self) -> Query:
        return self.db.query(self.model).filter(self.model.deleted_at.is_(None))

    def _fail(self, action: str) -> StorageError:
        self.db.rollback()
        logger.exception("Failed to %s %s", action, self.entity_name)
        return StorageError(f"failed to {action} {self.entity_name}")

    def _all(self, query: Query) -> List[ModelType]:
        try:
            return query.all()
        except SQLAlchemyError as e:
            raise self._fail("query") from e

    def _first(self, query: Query) -> Optional[ModelType]:
        try:
            return query.first()
        except SQLAlchemyError as e:
            raise self._fail("query") from e

    def create(self, obj: ModelType) -> ModelType:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise self._fail("create") from e
        return obj

    def get(self, id: int) -> ModelType:
        obj = self._first(self._live().filter(self.model.id == id))
        if obj is None:
            raise NotFoundError(f"{self.entity_name} not found")
        return obj

    def exists(self, id: int) -> bool:
        return self._first(self._live().filter(self.model.id == id)) is not None

    def get_all(self, limit: int, offset: int) -> List[ModelType]:
        return self._all(self._live().order_by(self.model.id).offset(offset).limit(limit))

    def find_by(self, **equals: Any) -> List[ModelType]:
        return self._all(self._live().filter_by(**equals).order_by(self.model.id))

    def find_one_by(self, **equals: Any) -> Optional[ModelType]:
        return self._first(self._live().filter_by(**equals).order_by(self.model.id))

    def find_in_range(
        self,
        column: str,
        start: Union[date, datetime],
        end: Union[date, datetime],
    ) -> List[ModelType]:
        """Включительный диапазон по колонке даты/времени."""
        attr = getattr(self.model, column)
        return self._all(self._live().filter(attr >= start, attr <= end).order_by(attr, self.model.id))

    def update(self, obj: ModelType) -> ModelType:
        # запись могли удалить между чтением и записью
        if not self.exists(obj.id):
            self.db.rollback()
            raise NotFoundError(f"{self.entity_name} not found")
        try:
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise self._fail("update") from e
        return obj

    def delete(self, id: int) -> None:
        obj = self.get(id)
        try:
            obj.deleted_at = utcnow()
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete") from e
