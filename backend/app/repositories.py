"""
SQLAlchemy 存储实现
实现 core.domain.interfaces 中的存储接口，负责 ORM 对象与领域值对象之间的转换
"""
import dataclasses
import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import ontology
from core.domain.hotel import Hotel
from core.domain.interfaces import DuplicateKeyError, EntityStore, RoomStore, UserStore
from core.domain.room import Room
from core.domain.user import User

logger = logging.getLogger(__name__)

E = TypeVar("E")


class SqlAlchemyStore(EntityStore[E], Generic[E]):
    """通用 ORM 存储"""

    model: Type = None
    entity_type: Type = None

    def __init__(self, db: Session):
        self.db = db
        self._fields = [f.name for f in dataclasses.fields(self.entity_type)]

    def _to_entity(self, obj) -> E:
        return self.entity_type(**{name: getattr(obj, name) for name in self._fields})

    def _query(self):
        return self.db.query(self.model)

    def get(self, entity_id: int) -> Optional[E]:
        obj = self._query().filter(self.model.id == entity_id).first()
        return self._to_entity(obj) if obj is not None else None

    def get_all(self) -> List[E]:
        return [self._to_entity(obj) for obj in self._query().order_by(self.model.id).all()]

    def save(self, entity: E) -> E:
        values = dataclasses.asdict(entity)
        obj = None
        if entity.id is not None:
            obj = self._query().filter(self.model.id == entity.id).first()
        if obj is None:
            obj = self.model(**values)
            self.db.add(obj)
        else:
            for key, value in values.items():
                setattr(obj, key, value)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            self._on_integrity_error(entity, e)
            raise
        self.db.refresh(obj)
        return self._to_entity(obj)

    def delete(self, entity: E) -> None:
        obj = self._query().filter(self.model.id == entity.id).first()
        if obj is not None:
            self.db.delete(obj)
            self.db.commit()

    def _on_integrity_error(self, entity: E, error: IntegrityError) -> None:
        """Hook: translate store specific constraint violations."""


class SqlHotelStore(SqlAlchemyStore[Hotel]):
    model = ontology.Hotel
    entity_type = Hotel


class SqlRoomStore(SqlAlchemyStore[Room], RoomStore):
    model = ontology.Room
    entity_type = Room

    def get_by_foreign_key(self, hotel_id: int) -> List[Room]:
        rooms = self._query().filter(self.model.hotel_id == hotel_id).order_by(self.model.id).all()
        return [self._to_entity(obj) for obj in rooms]


class SqlUserStore(SqlAlchemyStore[User], UserStore):
    model = ontology.User
    entity_type = User

    def find_by_username(self, username: str) -> Optional[User]:
        obj = self._query().filter(self.model.username == username).first()
        return self._to_entity(obj) if obj is not None else None

    def _on_integrity_error(self, entity: User, error: IntegrityError) -> None:
        logger.warning(f"Unique constraint hit for username {entity.username}: {error.orig}")
        raise DuplicateKeyError(f"username '{entity.username}' already exists") from error
