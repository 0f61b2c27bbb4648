"""
core/domain/interfaces.py

持久化接口定义 - registries depend on these contracts only.

Implementations:
    - core.store: thread-safe in-memory stores
    - app.repositories: SQLAlchemy backed stores
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from core.domain.room import Room
from core.domain.user import User

E = TypeVar("E")


class DuplicateKeyError(Exception):
    """A save violated a uniqueness constraint of the store."""


class EntityStore(ABC, Generic[E]):
    """按 id 存取实体的存储"""

    @abstractmethod
    def get(self, entity_id: int) -> Optional[E]:
        """Return a copy of the stored entity or None."""

    @abstractmethod
    def get_all(self) -> List[E]:
        """Return every stored entity; order is stable for an unchanged store."""

    @abstractmethod
    def save(self, entity: E) -> E:
        """Insert when ``entity.id`` is None, otherwise replace. Returns the stored value."""

    @abstractmethod
    def delete(self, entity: E) -> None:
        """Remove the entity with ``entity.id``."""


class RoomStore(EntityStore[Room]):

    @abstractmethod
    def get_by_foreign_key(self, hotel_id: int) -> List[Room]:
        """Rooms belonging to ``hotel_id``."""


class UserStore(EntityStore[User]):

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Look a user up by its unique username."""
