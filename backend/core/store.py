"""
core/store.py

内存存储实现 - 线程安全，自增 id

Values go in and come out as copies, so callers can never mutate stored
state by holding on to a returned entity.
"""
import copy
import dataclasses
import itertools
import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

from core.domain.interfaces import DuplicateKeyError, EntityStore, RoomStore, UserStore
from core.domain.room import Room
from core.domain.user import User

logger = logging.getLogger(__name__)

E = TypeVar("E")


class InMemoryStore(EntityStore[E], Generic[E]):
    """In-memory store keyed by integer id, ordered by insertion."""

    def __init__(self):
        self._items: Dict[int, E] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def get(self, entity_id: int) -> Optional[E]:
        with self._lock:
            item = self._items.get(entity_id)
            return copy.deepcopy(item) if item is not None else None

    def get_all(self) -> List[E]:
        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def save(self, entity: E) -> E:
        with self._lock:
            self._check_unique(entity)
            if entity.id is None:
                entity = dataclasses.replace(entity, id=next(self._ids))
            self._items[entity.id] = copy.deepcopy(entity)
            return copy.deepcopy(entity)

    def delete(self, entity: E) -> None:
        with self._lock:
            self._items.pop(entity.id, None)

    def _check_unique(self, entity: E) -> None:
        """Hook for subclasses enforcing uniqueness; called under the lock."""

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class InMemoryRoomStore(InMemoryStore[Room], RoomStore):

    def get_by_foreign_key(self, hotel_id: int) -> List[Room]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._items.values() if r.hotel_id == hotel_id]


class InMemoryUserStore(InMemoryStore[User], UserStore):

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._items.values():
                if user.username == username:
                    return copy.deepcopy(user)
            return None

    def _check_unique(self, entity: User) -> None:
        for user in self._items.values():
            if user.username == entity.username and user.id != entity.id:
                logger.warning(f"Duplicate username rejected by store: {entity.username}")
                raise DuplicateKeyError(f"username '{entity.username}' already exists")
