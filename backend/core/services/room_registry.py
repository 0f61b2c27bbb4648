"""
core/services/room_registry.py

房间登记处

Rooms reference a hotel by ``hotel_id``. The reference is resolved through
HotelRegistry.find_by_id on add, and on update / partial update whenever the
hotel id changes; a missing hotel fails with NOT_FOUND before anything is
written. The check and the save run under the hotel's own id lock, the one
HotelRegistry.delete takes, so a room is never written against a hotel that
is being deleted. Room numbers are not checked for uniqueness within a hotel.
"""
import logging
from typing import Any, ContextManager, Optional

from core.concurrency import KeyedLock
from core.domain import messages
from core.domain.interfaces import RoomStore
from core.domain.room import Room
from core.domain.rules.validation_rules import validate_room
from core.result import Result
from core.services.hotel_registry import HotelRegistry
from core.services.registry import EntityRegistry

logger = logging.getLogger(__name__)


class RoomRegistry(EntityRegistry[Room]):
    """房间服务"""

    entity_name = "Room"

    def __init__(self, store: RoomStore, hotels: HotelRegistry,
                 locks: Optional[KeyedLock] = None):
        super().__init__(store, locks)
        self.hotels = hotels

    def validate(self, entity: Room) -> Result:
        return validate_room(entity)

    def not_found_message(self, entity_id: Any) -> str:
        return messages.room_not_found(entity_id)

    def reference_guard(self, candidate: Room) -> ContextManager:
        return self.hotels.hold(candidate.hotel_id)

    def check_references(self, candidate: Room, previous: Optional[Room]) -> Result:
        if previous is not None and previous.hotel_id == candidate.hotel_id:
            return Result.ok(candidate)

        hotel = self.hotels.find_by_id(candidate.hotel_id)
        if hotel.failed:
            logger.info(f"Room rejected, hotel {candidate.hotel_id} not resolvable: {hotel.message}")
            return hotel
        return Result.ok(candidate)

    def find_by_hotel_id(self, hotel_id: int) -> Result:
        """获取某酒店的全部房间（酒店不存在时返回空列表）"""
        return self._guarded(
            "find_by_hotel_id",
            lambda: Result.ok(list(self.store.get_by_foreign_key(hotel_id))),
        )
