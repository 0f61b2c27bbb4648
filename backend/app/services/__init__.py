# Business Services - 按请求装配 core 服务
from sqlalchemy.orm import Session

from app.repositories import SqlHotelStore, SqlRoomStore
from core.concurrency import KeyedLock
from core.services import HotelRegistry, RoomRegistry

# 进程内共享：同一实体的读-改-写在所有请求之间串行化
entity_locks = KeyedLock()


def get_hotel_registry(db: Session) -> HotelRegistry:
    """获取酒店登记处实例"""
    return HotelRegistry(SqlHotelStore(db), locks=entity_locks)


def get_room_registry(db: Session) -> RoomRegistry:
    """获取房间登记处实例"""
    return RoomRegistry(SqlRoomStore(db), get_hotel_registry(db), locks=entity_locks)


__all__ = [
    'entity_locks', 'get_hotel_registry', 'get_room_registry'
]
