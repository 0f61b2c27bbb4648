"""
Core Services Module - 服务层

与框架无关的业务服务，依赖注入存储与协作者。
"""

from core.services.auth_service import AuthService
from core.services.hotel_registry import HotelRegistry
from core.services.room_registry import RoomRegistry

__all__ = [
    "AuthService",
    "HotelRegistry",
    "RoomRegistry",
]
