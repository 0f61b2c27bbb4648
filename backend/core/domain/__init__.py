"""
core/domain/__init__.py

领域层入口点
"""
from core.domain.hotel import Hotel
from core.domain.room import Room
from core.domain.user import User
from core.domain.merge import UNSET, EntityMerger, empty_patch

__all__ = [
    "Hotel",
    "Room",
    "User",
    "UNSET",
    "EntityMerger",
    "empty_patch",
]
