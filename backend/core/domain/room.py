"""
core/domain/room.py

Room 领域实体 - 每个房间属于且仅属于一个酒店 (hotel_id)
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Room:
    """房间"""
    room_type: Optional[str] = None
    room_number: Optional[int] = None
    price: Optional[Decimal] = None
    capacity: Optional[int] = None
    available: Optional[bool] = None
    facilities: Optional[str] = None
    hotel_id: Optional[int] = None
    id: Optional[int] = None
