"""
core/domain/hotel.py

Hotel 领域实体
Plain value object; rooms of a hotel are looked up through the room store
rather than stored on the hotel.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Hotel:
    """酒店"""
    name: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    star_rating: Optional[int] = None
    description: Optional[str] = None
    room_count: Optional[int] = None
    facilities: Optional[str] = None
    id: Optional[int] = None
