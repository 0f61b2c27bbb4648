"""
Pydantic 模式定义
用于 API 请求/响应验证

Business rules (non-empty hotel name, positive price, existing hotel) are
enforced by the core registries so the API answers 400 with the rule's own
message; the schemas below only check types.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from core.domain.hotel import Hotel
from core.domain.room import Room


# ============== 酒店 Schemas ==============

class HotelBase(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    star_rating: Optional[int] = None
    description: Optional[str] = None
    room_count: Optional[int] = None
    facilities: Optional[str] = None

    def to_domain(self) -> Hotel:
        return Hotel(**self.model_dump())


class HotelCreate(HotelBase):
    pass


class HotelUpdate(HotelBase):
    """PUT - 整体替换"""
    pass


class HotelPatch(HotelBase):
    """PATCH - 只有请求中出现的字段才会被合并"""
    pass


class HotelResponse(HotelBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 房间 Schemas ==============

class RoomBase(BaseModel):
    room_type: Optional[str] = None
    room_number: Optional[int] = None
    price: Optional[Decimal] = None
    capacity: Optional[int] = None
    available: Optional[bool] = None
    facilities: Optional[str] = None
    hotel_id: Optional[int] = None

    def to_domain(self) -> Room:
        return Room(**self.model_dump())


class RoomCreate(RoomBase):
    pass


class RoomUpdate(RoomBase):
    """PUT - 整体替换"""
    pass


class RoomPatch(RoomBase):
    """PATCH - 只有请求中出现的字段才会被合并"""
    pass


class RoomResponse(RoomBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 认证 Schemas ==============

class AuthRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
