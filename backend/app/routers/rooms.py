"""
房间管理路由
所有接口都需要 Bearer token；房间的 hotel_id 必须指向已存在的酒店
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import unwrap
from app.models.schemas import (
    RoomCreate, RoomUpdate, RoomPatch, RoomResponse, MessageResponse
)
from app.security.auth import get_current_user
from app.services import get_room_registry
from core.domain import messages

router = APIRouter(prefix="/rooms", tags=["房间管理"])


@router.post("", response_model=RoomResponse)
def add_room(
    data: RoomCreate,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """创建房间"""
    return unwrap(get_room_registry(db).add(data.to_domain()))


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """获取房间列表"""
    return unwrap(get_room_registry(db).find_all())


@router.get("/hotel/{hotel_id}", response_model=List[RoomResponse])
def list_rooms_by_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """获取某酒店的房间"""
    return unwrap(get_room_registry(db).find_by_hotel_id(hotel_id))


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """获取单个房间"""
    return unwrap(get_room_registry(db).find_by_id(room_id))


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: int,
    data: RoomUpdate,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """整体更新房间"""
    return unwrap(get_room_registry(db).update(room_id, data.to_domain()))


@router.patch("/{room_id}", response_model=RoomResponse)
def partially_update_room(
    room_id: int,
    data: RoomPatch,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """部分更新房间（只合并请求中出现的字段）"""
    patch = data.model_dump(exclude_unset=True)
    return unwrap(get_room_registry(db).partially_update(room_id, patch))


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """删除房间"""
    unwrap(get_room_registry(db).delete(room_id))
    return MessageResponse(message=messages.room_deleted(room_id))
