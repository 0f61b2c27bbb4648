"""
酒店管理路由
所有接口都需要 Bearer token
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import unwrap
from app.models.schemas import (
    HotelCreate, HotelUpdate, HotelPatch, HotelResponse, MessageResponse
)
from app.security.auth import get_current_user
from app.services import get_hotel_registry
from core.domain import messages

router = APIRouter(prefix="/hotels", tags=["酒店管理"])


@router.post("", response_model=HotelResponse)
def add_hotel(
    data: HotelCreate,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """创建酒店"""
    return unwrap(get_hotel_registry(db).add(data.to_domain()))


@router.get("", response_model=List[HotelResponse])
def list_hotels(
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """获取酒店列表"""
    return unwrap(get_hotel_registry(db).find_all())


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """获取单个酒店"""
    return unwrap(get_hotel_registry(db).find_by_id(hotel_id))


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(
    hotel_id: int,
    data: HotelUpdate,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """整体更新酒店"""
    return unwrap(get_hotel_registry(db).update(hotel_id, data.to_domain()))


@router.patch("/{hotel_id}", response_model=HotelResponse)
def partially_update_hotel(
    hotel_id: int,
    data: HotelPatch,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """部分更新酒店（只合并请求中出现的字段）"""
    patch = data.model_dump(exclude_unset=True)
    return unwrap(get_hotel_registry(db).partially_update(hotel_id, patch))


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: str = Depends(get_current_user)
):
    """删除酒店"""
    unwrap(get_hotel_registry(db).delete(hotel_id))
    return MessageResponse(message=messages.hotel_deleted(hotel_id))
