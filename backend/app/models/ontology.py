"""
ORM 映射
Hotel / Room / User 表。领域值对象在 core.domain 中定义，
app.repositories 负责两者之间的转换。
"""
from datetime import datetime

from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Text, Boolean, Numeric
)
from sqlalchemy.orm import relationship

from app.database import Base
from core.services.auth_service import MAX_USERNAME_LENGTH
from core.domain.rules.validation_rules import (
    HOTEL_FIELD_LIMITS, PRICE_PRECISION, PRICE_SCALE, ROOM_FIELD_LIMITS
)


class Hotel(Base):
    """酒店"""
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(HOTEL_FIELD_LIMITS["name"]), nullable=False)  # 名称
    location = Column(String(HOTEL_FIELD_LIMITS["location"]))  # 地址
    phone = Column(String(HOTEL_FIELD_LIMITS["phone"]))
    email = Column(String(HOTEL_FIELD_LIMITS["email"]))
    star_rating = Column(Integer)                      # 星级
    description = Column(Text)
    room_count = Column(Integer)                       # 房间数
    facilities = Column(Text)                          # 设施(逗号分隔)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 链接（删除酒店不级联、不置空房间的 hotel_id）
    rooms = relationship("Room", back_populates="hotel", passive_deletes="all")


class Room(Base):
    """房间"""
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    room_type = Column(String(ROOM_FIELD_LIMITS["room_type"]))  # 房型
    room_number = Column(Integer)                      # 房间号
    price = Column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)  # 价格
    capacity = Column(Integer)                         # 可住人数
    available = Column(Boolean, default=True)          # 是否可订
    facilities = Column(Text)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 链接
    hotel = relationship("Hotel", back_populates="rooms")


class User(Base):
    """认证用户 - password 只保存 bcrypt 摘要"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
