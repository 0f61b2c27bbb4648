"""
core/domain/rules/validation_rules.py

字段校验规则 - 纯函数，无副作用，不修改输入

Every rule returns a Result: ``Result.ok(candidate)`` when the value is
acceptable, otherwise an INVALID_DATA failure with the user facing message.
The registries call these on create, on full update and again on the merged
value of every partial update.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, Optional

from core.domain import messages
from core.domain.hotel import Hotel
from core.domain.room import Room
from core.result import Result, invalid_data

# 与存储列保持一致：Numeric(PRICE_PRECISION, PRICE_SCALE)
PRICE_PRECISION = 10
PRICE_SCALE = 2
_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_SCALE)
_PRICE_LIMIT = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE)

# 文本字段最大长度，同时决定 String 列的宽度
HOTEL_FIELD_LIMITS: Dict[str, int] = {"name": 200, "location": 255, "phone": 30, "email": 100}
ROOM_FIELD_LIMITS: Dict[str, int] = {"room_type": 50}


def validate_name(candidate: Optional[str]) -> Result:
    """酒店名称不能为 None、空串或纯空白"""
    if candidate is None or not str(candidate).strip():
        return invalid_data(messages.INVALID_HOTEL_NAME)
    return Result.ok(candidate)


def validate_price(candidate: Any) -> Result:
    """价格必须大于零，且能无损存入 Numeric(10, 2)"""
    if candidate is None or isinstance(candidate, bool):
        return invalid_data(messages.INVALID_PRICE)
    try:
        price = Decimal(str(candidate))
    except (InvalidOperation, ValueError):
        return invalid_data(messages.INVALID_PRICE)
    if not price.is_finite() or price <= 0:
        return invalid_data(messages.INVALID_PRICE)
    if price >= _PRICE_LIMIT or price != price.quantize(_PRICE_QUANTUM):
        return invalid_data(messages.INVALID_PRICE_PRECISION)
    return Result.ok(candidate)


def validate_hotel_id(candidate: Optional[int]) -> Result:
    """房间必须关联酒店"""
    if candidate is None:
        return invalid_data(messages.MISSING_HOTEL_ID)
    return Result.ok(candidate)


def validate_length(field: str, candidate: Optional[str], limit: int) -> Result:
    """可选文本字段不得超过列宽"""
    if candidate is not None and len(str(candidate)) > limit:
        return invalid_data(messages.field_too_long(field, limit))
    return Result.ok(candidate)


def _length_rules(entity: Any, limits: Dict[str, int]) -> list:
    return [
        lambda field=field, limit=limit: validate_length(field, getattr(entity, field), limit)
        for field, limit in limits.items()
    ]


def _run(rules: Iterable[Callable[[], Result]], entity: Any) -> Result:
    for rule in rules:
        result = rule()
        if result.failed:
            return result
    return Result.ok(entity)


def validate_hotel(hotel: Hotel) -> Result:
    """Apply all hotel rules; returns the hotel unchanged on success."""
    return _run(
        [lambda: validate_name(hotel.name)] + _length_rules(hotel, HOTEL_FIELD_LIMITS),
        hotel,
    )


def validate_room(room: Room) -> Result:
    """Apply all room rules; returns the room unchanged on success."""
    return _run([
        lambda: validate_price(room.price),
        lambda: validate_hotel_id(room.hotel_id),
    ] + _length_rules(room, ROOM_FIELD_LIMITS), room)
