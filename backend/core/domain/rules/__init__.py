"""
core/domain/rules - 字段校验规则
"""
from core.domain.rules.validation_rules import (
    validate_hotel,
    validate_hotel_id,
    validate_length,
    validate_name,
    validate_price,
    validate_room,
)

__all__ = [
    "validate_hotel",
    "validate_hotel_id",
    "validate_length",
    "validate_name",
    "validate_price",
    "validate_room",
]
