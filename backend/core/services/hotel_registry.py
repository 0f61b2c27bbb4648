"""
core/services/hotel_registry.py

酒店登记处
"""
from typing import Any

from core.domain import messages
from core.domain.hotel import Hotel
from core.domain.rules.validation_rules import validate_hotel
from core.result import Result
from core.services.registry import EntityRegistry


class HotelRegistry(EntityRegistry[Hotel]):
    """酒店服务"""

    entity_name = "Hotel"

    def validate(self, entity: Hotel) -> Result:
        return validate_hotel(entity)

    def not_found_message(self, entity_id: Any) -> str:
        return messages.hotel_not_found(entity_id)
