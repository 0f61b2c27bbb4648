# ORM Models
from app.models.ontology import Hotel, Room, User

__all__ = [
    'Hotel', 'Room', 'User'
]
