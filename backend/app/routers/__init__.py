# API Routers
from app.routers import auth, hotels, rooms

__all__ = ['auth', 'hotels', 'rooms']
