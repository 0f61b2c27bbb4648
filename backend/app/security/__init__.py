# Security module
from app.security.auth import get_current_user, get_auth_service

__all__ = ['get_current_user', 'get_auth_service']
