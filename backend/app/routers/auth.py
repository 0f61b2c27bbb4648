"""
认证路由
"""
from fastapi import APIRouter, Depends, Query

from app.errors import unwrap
from app.models.schemas import AuthRequest, MessageResponse, TokenResponse
from app.security.auth import get_auth_service
from core.domain import messages
from core.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["认证"])


@router.post("/register", response_model=MessageResponse)
def register(data: AuthRequest, service: AuthService = Depends(get_auth_service)):
    """用户注册"""
    message = unwrap(service.register(data.username, data.password))
    return MessageResponse(message=message)


@router.post("/token", response_model=TokenResponse)
def issue_token(data: AuthRequest, service: AuthService = Depends(get_auth_service)):
    """校验用户名密码并签发 token"""
    unwrap(service.authenticate(data.username, data.password))
    return TokenResponse(access_token=service.generate_token(data.username))


@router.get("/validate", response_model=MessageResponse)
def validate_token(token: str = Query(...), service: AuthService = Depends(get_auth_service)):
    """校验 token"""
    unwrap(service.validate_token(token))
    return MessageResponse(message=messages.TOKEN_VALID)
