"""
认证模块
签名密钥在进程启动时从配置读取一次，所有校验方共享同一个 TokenCodec。
"""
import logging
from datetime import timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.errors import to_http_exception
from app.repositories import SqlUserStore
from core.concurrency import KeyedLock
from core.security.passwords import PasswordHasher
from core.security.tokens import TokenCodec
from core.services.auth_service import AuthService

logger = logging.getLogger(__name__)

password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
token_codec = TokenCodec(
    secret_key=settings.SECRET_KEY,
    algorithm=settings.ALGORITHM,
    default_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
)

# 注册时按用户名加锁
_user_locks = KeyedLock()

security = HTTPBearer(auto_error=False)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """依赖注入：认证服务"""
    return AuthService(SqlUserStore(db), password_hasher, token_codec, locks=_user_locks)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    service: AuthService = Depends(get_auth_service),
) -> str:
    """校验 Bearer token，返回用户名"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = service.validate_token(credentials.credentials)
    if result.failed:
        raise to_http_exception(result.error_kind, result.message)
    return result.value
