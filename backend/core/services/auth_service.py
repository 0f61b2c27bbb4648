"""
core/services/auth_service.py

认证服务 - 注册、凭证校验、签发与校验 token

Registration is check-then-insert on the user store. Both steps run under a
lock keyed by username so two concurrent registrations of the same name in
this process cannot both pass the existence check; a uniqueness violation
reported by the store itself (another process, or a store without the lock)
is translated to the same ALREADY_EXISTS failure.
"""
import logging
from datetime import timedelta
from typing import Optional

from core.concurrency import KeyedLock
from core.domain import messages
from core.domain.interfaces import DuplicateKeyError, UserStore
from core.domain.user import User
from core.result import ErrorKind, Result, invalid_data, unexpected
from core.security.passwords import PasswordHasher
from core.security.tokens import TokenCodec

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72
MAX_USERNAME_LENGTH = 50


class AuthService:
    """认证服务"""

    def __init__(self, store: UserStore, hasher: PasswordHasher, codec: TokenCodec,
                 locks: Optional[KeyedLock] = None):
        self.store = store
        self.hasher = hasher
        self.codec = codec
        self._locks = locks or KeyedLock()

    def register(self, username: str, password: str) -> Result:
        """注册新用户"""
        if not username or not username.strip():
            return invalid_data("Username must not be empty")
        if len(username) > MAX_USERNAME_LENGTH:
            return invalid_data(f"Username must not exceed {MAX_USERNAME_LENGTH} characters")
        if not password:
            return invalid_data("Password must not be empty")
        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            return invalid_data(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")

        with self._locks.hold(username):
            try:
                if self.store.find_by_username(username) is not None:
                    logger.info(f"Registration refused, username taken: {username}")
                    return Result.fail(ErrorKind.ALREADY_EXISTS, messages.USER_ALREADY_EXISTS)

                user = User(username=username, password=self.hasher.hash(password))
                self.store.save(user)
            except DuplicateKeyError:
                logger.warning(f"Store rejected duplicate username: {username}")
                return Result.fail(ErrorKind.ALREADY_EXISTS, messages.USER_ALREADY_EXISTS)
            except Exception as e:
                logger.error(f"Error registering user {username}: {e}", exc_info=True)
                return unexpected(str(e))

        logger.info(f"User registered: {username}")
        return Result.ok(messages.USER_SAVED)

    def authenticate(self, username: str, password: str) -> Result:
        """校验用户名密码（签发 token 之前在边界调用）"""
        try:
            user = self.store.find_by_username(username) if username else None
        except Exception as e:
            logger.error(f"Error loading user {username}: {e}", exc_info=True)
            return unexpected(str(e))

        digest = user.password if user is not None else self.hasher.dummy_digest
        matched = self.hasher.verify(password, digest)
        if user is None or not matched:
            logger.info(f"Authentication failed for {username}")
            return Result.fail(ErrorKind.INVALID_CREDENTIALS, messages.INVALID_CREDENTIALS)
        return Result.ok(True)

    def generate_token(self, username: str, ttl: Optional[timedelta] = None) -> str:
        """签发 token（调用前应已完成凭证校验）"""
        return self.codec.issue(username, ttl)

    def validate_token(self, token: Optional[str]) -> Result:
        """校验 token，成功时返回 username"""
        return self.codec.verify(token)
