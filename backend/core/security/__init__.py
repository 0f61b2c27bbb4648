"""
core/security - 安全模块

- passwords: bcrypt 密码哈希
- tokens: JWT 签发与校验

使用方式:
    >>> from core.security import PasswordHasher, TokenCodec
    >>> codec = TokenCodec(secret_key="change-me")
    >>> codec.verify(codec.issue("alice")).value
    'alice'
"""
from core.security.passwords import PasswordHasher
from core.security.tokens import TokenCodec

__all__ = [
    "PasswordHasher",
    "TokenCodec",
]
