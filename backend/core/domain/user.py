"""
core/domain/user.py

认证主体。password 字段保存后只包含 bcrypt 摘要。
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    username: str
    password: str
    id: Optional[int] = None
