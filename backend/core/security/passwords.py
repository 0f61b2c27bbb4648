"""
core/security/passwords.py

密码哈希 - bcrypt

Each call to ``hash`` draws a fresh salt, so the same password hashes to a
different digest every time; ``verify`` is salt-aware and relies on
``bcrypt.checkpw`` for the constant-time comparison.
"""
import logging
from functools import cached_property

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12


class PasswordHasher:
    """bcrypt 哈希器"""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """密码哈希"""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')

    @cached_property
    def dummy_digest(self) -> str:
        """与真实摘要同成本的占位摘要；用户不存在时也跑一次 checkpw"""
        return self.hash("not-a-real-password")

    def verify(self, plaintext: str, digest: str) -> bool:
        """验证密码"""
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode('utf-8'), digest.encode('utf-8'))
        except ValueError:
            # not a bcrypt digest
            logger.warning("Password verification against a malformed digest")
            return False
