"""
core/security/tokens.py

Bearer token codec built on JWT (python-jose).

A token asserts ``{sub, iat, exp}`` and is signed with the process-wide
secret handed in at construction. Verification rejects, in order:

    - malformed: not three canonical base64url segments, undecodable JSON,
      missing or ill-typed claims
    - forged: signature mismatch or a disallowed algorithm
    - expired: ``now > exp`` against the injected clock

The reason is logged; callers only ever see one TOKEN_INVALID failure.
"""
import json
import logging
import math
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from core.domain import messages
from core.result import ErrorKind, Result

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(minutes=30)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenCodec:
    """
    JWT 签发与校验

    Args:
        secret_key: signing secret, shared by every verifier in the process
        algorithm: HMAC algorithm name understood by python-jose
        default_ttl: lifetime used when ``issue`` gets no ttl
        clock: returns the current aware datetime; injectable for tests
    """

    def __init__(self, secret_key: str, algorithm: str = DEFAULT_ALGORITHM,
                 default_ttl: timedelta = DEFAULT_TTL,
                 clock: Callable[[], datetime] = _utcnow):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.default_ttl = default_ttl
        self._clock = clock

    def issue(self, subject: str, ttl: Optional[timedelta] = None) -> str:
        """创建 JWT token"""
        if not subject:
            raise ValueError("subject must not be empty")
        issued_at = self._clock()
        expire = issued_at + (ttl if ttl is not None else self.default_ttl)
        to_encode = {
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": math.ceil(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> Result:
        """校验 token，成功时返回 subject"""
        reason = self._check_structure(token)
        if reason:
            return self._reject("malformed", reason)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            return self._reject("forged", str(e))

        subject = payload.get("sub")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            return self._reject("malformed", "missing subject")
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            return self._reject("malformed", "missing expiry")

        now = self._clock().timestamp()
        if now > expires_at:
            return self._reject("expired", f"expired at {expires_at}, now {int(now)}")

        return Result.ok(subject)

    @staticmethod
    def _check_structure(token: Optional[str]) -> Optional[str]:
        """Return a description of what is wrong with the token's shape, or None."""
        if not isinstance(token, str) or not token:
            return "empty token"
        segments = token.split(".")
        if len(segments) != 3:
            return "expected three segments"

        decoded = []
        for segment in segments:
            raw = segment.encode("ascii", errors="replace")
            try:
                value = base64url_decode(raw)
            except ValueError:
                return "bad base64 segment"
            # 非规范编码（多余位被改写）同样视为格式错误
            if base64url_encode(value) != raw:
                return "non-canonical base64 segment"
            decoded.append(value)

        try:
            header = json.loads(decoded[0])
            claims = json.loads(decoded[1])
        except (ValueError, UnicodeDecodeError):
            return "undecodable JSON"
        if not isinstance(header, dict) or not isinstance(claims, dict):
            return "header and claims must be JSON objects"
        return None

    @staticmethod
    def _reject(reason: str, detail: str) -> Result:
        logger.info(f"Token rejected ({reason}): {detail}")
        return Result.fail(ErrorKind.TOKEN_INVALID, messages.INVALID_TOKEN)
