"""Module E: Auth service (password hashing, admin account, server-side sessions)."""
from __future__ import annotations

import logging
import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from sitecms.config import Settings

log = logging.getLogger("uvicorn.error")

TOKEN_ALGORITHM = "HS256"


def _pwd_bytes(password: str, max_len: int = 72) -> bytes:
    return password.encode("utf-8")[:max_len]


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_pwd_bytes(plain or ""), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_pwd_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


@dataclass(frozen=True)
class AdminAccount:
    """The one privileged principal. Credentials come from configuration only."""

    user_id: str
    username: str
    password_hash: str

    @classmethod
    def from_settings(cls, settings: Settings) -> AdminAccount:
        password_hash = (settings.admin_password_hash or "").strip()
        if not password_hash:
            password_hash = get_password_hash(settings.admin_password, rounds=settings.bcrypt_rounds)
        return cls(user_id=settings.admin_user_id, username=settings.admin_username, password_hash=password_hash)

    def authenticate(self, username: str, password: str) -> bool:
        """Same answer whichever half of the credential is wrong."""
        name_ok = secrets.compare_digest((username or "").encode("utf-8"), self.username.encode("utf-8"))
        password_ok = verify_password(password, self.password_hash)
        return name_ok and password_ok


@dataclass(frozen=True)
class SessionData:
    user_id: str
    username: str
    expires_at: datetime


class SessionStore:
    """
    In-process session registry. The client only ever holds a signed cookie
    wrapping an opaque token; userId/username stay here.
    """

    def __init__(self, secret: str, ttl_hours: int = 24):
        self._secret = secret
        self.ttl = timedelta(hours=ttl_hours)
        self._sessions: dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str, username: str) -> str:
        token = secrets.token_urlsafe(32)
        data = SessionData(user_id=user_id, username=username, expires_at=datetime.now(timezone.utc) + self.ttl)
        with self._lock:
            self._purge_expired()
            self._sessions[token] = data
        return token

    def get(self, token: str | None) -> SessionData | None:
        if not token:
            return None
        with self._lock:
            data = self._sessions.get(token)
            if data and data.expires_at <= datetime.now(timezone.utc):
                del self._sessions[token]
                return None
            return data

    def destroy(self, token: str | None) -> SessionData | None:
        if not token:
            return None
        with self._lock:
            return self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _purge_expired(self) -> None:
        now = datetime.now(timezone.utc)
        for token in [t for t, d in self._sessions.items() if d.expires_at <= now]:
            del self._sessions[token]

    # -- cookie value ---------------------------------------------------

    def encode_cookie(self, token: str) -> str:
        payload = {"sid": token, "exp": datetime.now(timezone.utc) + self.ttl}
        raw = jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)
        return raw if isinstance(raw, str) else raw.decode("utf-8")

    def decode_cookie(self, value: str | None) -> str | None:
        token, _ = self.decode_cookie_with_error(value)
        return token

    def decode_cookie_with_error(self, value: str | None) -> tuple[str | None, str | None]:
        """Verify the cookie signature; returns (session token, error_message)."""
        if not value or not isinstance(value, str):
            return None, "empty cookie"
        try:
            payload = jwt.decode(value.strip(), self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.PyJWTError as e:
            return None, str(e)
        sid = payload.get("sid")
        if not isinstance(sid, str) or not sid:
            return None, "missing session id"
        return sid, None

    def resolve(self, cookie_value: str | None) -> tuple[str | None, SessionData | None]:
        """Cookie value -> (token, live session) or (None, None)."""
        token = self.decode_cookie(cookie_value)
        if not token:
            return None, None
        data = self.get(token)
        return (token, data) if data else (None, None)
