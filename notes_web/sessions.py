"""Signed cookie sessions.

A session is a small JSON-compatible dict signed into a JWT (HS256) with
``python-jose`` and stored in a cookie. Reading never fails: a missing,
tampered or expired cookie yields a fresh empty session.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Request, Response
from jose import JWTError, jwt

from notes_web import config

_FLASH_PREFIX = "__flash_"
_FLASH_SUFFIX = "__"


def _flash_key(name: str) -> str:
    return f"{_FLASH_PREFIX}{name}{_FLASH_SUFFIX}"


class Session:
    """Key/value session state with one-shot flash entries."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, max_age: Optional[int] = None):
        self._data: Dict[str, Any] = dict(data or {})
        self.max_age = max_age

    @property
    def data(self) -> Dict[str, Any]:
        return dict(self._data)

    def has(self, key: str) -> bool:
        return key in self._data or _flash_key(key) in self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Return a value. Flash entries are removed once read."""
        flash_key = _flash_key(key)
        if flash_key in self._data:
            return self._data.pop(flash_key)
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def unset(self, key: str) -> None:
        self._data.pop(key, None)
        self._data.pop(_flash_key(key), None)

    def flash(self, key: str, value: Any) -> None:
        self._data[_flash_key(key)] = value

    def __repr__(self) -> str:
        return f"Session({self._data!r})"


class CookieSessionStorage:
    """Reads and writes ``Session`` objects to a signed cookie."""

    def __init__(
        self,
        cookie_name: str,
        secret: str,
        max_age: Optional[int] = None,
        secure: bool = False,
        path: str = "/",
        samesite: str = "lax",
    ):
        if not secret:
            raise ValueError("Session secret must not be empty.")
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure
        self.path = path
        self.samesite = samesite
        self._secret = secret

    def encode(self, session: Session, max_age: Optional[int] = None) -> str:
        now = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {"data": session.data, "iat": now}
        if max_age is not None:
            claims["exp"] = now + timedelta(seconds=max_age)
            claims["max_age"] = max_age
        return jwt.encode(claims, self._secret, algorithm=config.ALGORITHM)

    def decode(self, value: Optional[str]) -> Session:
        if not value:
            return Session(max_age=self.max_age)
        try:
            claims = jwt.decode(value, self._secret, algorithms=[config.ALGORITHM])
        except JWTError:
            return Session(max_age=self.max_age)
        data = claims.get("data")
        if not isinstance(data, dict):
            return Session(max_age=self.max_age)
        return Session(data, max_age=claims.get("max_age", self.max_age))

    # PUBLIC_INTERFACE
    async def get_session(self, request: Request) -> Session:
        """Session for the incoming request (empty when the cookie is invalid)."""
        return self.decode(request.cookies.get(self.cookie_name))

    # PUBLIC_INTERFACE
    def commit_session(self, response: Response, session: Session, max_age: Optional[int] = None) -> Response:
        """Re-sign ``session`` and attach it to ``response`` as Set-Cookie."""
        if max_age is None:
            max_age = session.max_age
        response.set_cookie(
            self.cookie_name,
            self.encode(session, max_age),
            max_age=max_age,
            path=self.path,
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )
        return response

    # PUBLIC_INTERFACE
    def destroy_session(self, response: Response) -> Response:
        response.delete_cookie(
            self.cookie_name,
            path=self.path,
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )
        return response


session_storage = CookieSessionStorage(
    config.SESSION_COOKIE_NAME,
    config.SESSION_SECRET,
    secure=config.SESSION_SECURE,
)

get_session = session_storage.get_session
commit_session = session_storage.commit_session
destroy_session = session_storage.destroy_session
