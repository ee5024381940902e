"""Theme preference stored in its own signed cookie."""
from enum import Enum
from typing import Optional

from fastapi import Request, Response

from notes_web import config
from notes_web.sessions import CookieSessionStorage, Session


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def is_theme(value) -> bool:
    return isinstance(value, str) and value in {t.value for t in Theme}


theme_storage = CookieSessionStorage(
    config.THEME_COOKIE_NAME,
    config.SESSION_SECRET,
    max_age=config.THEME_MAX_AGE_SECONDS,
    secure=config.SESSION_SECURE,
)


class ThemeSession:
    """Accessor over the theme cookie for a single request."""

    def __init__(self, session: Session):
        self._session = session

    def get_theme(self) -> Optional[Theme]:
        value = self._session.get("theme")
        return Theme(value) if is_theme(value) else None

    def set_theme(self, theme: Theme) -> None:
        self._session.set("theme", Theme(theme).value)

    def commit(self, response: Response) -> Response:
        return theme_storage.commit_session(response, self._session)


# PUBLIC_INTERFACE
async def get_theme_session(request: Request) -> ThemeSession:
    return ThemeSession(await theme_storage.get_session(request))
