"""
Authentication on top of the cookie session.

The session only stores the user id; the user row is looked up per request.
"""
from typing import Optional
from urllib.parse import urlencode

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from fastapi.concurrency import run_in_threadpool

from notes_database.users import get_user_by_id
from notes_web import config
from notes_web.errors import redirect
from notes_web.logging import get_logger
from notes_web.sessions import commit_session, destroy_session, get_session

USER_SESSION_KEY = "userId"

logger = get_logger("auth")


def _login_url(redirect_to: str) -> str:
    return "/login?" + urlencode({"redirectTo": redirect_to})


def _current_path(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


# PUBLIC_INTERFACE
async def get_user_id(request: Request) -> Optional[str]:
    session = await get_session(request)
    user_id = session.get(USER_SESSION_KEY)
    return user_id if isinstance(user_id, str) else None


# PUBLIC_INTERFACE
async def get_user(request: Request, db):
    """Current user, or None for anonymous or stale sessions."""
    user_id = await get_user_id(request)
    if user_id is None:
        return None
    return await run_in_threadpool(get_user_by_id, db, user_id)


# PUBLIC_INTERFACE
async def require_user_id(request: Request, redirect_to: Optional[str] = None) -> str:
    """Session user id, or raise a redirect to the login page."""
    user_id = await get_user_id(request)
    if user_id is None:
        raise redirect(_login_url(redirect_to or _current_path(request)))
    return user_id


# PUBLIC_INTERFACE
async def require_user(request: Request, db):
    user_id = await require_user_id(request)
    user = await run_in_threadpool(get_user_by_id, db, user_id)
    if user is None:
        logger.info("Session references unknown user %s, logging out", user_id)
        cleared = destroy_session(Response())
        raise redirect("/", headers={"Set-Cookie": cleared.headers["set-cookie"]})
    return user


# PUBLIC_INTERFACE
async def create_user_session(request: Request, user_id: str, remember: bool, redirect_to: str) -> RedirectResponse:
    session = await get_session(request)
    session.set(USER_SESSION_KEY, user_id)
    session.max_age = config.SESSION_REMEMBER_SECONDS if remember else None
    response = RedirectResponse(redirect_to, status_code=302)
    return commit_session(response, session)


# PUBLIC_INTERFACE
async def logout(request: Request) -> RedirectResponse:
    user_id = await get_user_id(request)
    if user_id:
        logger.info("User %s logged out", user_id)
    return destroy_session(RedirectResponse("/", status_code=302))
