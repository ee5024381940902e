"""Page routes. Each module pairs GET loaders with POST actions."""
from typing import Annotated

from fastapi import Depends, Request

from notes_database.models import User
from notes_web.auth import require_user, require_user_id
from notes_web.dependencies import DbDep


async def user_id_required(request: Request) -> str:
    """Dependency form of ``require_user_id`` for protected loaders."""
    return await require_user_id(request)


async def user_required(request: Request, db: DbDep) -> User:
    return await require_user(request, db)


UserIdDep = Annotated[str, Depends(user_id_required)]
UserDep = Annotated[User, Depends(user_required)]
