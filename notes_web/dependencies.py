"""
Dependency injection for page routes.

``root_loader`` runs for every rendered page and supplies the data the
document shell needs: theme, current user and the public environment flags.
"""
from datetime import datetime
from typing import Annotated, Dict, Optional, Union

from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session as DbSession

from notes_database.db import SessionLocal
from notes_web import config
from notes_web.auth import get_user
from notes_web.theme import Theme, get_theme_session


# DATABASE Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: Optional[datetime] = None


class RootLoaderData(BaseModel):
    theme: Optional[Theme] = None
    user: Optional[UserOut] = None
    ENV: Dict[str, Union[str, bool, None]] = {}


# PUBLIC_INTERFACE
async def root_loader(request: Request, db=Depends(get_db)) -> RootLoaderData:
    """Theme, optional user and ENV for the document shell."""
    theme_session = await get_theme_session(request)
    user = await get_user(request, db)
    return RootLoaderData(
        theme=theme_session.get_theme(),
        user=UserOut.model_validate(user) if user is not None else None,
        ENV=config.public_env(),
    )


DbDep = Annotated[DbSession, Depends(get_db)]
RootDataDep = Annotated[RootLoaderData, Depends(root_loader)]
