"""
Notes Workbench - FastAPI application serving server-rendered pages.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_database.init_db import init_db
from notes_web import config
from notes_web.boundary import ErrorBoundaryMiddleware, caught_response_handler, http_exception_handler
from notes_web.errors import CaughtResponse
from notes_web.logging import get_logger, setup_logging
from notes_web.routes import auth, index, notes, theme

logger = get_logger("main")

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting %s", config.APP_NAME)
    if config.SESSION_SECRET == config.DEV_SECRET:
        logger.warning("SESSION_SECRET is not set; using the development secret")

    init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down application")


def create_app() -> FastAPI:
    app = FastAPI(
        title=config.APP_NAME,
        description=config.APP_DESCRIPTION,
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Authentication", "description": "Login, sign-up and logout"},
            {"name": "Notes", "description": "Create, view, list and delete notes"},
            {"name": "Theme", "description": "Theme demo page and theme preference"},
        ],
    )

    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_exception_handler(CaughtResponse, caught_response_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(index.router, tags=["General"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(notes.router, tags=["Notes"])
    app.include_router(theme.router, tags=["Theme"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notes_web.main:app", host="127.0.0.1", port=8000, reload=config.DEV_MODE)
