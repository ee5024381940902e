"""
Engine and session factory for the notes database.

The URL comes from ``DATABASE_URL`` (a ``.env`` file is honoured). SQLite
connections are handed between the event loop and the request threadpool,
so the same-thread check is switched off for that backend only.
"""
import os
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv

# PUBLIC_INTERFACE
def get_database_url():
    """Database URL from the environment; raises when it is not configured."""
    load_dotenv()
    db_url = os.getenv("DATABASE_URL")
    if not db_url:
        raise ValueError("DATABASE_URL environment variable not set.")
    return db_url

def engine_options(db_url: str) -> dict:
    options = {"future": True, "echo": os.getenv("DATABASE_ECHO", "").lower() in ("1", "true", "yes", "on")}
    if make_url(db_url).get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
    return options

# PUBLIC_INTERFACE
def make_engine(db_url: str):
    return create_engine(db_url, **engine_options(db_url))

engine = make_engine(get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
