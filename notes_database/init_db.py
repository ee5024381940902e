"""
Creates the notes tables.

Called from the web app's startup; can also be run directly
(``python -m notes_database.init_db``) against ``DATABASE_URL``.
"""
from notes_database.db import engine
from notes_database.models import Base

# PUBLIC_INTERFACE
def init_db(bind=None):
    """Create every table that does not exist yet on ``bind`` (default: the app engine)."""
    Base.metadata.create_all(bind=bind if bind is not None else engine)

if __name__ == "__main__":
    init_db()
    print(f"Tables created: {', '.join(sorted(Base.metadata.tables))}")
