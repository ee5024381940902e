import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _new_id():
    return str(uuid.uuid4())


def _utcnow():
    return datetime.now(timezone.utc)

# PUBLIC_INTERFACE
class User(Base):
    """
    SQLAlchemy model for a user of the notes workbench.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(128), unique=True, index=True, nullable=False)
    hashed_password = Column(String(256), nullable=False)
    created_at = Column(DateTime, default=_utcnow)

    notes = relationship("Note", back_populates="owner", cascade="all, delete-orphan")

# PUBLIC_INTERFACE
class Note(Base):
    """
    SQLAlchemy model for a note.
    """
    __tablename__ = "notes"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String(128), nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    owner = relationship("User", back_populates="notes")
