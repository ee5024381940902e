"""Note accessors used by the notes routes."""
from notes_database.models import Note

# PUBLIC_INTERFACE
def create_note(db, *, title: str, body: str, user_id: str) -> Note:
    """Create a note owned by ``user_id`` and return the refreshed row."""
    note = Note(title=title, body=body, user_id=user_id)
    db.add(note)
    db.commit()
    db.refresh(note)
    return note

# PUBLIC_INTERFACE
def get_note(db, *, note_id: str, user_id: str):
    """Return the note only when it belongs to ``user_id``."""
    return db.query(Note).filter(Note.id == note_id, Note.user_id == user_id).first()

# PUBLIC_INTERFACE
def get_note_list_items(db, *, user_id: str, limit: int = 100):
    """Newest-first list of a user's notes."""
    return (
        db.query(Note)
        .filter(Note.user_id == user_id)
        .order_by(Note.updated_at.desc())
        .limit(limit)
        .all()
    )

# PUBLIC_INTERFACE
def delete_note(db, *, note_id: str, user_id: str) -> bool:
    """Delete a user's note. Returns False when there was nothing to delete."""
    note = get_note(db, note_id=note_id, user_id=user_id)
    if not note:
        return False
    db.delete(note)
    db.commit()
    return True
