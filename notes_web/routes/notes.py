"""
Notes pages: list, create, view and delete.

All routes here are protected. Loaders declare the user requirement first so
an anonymous request is redirected to the login page before any database work.
"""
import asyncio

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.concurrency import run_in_threadpool

from notes_database.notes import create_note, delete_note, get_note, get_note_list_items
from notes_web.auth import require_user
from notes_web.dependencies import DbDep, RootDataDep, root_loader
from notes_web.document import page_title, render_document
from notes_web.errors import not_found
from notes_web.forms import NoteField, NoteForm, client_schema, parse_note_form
from notes_web.logging import get_logger
from notes_web.routes import UserDep, UserIdDep
from notes_web.sessions import commit_session, get_session
from notes_web.utils import wants_json

router = APIRouter()
logger = get_logger("notes")

NOTES_CRUMB = {"path": "/notes", "label": "Notes"}
NEW_NOTE_CRUMB = {"path": "/notes/new", "label": "New Note"}


def _title_meta(name):
    title = page_title(name)
    return [{"title": title}, {"property": "og:title", "content": title}]


def _new_note_page(request, root, result=None, values=None, status_code=200):
    errors = result.error_map() if result is not None else {}
    focus = result.first_invalid(NoteField) if result is not None else None
    return render_document(
        request,
        "pages/notes/new.html",
        {
            "breadcrumbs": [NOTES_CRUMB, NEW_NOTE_CRUMB],
            "errors": errors,
            "values": values or {},
            "focus": focus.value if focus is not None else None,
            "schema_json": client_schema(NoteForm),
        },
        root,
        status_code=status_code,
        meta=_title_meta("New Note"),
    )


@router.get("/notes", response_class=HTMLResponse, summary="List notes")
async def notes_index(request: Request, user: UserDep, root: RootDataDep, db: DbDep):
    session = await get_session(request)
    notes = await run_in_threadpool(get_note_list_items, db, user_id=user.id)
    success = session.get("success")
    response = render_document(
        request,
        "pages/notes/index.html",
        {"notes": notes, "success": success, "breadcrumbs": [NOTES_CRUMB]},
        root,
        meta=_title_meta("Notes"),
    )
    if success is not None:
        # reading the flash removed it; persist that
        commit_session(response, session)
    return response


@router.get("/notes/new", response_class=HTMLResponse, summary="New note form")
async def new_note(request: Request, user_id: UserIdDep, root: RootDataDep):
    return _new_note_page(request, root)


@router.post("/notes/new", summary="Create a note")
async def create_note_action(request: Request, db: DbDep):
    user, session, form = await asyncio.gather(
        require_user(request, db),
        get_session(request),
        request.form(),
    )

    result = parse_note_form(form)
    if not result.ok:
        if wants_json(request):
            return JSONResponse({"errors": result.error_map()}, status_code=400)
        root = await root_loader(request, db)
        values = {name.value: form.get(name.value) or "" for name in NoteField}
        return _new_note_page(request, root, result=result, values=values, status_code=400)

    note = await run_in_threadpool(
        create_note,
        db,
        title=result.data.title,
        body=result.data.body,
        user_id=user.id,
    )
    logger.info("User %s created note %s", user.id, note.id)

    session.flash("success", f"Note with title: '{note.title}' was successfully created.")
    return commit_session(RedirectResponse("/notes", status_code=302), session)


@router.get("/notes/{note_id}", response_class=HTMLResponse, summary="Show a note")
async def note_detail(request: Request, note_id: str, user_id: UserIdDep, root: RootDataDep, db: DbDep):
    note = await run_in_threadpool(get_note, db, note_id=note_id, user_id=user_id)
    if not note:
        raise not_found("Note not found.")
    return render_document(
        request,
        "pages/notes/detail.html",
        {
            "note": note,
            "breadcrumbs": [NOTES_CRUMB, {"path": f"/notes/{note.id}", "label": note.title}],
        },
        root,
        meta=_title_meta(note.title),
    )


@router.post("/notes/{note_id}/delete", summary="Delete a note")
async def delete_note_action(request: Request, note_id: str, db: DbDep):
    user, session = await asyncio.gather(require_user(request, db), get_session(request))
    deleted = await run_in_threadpool(delete_note, db, note_id=note_id, user_id=user.id)
    if not deleted:
        raise not_found("Note not found.")
    logger.info("User %s deleted note %s", user.id, note_id)
    session.flash("success", "Note was successfully deleted.")
    return commit_session(RedirectResponse("/notes", status_code=302), session)
