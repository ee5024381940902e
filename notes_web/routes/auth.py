"""Login, join and logout."""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.concurrency import run_in_threadpool

from notes_database.users import create_user, get_user_by_email, verify_login
from notes_web.auth import create_user_session, get_user_id, logout
from notes_web.dependencies import DbDep, RootDataDep, root_loader
from notes_web.document import page_title, render_document
from notes_web.forms import FormResult, LoginField, parse_join_form, parse_login_form
from notes_web.logging import get_logger
from notes_web.utils import safe_redirect

router = APIRouter()
logger = get_logger("auth")


def _auth_page(request, root, template, name, redirect_to, result=None, email="", status_code=200):
    errors = result.error_map() if result is not None else {}
    focus = result.first_invalid(LoginField) if result is not None else None
    return render_document(
        request,
        template,
        {
            "errors": errors,
            "email": email,
            "redirect_to": redirect_to,
            "focus": focus.value if focus is not None else None,
        },
        root,
        status_code=status_code,
        meta=[{"title": page_title(name)}],
    )


@router.get("/login", response_class=HTMLResponse, summary="Login page")
async def login_page(request: Request, root: RootDataDep):
    if await get_user_id(request):
        return RedirectResponse("/", status_code=302)
    redirect_to = safe_redirect(request.query_params.get("redirectTo"), "/notes")
    return _auth_page(request, root, "pages/login.html", "Login", redirect_to)


@router.post("/login", summary="Log in")
async def login_action(request: Request, db: DbDep):
    form = await request.form()
    redirect_to = safe_redirect(form.get("redirectTo"), "/notes")
    remember = form.get("remember") == "on"

    result = parse_login_form(form)
    user = None
    if result.ok:
        user = await run_in_threadpool(verify_login, db, result.data.email, result.data.password)
        if user is None:
            result = FormResult.failed({LoginField.EMAIL: ["Invalid email or password."]})

    if user is None:
        root = await root_loader(request, db)
        return _auth_page(
            request, root, "pages/login.html", "Login", redirect_to,
            result=result, email=form.get("email") or "", status_code=400,
        )

    logger.info("User %s logged in", user.id)
    return await create_user_session(request, user.id, remember, redirect_to)


@router.get("/join", response_class=HTMLResponse, summary="Sign-up page")
async def join_page(request: Request, root: RootDataDep):
    if await get_user_id(request):
        return RedirectResponse("/", status_code=302)
    redirect_to = safe_redirect(request.query_params.get("redirectTo"), "/")
    return _auth_page(request, root, "pages/join.html", "Sign Up", redirect_to)


@router.post("/join", summary="Create an account")
async def join_action(request: Request, db: DbDep):
    form = await request.form()
    redirect_to = safe_redirect(form.get("redirectTo"), "/")

    result = parse_join_form(form)
    if result.ok and await run_in_threadpool(get_user_by_email, db, result.data.email):
        result = FormResult.failed({LoginField.EMAIL: ["A user already exists with this email."]})

    if not result.ok:
        root = await root_loader(request, db)
        return _auth_page(
            request, root, "pages/join.html", "Sign Up", redirect_to,
            result=result, email=form.get("email") or "", status_code=400,
        )

    user = await run_in_threadpool(create_user, db, result.data.email, result.data.password)
    logger.info("User %s joined", user.id)
    return await create_user_session(request, user.id, False, redirect_to)


@router.post("/logout", summary="Log out")
async def logout_action(request: Request):
    return await logout(request)
