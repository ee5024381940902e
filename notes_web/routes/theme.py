"""Theming demo page and the theme-switch action."""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from notes_web import ui
from notes_web.dependencies import RootDataDep
from notes_web.document import page_title, render_document
from notes_web.routes import UserIdDep
from notes_web.theme import Theme, get_theme_session, is_theme
from notes_web.utils import safe_redirect, wants_json

router = APIRouter()


@router.get("/theme", response_class=HTMLResponse, summary="Theme demo")
async def theme_demo(request: Request, user_id: UserIdDep, root: RootDataDep):
    return render_document(
        request,
        "pages/theme.html",
        {
            "button_intents": ui.BUTTON_INTENTS,
            "button_variants": ui.BUTTON_VARIANTS,
            "button_sizes": ui.BUTTON_SIZES,
            "alert_intents": ui.ALERT_INTENTS,
        },
        root,
        meta=[{"title": page_title("Theme")}],
    )


@router.post("/action/set-theme", summary="Store the theme preference")
async def set_theme(request: Request):
    form = await request.form()
    theme = form.get("theme")
    redirect_to = safe_redirect(form.get("redirectTo"), "/")

    if not is_theme(theme):
        message = f"theme value of {theme} is not a valid theme"
        return JSONResponse({"success": False, "message": message}, status_code=400)

    theme_session = await get_theme_session(request)
    theme_session.set_theme(Theme(theme))
    if wants_json(request):
        response = JSONResponse({"success": True})
    else:
        response = RedirectResponse(redirect_to, status_code=302)
    return theme_session.commit(response)
