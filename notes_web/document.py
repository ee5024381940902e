"""
Document shell rendering.

Every page template extends ``document.html``, which needs the root loader
data: the theme decides the ``<html>`` class on the server (no flash of the
wrong theme) and the whitelisted ENV map is inlined as ``window.ENV``.
``error_document.html`` is the reduced variant used by the error boundary;
it takes no loader data and always renders dark.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from notes_web import config, ui
from notes_web.dependencies import RootLoaderData
from notes_web.utils import truncate

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
ui.register(templates.env)
templates.env.filters["truncate_text"] = truncate

ICON_LINKS: List[Dict[str, str]] = [
    {"rel": "apple-touch-icon", "sizes": "180x180", "href": "/static/apple-touch-icon.png?v=10"},
    {"rel": "icon", "type": "image/png", "sizes": "96x96", "href": "/static/favicon-96x96.png?v=10"},
    {"rel": "icon", "type": "image/png", "sizes": "48x48", "href": "/static/favicon-48x48.png?v=10"},
    {"rel": "icon", "type": "image/png", "sizes": "32x32", "href": "/static/favicon-32x32.png?v=10"},
    {"rel": "icon", "type": "image/png", "sizes": "16x16", "href": "/static/favicon-16x16.png?v=10"},
    {"rel": "icon", "href": "/static/favicon.ico?v=10"},
    {"rel": "manifest", "href": "/static/manifest.webmanifest?v=10", "crossorigin": "use-credentials"},
]

ROOT_META: List[Dict[str, str]] = [{"title": config.APP_NAME}]

_JSON_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def json_for_script(value: Any) -> Markup:
    """JSON that is safe to place inside an inline ``<script>`` element."""
    text = json.dumps(value)
    for char, escaped in _JSON_SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return Markup(text)


def _meta_key(entry: Mapping[str, str]) -> str:
    if "title" in entry:
        return "title"
    return entry.get("name") or entry.get("property") or json.dumps(entry, sort_keys=True)


def merge_meta(parent: List[Dict[str, str]], child: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Child entries replace parent entries with the same title/name/property."""
    overridden = {_meta_key(entry) for entry in child}
    return [entry for entry in parent if _meta_key(entry) not in overridden] + list(child)


def page_title(name: str) -> str:
    return f"{name} - {config.APP_NAME}"


def html_class(theme) -> str:
    return theme.value if theme is not None else ""


def _meta_context(meta: Optional[List[Dict[str, str]]]) -> Dict[str, Any]:
    merged = merge_meta(ROOT_META, meta or [])
    title = next((entry["title"] for entry in merged if "title" in entry), None)
    return {
        "title": title,
        "meta_tags": [entry for entry in merged if "title" not in entry],
        "icon_links": ICON_LINKS,
        "app_description": config.APP_DESCRIPTION,
    }


# PUBLIC_INTERFACE
def render_document(
    request: Request,
    template: str,
    context: Optional[Dict[str, Any]],
    data: RootLoaderData,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
    meta: Optional[List[Dict[str, str]]] = None,
):
    """Render ``template`` inside the full document shell."""
    page = dict(context or {})
    page.update(_meta_context(meta))
    page.update(
        root=data,
        user=data.user,
        theme=data.theme,
        html_class=html_class(data.theme),
        ssr_theme=data.theme is not None,
        env_json=json_for_script(data.ENV),
        dev_mode=config.DEV_MODE,
    )
    return templates.TemplateResponse(request, template, page, status_code=status_code, headers=headers)


# PUBLIC_INTERFACE
def render_error_document(
    request: Request,
    template: str,
    context: Optional[Dict[str, Any]],
    status_code: int,
    title: Optional[str] = None,
):
    """Render inside the reduced error shell. Uses no loader data."""
    page = dict(context or {})
    page.update(_meta_context([{"title": title}] if title else None))
    return templates.TemplateResponse(request, template, page, status_code=status_code)
