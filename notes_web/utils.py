"""Small helpers shared by routes and templates."""
from typing import Any, Optional

DEFAULT_REDIRECT = "/"


def safe_redirect(to: Any, default_redirect: str = DEFAULT_REDIRECT) -> str:
    """
    Use this whenever the redirect target is user-provided (for example the
    ``redirectTo`` query string on the login page) to avoid open redirects.
    """
    if not to or not isinstance(to, str):
        return default_redirect
    if not to.startswith("/") or to.startswith("//"):
        return default_redirect
    return to


def validate_email(email: Any) -> bool:
    return isinstance(email, str) and len(email) > 3 and "@" in email


def truncate(text: Optional[str], length: int, use_word_boundary: bool = False) -> Optional[str]:
    """Shorten ``text`` so that, including the ``...`` suffix, it fits ``length``."""
    if not text or len(text) <= length:
        return text
    sub = text[: max(length - 3, 0)]
    if use_word_boundary and " " in sub:
        sub = sub[: sub.rindex(" ")]
    return sub + "..."


def wants_json(request) -> bool:
    """True for fetch() submissions from the client-side form wiring."""
    return "application/json" in request.headers.get("accept", "")
