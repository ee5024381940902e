"""
Error and not-found boundary.

Everything that escapes a loader or action ends up here. ``classify`` turns
the exception into exactly one outcome and ``render_boundary`` renders that
outcome once, inside the reduced error document:

- a caught 401 renders the access-denied page,
- a caught 404 renders the not-found page,
- any other caught status, and any other exception, renders the generic
  error page with the response data/status text or the exception message.

Nothing here re-raises.
"""
from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional, Union

from fastapi import Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_web import config
from notes_web.document import render_error_document
from notes_web.errors import CaughtResponse
from notes_web.logging import get_logger

logger = get_logger("boundary")

ACCESS_DENIED_MESSAGE = "Oops! Looks like you tried to visit a page that you do not have access to."
NOT_FOUND_MESSAGE = "Oops! Looks like you tried to visit a page that does not exist."
GENERIC_MESSAGE = "Oops. Something went wrong. We're looking into it."


def _phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


@dataclass(frozen=True)
class AccessDenied:
    status_code: int = 401
    status_text: str = "Unauthorized"
    message: str = ACCESS_DENIED_MESSAGE


@dataclass(frozen=True)
class NotFound:
    status_code: int = 404
    status_text: str = "Not Found"
    message: str = NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class Unexpected:
    message: str
    status_code: int = 500
    caught: bool = False


BoundaryOutcome = Union[AccessDenied, NotFound, Unexpected]


# PUBLIC_INTERFACE
def classify(exc: BaseException) -> BoundaryOutcome:
    """Map an exception escaping a handler to a single boundary outcome."""
    if isinstance(exc, CaughtResponse):
        status_code, status_text, data = exc.status_code, exc.status_text, exc.data
    elif isinstance(exc, StarletteHTTPException):
        status_code = exc.status_code
        status_text = _phrase(status_code)
        data = exc.detail if exc.detail != status_text else None
    else:
        return Unexpected(message=str(exc) or exc.__class__.__name__)

    if status_code == 401:
        return AccessDenied(status_text=status_text or "Unauthorized")
    if status_code == 404:
        return NotFound(status_text=status_text or "Not Found")
    message = data if isinstance(data, str) and data else status_text
    return Unexpected(message=message or str(status_code), status_code=status_code, caught=True)


# PUBLIC_INTERFACE
def render_boundary(request: Request, outcome: BoundaryOutcome, exc: Optional[BaseException] = None) -> Response:
    """Render ``outcome`` in the error document."""
    if isinstance(outcome, Unexpected):
        if outcome.caught:
            logger.warning("Caught %s on %s %s: %s", outcome.status_code, request.method, request.url.path, outcome.message)
        else:
            logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return render_error_document(
            request,
            "errors/error.html",
            {"message": outcome.message, "generic_message": GENERIC_MESSAGE},
            status_code=outcome.status_code,
            title=f"Error! - {config.APP_NAME}",
        )
    return render_error_document(
        request,
        "errors/caught.html",
        {"outcome": outcome},
        status_code=outcome.status_code,
        title=f"{outcome.status_code} {outcome.status_text}",
    )


# PUBLIC_INTERFACE
async def caught_response_handler(request: Request, exc: CaughtResponse) -> Response:
    """Redirects pass through untouched; other thrown responses hit the boundary."""
    if exc.is_redirect:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return render_boundary(request, classify(exc), exc)


# PUBLIC_INTERFACE
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    return render_boundary(request, classify(exc), exc)


class ErrorBoundaryMiddleware:
    """Renders the boundary for exceptions no other handler took care of."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            request = Request(scope)
            response = render_boundary(request, classify(exc), exc)
            await response(scope, receive, send)
