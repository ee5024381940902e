"""Thrown responses.

Loaders and actions short-circuit by raising a ``CaughtResponse``. Redirects
(3xx) are returned to the client as-is; every other status is handed to the
error boundary.
"""
from http import HTTPStatus
from typing import Any, Mapping, Optional


class CaughtResponse(Exception):
    """A non-2xx response raised from a handler."""

    def __init__(
        self,
        status_code: int,
        data: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        self.data = data
        self.headers = dict(headers or {})
        super().__init__(f"{status_code} {self.status_text}")

    @property
    def status_text(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400 and "location" in {k.lower() for k in self.headers}


# PUBLIC_INTERFACE
def redirect(url: str, headers: Optional[Mapping[str, str]] = None, status_code: int = 302) -> CaughtResponse:
    """Build a redirect to raise from a loader or action."""
    merged = dict(headers or {})
    merged["Location"] = url
    return CaughtResponse(status_code, headers=merged)


# PUBLIC_INTERFACE
def not_found(message: str = "Not Found") -> CaughtResponse:
    return CaughtResponse(404, data=message)
