"""
Form schemas and validation.

Submitted form data is validated with pydantic models. Validation never
raises: ``parse_*`` functions return a ``FormResult`` that is either ok (with
the parsed model) or failed (with messages per known field). The same
``NoteForm`` schema is serialized to JSON schema for the browser so client
and server validate against identical constraints.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from notes_web.utils import validate_email

M = TypeVar("M", bound=BaseModel)


class NoteField(str, Enum):
    """Fields of the new-note form, in declaration (focus) order."""
    TITLE = "title"
    BODY = "body"


class LoginField(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"


class NoteForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=128, title="Title")
    body: str = Field(..., min_length=1, title="Body")


class LoginForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., title="Email")
    password: str = Field(..., min_length=1, title="Password")

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not validate_email(value):
            raise ValueError("Email is invalid.")
        return value.lower()


class JoinForm(LoginForm):
    password: str = Field(..., min_length=8, title="Password")


@dataclass
class FormResult(Generic[M]):
    """Either ``ok`` with ``data`` or failed with ``errors`` keyed by field."""

    data: Optional[M] = None
    errors: Dict[Enum, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.errors

    @classmethod
    def success(cls, data: M) -> "FormResult[M]":
        return cls(data=data)

    @classmethod
    def failed(cls, errors: Dict[Enum, List[str]]) -> "FormResult[M]":
        return cls(errors=errors)

    def first_invalid(self, fields: Type[Enum]) -> Optional[Enum]:
        """First field in declaration order that carries an error."""
        for name in fields:
            if self.errors.get(name):
                return name
        return None

    def error_map(self) -> Dict[str, List[str]]:
        return {name.value: messages for name, messages in self.errors.items()}


def _message(error: Dict[str, Any], label: str) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "missing" or (kind == "string_too_short" and ctx.get("min_length") == 1):
        return f"{label} is required."
    if kind == "string_too_short":
        return f"{label} must be at least {ctx['min_length']} characters."
    if kind == "string_too_long":
        return f"{label} must be at most {ctx['max_length']} characters."
    if kind == "string_type":
        return f"{label} must be text."
    if kind == "value_error":
        return str(ctx.get("error", error["msg"]))
    return error["msg"]


# PUBLIC_INTERFACE
def parse_form(model: Type[M], fields: Type[Enum], form: Mapping[str, Any]) -> FormResult[M]:
    """Validate the known ``fields`` of ``form`` against ``model``."""
    raw = {}
    for name in fields:
        value = form.get(name.value)
        if isinstance(value, str):
            raw[name.value] = value
    try:
        return FormResult.success(model.model_validate(raw))
    except ValidationError as exc:
        errors: Dict[Enum, List[str]] = {}
        for error in exc.errors():
            if not error["loc"]:
                continue
            name = fields(error["loc"][0])
            label = model.model_fields[name.value].title or name.value
            errors.setdefault(name, []).append(_message(error, label))
        return FormResult.failed(errors)


# PUBLIC_INTERFACE
def parse_note_form(form: Mapping[str, Any]) -> FormResult[NoteForm]:
    return parse_form(NoteForm, NoteField, form)


def parse_login_form(form: Mapping[str, Any]) -> FormResult[LoginForm]:
    return parse_form(LoginForm, LoginField, form)


def parse_join_form(form: Mapping[str, Any]) -> FormResult[JoinForm]:
    return parse_form(JoinForm, LoginField, form)


def client_schema(model: Type[BaseModel]) -> str:
    """JSON schema handed to the browser-side validator."""
    return json.dumps(model.model_json_schema())
