import json

from notes_web.forms import (
    LoginField,
    NoteField,
    NoteForm,
    client_schema,
    parse_join_form,
    parse_login_form,
    parse_note_form,
)


def test_valid_note_form_is_stripped():
    result = parse_note_form({"title": "  Hello ", "body": " world "})
    assert result.ok
    assert result.data == NoteForm(title="Hello", body="world")
    assert result.errors == {}


def test_missing_fields_are_reported_per_field():
    result = parse_note_form({})
    assert not result.ok
    assert result.errors == {
        NoteField.TITLE: ["Title is required."],
        NoteField.BODY: ["Body is required."],
    }
    assert result.error_map() == {"title": ["Title is required."], "body": ["Body is required."]}


def test_first_invalid_follows_declaration_order():
    assert parse_note_form({"title": "ok"}).first_invalid(NoteField) is NoteField.BODY
    assert parse_note_form({}).first_invalid(NoteField) is NoteField.TITLE
    assert parse_note_form({"title": "a", "body": "b"}).first_invalid(NoteField) is None


def test_title_length_limit():
    result = parse_note_form({"title": "x" * 129, "body": "b"})
    assert result.error_map() == {"title": ["Title must be at most 128 characters."]}


def test_non_text_values_are_treated_as_missing():
    result = parse_note_form({"title": object(), "body": "b"})
    assert result.error_map() == {"title": ["Title is required."]}


def test_unknown_fields_are_ignored():
    assert parse_note_form({"title": "a", "body": "b", "userId": "someone-else"}).ok


def test_login_form_validates_email_shape():
    result = parse_login_form({"email": "nope", "password": "pw"})
    assert result.errors == {LoginField.EMAIL: ["Email is invalid."]}


def test_login_form_lowercases_email():
    result = parse_login_form({"email": "Alice@Example.com", "password": "pw"})
    assert result.data.email == "alice@example.com"


def test_join_form_requires_longer_password():
    result = parse_join_form({"email": "a@b.io", "password": "short"})
    assert result.error_map() == {"password": ["Password must be at least 8 characters."]}


def test_client_schema_matches_server_constraints():
    schema = json.loads(client_schema(NoteForm))
    assert list(schema["properties"]) == ["title", "body"]
    assert schema["properties"]["title"]["maxLength"] == 128
    assert schema["properties"]["title"]["minLength"] == 1
    assert set(schema["required"]) == {"title", "body"}
