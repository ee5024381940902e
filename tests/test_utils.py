import pytest

from notes_web.utils import safe_redirect, truncate, validate_email


@pytest.mark.parametrize(
    "target, expected",
    [
        ("/notes", "/notes"),
        ("/notes?x=1", "/notes?x=1"),
        ("//evil.example", "/"),
        ("https://evil.example", "/"),
        ("notes", "/"),
        ("", "/"),
        (None, "/"),
        (42, "/"),
    ],
)
def test_safe_redirect(target, expected):
    assert safe_redirect(target) == expected


def test_safe_redirect_custom_default():
    assert safe_redirect(None, "/notes") == "/notes"


@pytest.mark.parametrize("value, ok", [("a@b.c", True), ("a@b", False), ("abc", False), (None, False)])
def test_validate_email(value, ok):
    assert validate_email(value) is ok


def test_truncate_keeps_short_text():
    assert truncate("short", 10) == "short"
    assert truncate(None, 10) is None


def test_truncate_respects_length():
    out = truncate("abcdefghijklmnop", 10)
    assert out == "abcdefg..."
    assert len(out) == 10


def test_truncate_on_word_boundary():
    assert truncate("the quick brown fox", 14, True) == "the quick..."
