from notes_web import config
from notes_web.document import json_for_script, merge_meta
from notes_web.sessions import Session
from notes_web.theme import theme_storage

JSON = {"Accept": "application/json"}


def test_stored_dark_theme_is_rendered_on_the_server(client):
    r = client.post("/action/set-theme", data={"theme": "dark"}, headers=JSON)
    assert r.status_code == 200

    page = client.get("/")
    assert '<html lang="en" class="dark">' in page.text
    # the client-side detection script only ships when the server does not know the theme
    assert "prefers-color-scheme" not in page.text
    assert 'content="dark light"' in page.text


def test_unknown_theme_ships_detection_script(client):
    page = client.get("/")
    assert '<html lang="en" class="">' in page.text
    assert "prefers-color-scheme" in page.text
    head, _, _ = page.text.partition("</head>")
    assert head.index("prefers-color-scheme") < head.index("app.css")


def test_tampered_theme_cookie_is_ignored(client):
    client.cookies.set(config.THEME_COOKIE_NAME, "not-a-valid-token")
    page = client.get("/")
    assert '<html lang="en" class="">' in page.text


def test_theme_cookie_with_unknown_value_is_ignored(client):
    client.cookies.set(config.THEME_COOKIE_NAME, theme_storage.encode(Session({"theme": "purple"})))
    page = client.get("/")
    assert '<html lang="en" class="">' in page.text


def test_window_env_only_exposes_whitelisted_flags(client, monkeypatch):
    monkeypatch.setenv("RECAPTCHA_ENABLED", "true")
    monkeypatch.setenv("RECAPTCHA_SITE_KEY", "site-key")
    monkeypatch.setenv("RECAPTCHA_SECRET_KEY", "do-not-leak")

    page = client.get("/")
    assert 'window.ENV = {"RECAPTCHA_ENABLED": true, "RECAPTCHA_SITE_KEY": "site-key"}' in page.text
    assert "do-not-leak" not in page.text
    assert config.SESSION_SECRET not in page.text


def test_user_is_part_of_the_page_when_logged_in(logged_in_client, user_data):
    page = logged_in_client.get("/")
    assert user_data["email"] in page.text
    assert "Logout" in page.text


def test_live_reload_only_in_dev_mode(client, monkeypatch):
    assert "live-reload.js" not in client.get("/").text
    monkeypatch.setattr(config, "DEV_MODE", True)
    assert "live-reload.js" in client.get("/").text


def test_json_for_script_cannot_close_the_script_element():
    rendered = json_for_script({"x": "</script><script>alert(1)</script>"})
    assert "</script>" not in rendered
    assert "\\u003c/script\\u003e" in rendered


def test_merge_meta_child_overrides_title_and_keeps_others():
    parent = [{"title": "Root"}, {"name": "robots", "content": "index"}]
    child = [{"title": "Child"}, {"property": "og:title", "content": "Child"}]
    merged = merge_meta(parent, child)
    assert {"title": "Root"} not in merged
    assert {"title": "Child"} in merged
    assert {"name": "robots", "content": "index"} in merged
    assert len(merged) == 3
