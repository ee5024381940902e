JSON = {"Accept": "application/json"}


def test_set_theme_json(client):
    r = client.post("/action/set-theme", data={"theme": "light"}, headers=JSON)
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert "theme=" in r.headers["set-cookie"]
    assert '<html lang="en" class="light">' in client.get("/").text


def test_set_theme_rejects_unknown_value(client):
    r = client.post("/action/set-theme", data={"theme": "purple"}, headers=JSON)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "theme value of purple is not a valid theme"}
    assert "set-cookie" not in r.headers


def test_set_theme_form_post_redirects_back(client):
    r = client.post("/action/set-theme", data={"theme": "dark", "redirectTo": "/login"}, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"


def test_set_theme_ignores_unsafe_redirect(client):
    r = client.post("/action/set-theme", data={"theme": "dark", "redirectTo": "https://evil.example"}, follow_redirects=False)
    assert r.headers["location"] == "/"


def test_theme_survives_login(client, user, user_data):
    client.post("/action/set-theme", data={"theme": "dark"}, headers=JSON)
    client.post("/login", data=user_data, follow_redirects=False)
    assert '<html lang="en" class="dark">' in client.get("/notes").text


def test_theme_demo_renders_widgets(logged_in_client):
    r = logged_in_client.get("/theme")
    assert r.status_code == 200
    for intent in ("primary", "secondary", "success", "info", "warning", "danger"):
        assert f"This is a {intent} alert" in r.text
    assert "Secondary - Gradient" in r.text
    assert "This is a card" in r.text
    assert r.text.count("disabled") >= 8
