import pytest
from fastapi.testclient import TestClient

from app.auth import resolve_redirect
from app.main import create_app
from app.settings import Settings

app = create_app(Settings(openai_api_key="test-key"))


@pytest.mark.parametrize(
    "path, has_session, expected",
    [
        ("/dashboard", False, "/login"),
        ("/", False, "/login"),
        ("/login", False, None),
        ("/signup", False, None),
        ("/verify-email", False, None),
        ("/login", True, "/dashboard"),
        ("/signup/confirm", True, "/dashboard"),
        ("/", True, "/dashboard"),
        ("/dashboard", True, None),
        ("/verify-email", True, None),
    ],
)
def test_resolve_redirect(path, has_session, expected):
    assert resolve_redirect(path, has_session) == expected


def test_anonymous_page_request_redirects_to_login():
    client = TestClient(app, follow_redirects=False)
    r = client.get("/dashboard?tab=drafts")
    assert r.status_code == 307
    assert r.headers["location"] == "http://testserver/login"


def test_signed_in_user_leaves_auth_pages():
    client = TestClient(app, follow_redirects=False, cookies={"sb-access-token": "token"})
    r = client.get("/login")
    assert r.status_code == 307
    assert r.headers["location"] == "http://testserver/dashboard"


def test_pass_through_is_not_redirected():
    client = TestClient(app, follow_redirects=False)
    r = client.get("/login")
    assert r.status_code == 404


def test_api_and_health_are_exempt():
    client = TestClient(app, follow_redirects=False)
    assert client.get("/health").status_code == 200
    r = client.post("/api/summarize", json={"content": ""})
    assert r.status_code == 400
