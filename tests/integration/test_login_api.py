from fastapi.testclient import TestClient

from apps.login.main import create_app
from lib.config.login_loader import LoginConfig
from lib.contracts.credentials import Credentials

client = TestClient(create_app(LoginConfig()))


def test_get_is_rejected_with_plain_text():
    response = client.get("/login")
    assert response.status_code == 405
    assert response.text == "Method Not Allowed"
    assert response.headers["content-type"].startswith("text/plain")


def test_put_is_rejected():
    response = client.put("/login", json={"username": "admin", "password": "1234"})
    assert response.status_code == 405


def test_empty_object_is_bad_request():
    response = client.post("/login", json={})
    assert response.status_code == 400
    assert response.json() == {"message": "Missing username or password"}


def test_missing_password_is_bad_request():
    response = client.post("/login", json={"username": "admin"})
    assert response.status_code == 400
    assert response.json() == {"message": "Missing username or password"}


def test_valid_credentials():
    response = client.post("/login", json={"username": "admin", "password": "1234"})
    assert response.status_code == 200
    assert response.json() == {"message": "Login successful", "user": {"username": "admin"}}


def test_wrong_password():
    response = client.post("/login", json={"username": "admin", "password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_malformed_body_is_bad_request():
    response = client.post(
        "/login",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Missing username or password"}


def test_array_body_is_bad_request():
    response = client.post("/login", json=["admin", "1234"])
    assert response.status_code == 400


def test_custom_checker_and_route():
    class AllowGuest:
        def verify(self, credentials: Credentials) -> bool:
            return credentials.username == "guest"

    app = create_app(LoginConfig(route="/auth/login"), checker=AllowGuest())
    local = TestClient(app)

    ok = local.post("/auth/login", json={"username": "guest", "password": "anything"})
    assert ok.status_code == 200
    assert ok.json()["user"] == {"username": "guest"}

    denied = local.post("/auth/login", json={"username": "admin", "password": "1234"})
    assert denied.status_code == 401
    assert local.post("/login", json={}).status_code == 404


def test_config_is_exposed_on_app_state():
    app = create_app(LoginConfig(max_instances=3))
    assert app.state.config.max_instances == 3


def test_lone_surrogate_username_is_rejected_not_crashed():
    local = TestClient(create_app(LoginConfig()), raise_server_exceptions=False)
    response = local.post(
        "/login",
        content=b'{"username": "\\ud800", "password": "x"}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_head_and_trace_get_plain_text_405():
    assert client.head("/login").status_code == 405
    response = client.request("TRACE", "/login")
    assert response.status_code == 405
    assert response.text == "Method Not Allowed"
