import pytest

from api.main import WELCOME_TEXT


def test_welcome_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Welcome To Cloud Native Go!" == WELCOME_TEXT
    assert "access-control-allow-origin" not in resp.headers


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_echo_returns_message(client):
    resp = client.get("/api/echo", params={"message": "hello"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "text/plain"
    assert resp.text == "hello"


def test_echo_uses_first_value(client):
    resp = client.get("/api/echo?message=first&message=second")
    assert resp.text == "first"


def test_echo_empty_message(client):
    resp = client.get("/api/echo?message=")
    assert resp.status_code == 200
    assert resp.text == ""


def test_echo_without_message(client):
    resp = client.get("/api/echo")
    assert resp.status_code == 400
    assert resp.text == "Missing message query parameter."


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PURGE"])
def test_echo_accepts_any_method(client, method):
    resp = client.request(method, "/api/echo?message=hi")
    assert resp.status_code == 200
    assert resp.text == "hi"


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/anything"),
        ("GET", "/api/echo/extra"),
        ("POST", "/"),
        ("DELETE", "/some/nested/path"),
        ("PURGE", "/"),
    ],
)
def test_unmatched_requests_get_welcome_page(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 200
    assert resp.text == WELCOME_TEXT


def test_health_still_served_before_welcome(client):
    assert client.get("/health").json() == {"status": "healthy"}
