from datetime import timedelta

from fastapi import Request, Response

from sealedcookie.app.services.cookies import CookieTransport


def _request(cookie_header: bytes | None = None) -> Request:
    headers = [(b"cookie", cookie_header)] if cookie_header else []
    return Request({"type": "http", "headers": headers})


def _set_cookie_header(response: Response) -> str:
    return response.headers["set-cookie"]


def test_get_returns_named_cookie():
    transport = CookieTransport("auth")
    assert transport.get(_request(b"other=1; auth=abc")) == "abc"


def test_get_returns_none_when_missing():
    transport = CookieTransport("auth")
    assert transport.get(_request(b"other=1")) is None
    assert transport.get(_request()) is None


def test_set_writes_root_path_domain_and_secure():
    transport = CookieTransport("auth", max_age=timedelta(minutes=1), domain="example.com", secure=True)
    response = Response()
    transport.set(response, "abc")

    header = _set_cookie_header(response)
    assert header.startswith("auth=abc")
    assert "Max-Age=60" in header
    assert "Path=/" in header
    assert "Domain=example.com" in header
    assert "Secure" in header


def test_session_cookie_has_no_max_age():
    transport = CookieTransport("auth")
    response = Response()
    transport.set(response, "abc")

    header = _set_cookie_header(response)
    assert "Max-Age" not in header
    assert "Secure" not in header


def test_unset_sends_max_age_zero():
    transport = CookieTransport("auth", max_age=timedelta(hours=1))
    response = Response()
    transport.unset(response)

    header = _set_cookie_header(response)
    assert "Max-Age=0" in header
    assert "Path=/" in header
