"""Dependency injection utilities."""
from fastapi import Request

from .services.encrypted import EncryptedCookie
from .services.signed import SignedCookie


def session_cookie(request: Request) -> EncryptedCookie:
    """The process-wide encrypted session cookie built at startup."""
    return request.app.state.session_cookie


def signed_session_cookie(request: Request) -> SignedCookie:
    return session_cookie(request).delegate
