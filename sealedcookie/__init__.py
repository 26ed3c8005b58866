"""
sealedcookie: stateless, tamper-evident and optionally encrypted tokens
carried in an HTTP cookie.

Three layers, each wrapping the previous one:

- ``CookieTransport`` reads and writes one named cookie.
- ``SignedCookie`` appends an expiration time and a double HMAC.
- ``EncryptedCookie`` AES-256-CBC encrypts the payload before signing.
"""

__all__ = [
    "ConfigurationError",
    "CookieTransport",
    "DecodeResult",
    "EncryptedCookie",
    "SignedCookie",
    "TokenStatus",
]

from .app.domain.errors import ConfigurationError
from .app.domain.models import DecodeResult, TokenStatus
from .app.services.cookies import CookieTransport
from .app.services.encrypted import EncryptedCookie
from .app.services.signed import SignedCookie

__version__ = "0.1.0"
