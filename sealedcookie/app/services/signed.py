"""Expiration and HMAC validation for cookie values (e.g. for auth/SSO).

Wire format::

    <data>|<expiration epoch millis>|<base64 signature>

The value is split on the two right-most ``|`` so ``data`` may contain ``|``.
The signature is the double HMAC from ``domain.sign.sign_to_base64``, based on
the secure cookie protocol of Liu, Kovacs, Huang and Gouda.

A ``SignedCookie`` is built once and reused across requests. Decode results
are memoized per request on the request's state, keyed by ``cache_key``.
"""
import logging
from datetime import timedelta
from typing import Any, Optional
from uuid import uuid4

from ..domain.models import ABSENT, UNPARSEABLE, DecodeResult
from ..domain.sign import MacFunction, decode_key, hmac_sha256, sign_to_base64, signatures_match
from ..infra.clock import Clock, SystemClock, to_epoch_millis
from ..infra.http import CookieRequest, CookieResponse, request_cache
from .cookies import CookieTransport

logger = logging.getLogger(__name__)

SEPARATOR = "|"


class SignedCookie:
    def __init__(
        self,
        transport: CookieTransport,
        secret: str,
        valid_for: timedelta,
        clock: Optional[Clock] = None,
        mac: MacFunction = hmac_sha256,
        cache_key: Optional[str] = None,
    ) -> None:
        self.transport = transport
        self.secret = decode_key(secret, "HMAC secret")
        self.valid_for = valid_for
        self.clock = clock or SystemClock()
        self.mac = mac
        self.cache_key = cache_key or f"signed-cookie:{transport.name}:{uuid4().hex}"

    def get(self, req: CookieRequest) -> Optional[str]:
        """Return the data part of the cookie **even if it is expired or forged**."""
        return self.result(req).data

    def get_if_good(self, req: CookieRequest) -> Optional[str]:
        return self.result(req).good_data

    def is_expired(self, req: CookieRequest) -> bool:
        return self.result(req).expired

    def is_forged(self, req: CookieRequest) -> bool:
        return self.result(req).forged

    def set(self, res: CookieResponse, value: str) -> None:
        """Write ``value`` with its expiration time and HMAC appended."""
        time = str(to_epoch_millis(self.clock.now() + self.valid_for))
        signature = self._sign(time, value)
        self.transport.set(res, SEPARATOR.join((value, time, signature)))

    def unset(self, res: CookieResponse) -> None:
        self.transport.unset(res)

    def result(self, req: CookieRequest) -> DecodeResult:
        cache = request_cache(req)
        if cache is None:
            return self.decode(self.transport.get(req))
        result = cache.get(self.cache_key)
        if result is None:
            result = self.decode(self.transport.get(req))
            cache[self.cache_key] = result
        return result

    def decode(self, raw: Optional[str]) -> DecodeResult:
        """Classify a raw cookie value; never raises on bad input."""
        if raw is None:
            return ABSENT

        data, sep_time, rest = raw.rpartition(SEPARATOR)
        data, sep_data, time = data.rpartition(SEPARATOR)
        if not sep_time or not sep_data:
            logger.debug("cookie %s has no timestamp/signature fields", self.transport.name)
            return UNPARSEABLE

        expired = self._has_passed(time)
        forged = not signatures_match(rest, self._sign(time, data))
        if forged:
            logger.debug("cookie %s failed signature check", self.transport.name)
        return DecodeResult(data=data, expired=expired, forged=forged)

    def _sign(self, time: str, data: str) -> str:
        return sign_to_base64(self.secret, time, data, mac=self.mac)

    def _has_passed(self, time: str) -> bool:
        try:
            expires_at = int(time)
        except ValueError:
            # an unreadable expiration is never in the future
            return True
        return to_epoch_millis(self.clock.now()) >= expires_at


def describe(result: DecodeResult) -> dict[str, Any]:
    return {
        "data": result.data,
        "expired": result.expired,
        "forged": result.forged,
        "status": result.status.value,
    }
