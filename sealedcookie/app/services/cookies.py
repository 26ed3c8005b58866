"""Plain named cookie read/write, always at path ``/``."""
from datetime import timedelta
from typing import Optional

from ..infra.http import CookieRequest, CookieResponse

COOKIE_PATH = "/"


class CookieTransport:
    """One named cookie, shared by every request the process serves.

    ``max_age=None`` makes a session cookie.
    """

    def __init__(
        self,
        name: str,
        max_age: Optional[timedelta] = None,
        domain: Optional[str] = None,
        secure: bool = False,
    ) -> None:
        self.name = name
        self.max_age = int(max_age.total_seconds()) if max_age is not None else None
        self.domain = domain
        self.secure = secure

    def get(self, req: CookieRequest) -> Optional[str]:
        return req.cookies.get(self.name)

    def set(self, res: CookieResponse, value: str) -> None:
        self._write(res, value, self.max_age)

    def unset(self, res: CookieResponse) -> None:
        self._write(res, "", 0)

    def _write(self, res: CookieResponse, value: str, max_age: Optional[int]) -> None:
        res.set_cookie(
            key=self.name,
            value=value,
            max_age=max_age,
            path=COOKIE_PATH,
            domain=self.domain,
            secure=self.secure,
        )
