"""Duck-typed HTTP collaborators and the request-scoped decode cache.

Any request exposing a ``cookies`` mapping and any response exposing
Starlette's ``set_cookie`` signature can carry a cookie. Starlette's
``Request.state`` is the per-request store the decode cache lives in.
"""
from typing import Any, Mapping, MutableMapping, Optional, Protocol

CACHE_ATTRIBUTE = "sealedcookie_results"


class CookieRequest(Protocol):
    @property
    def cookies(self) -> Mapping[str, str]: ...


class CookieResponse(Protocol):
    def set_cookie(
        self,
        key: str,
        value: str = "",
        max_age: Optional[int] = None,
        expires: Any = None,
        path: Optional[str] = "/",
        domain: Optional[str] = None,
        secure: bool = False,
        httponly: bool = False,
        samesite: Optional[str] = "lax",
    ) -> None: ...


def request_cache(req: Any) -> Optional[MutableMapping[str, Any]]:
    """Return the decode cache bound to ``req``, or None if it has no state."""
    state = getattr(req, "state", None)
    if state is None:
        return None
    cache = getattr(state, CACHE_ATTRIBUTE, None)
    if cache is None:
        cache = {}
        setattr(state, CACHE_ATTRIBUTE, cache)
    return cache
