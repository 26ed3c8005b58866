"""Cookie diagnostics; reports flags only, never the payload."""
from fastapi import APIRouter, Depends, Request

from ..deps import signed_session_cookie
from ..domain.schemas import CookieDiagnosticsOut
from ..services.signed import SignedCookie

router = APIRouter()


@router.get("/cookie", response_model=CookieDiagnosticsOut)
def cookie_diagnostics(request: Request, cookie: SignedCookie = Depends(signed_session_cookie)):
    present = cookie.transport.get(request) is not None
    return CookieDiagnosticsOut.from_result(cookie.result(request), present=present)
