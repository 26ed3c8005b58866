"""Login / logout routes backed by the encrypted session cookie."""
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..deps import session_cookie
from ..domain.schemas import LoginIn, SessionOut
from ..services.encrypted import EncryptedCookie

router = APIRouter()


@router.post("/login", response_model=SessionOut)
def login(payload: LoginIn, response: Response, cookie: EncryptedCookie = Depends(session_cookie)):
    cookie.set(response, payload.user_id)
    return SessionOut(user_id=payload.user_id)


@router.get("/me", response_model=SessionOut)
def whoami(request: Request, cookie: EncryptedCookie = Depends(session_cookie)):
    user_id = cookie.get_if_good(request)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not signed in")
    return SessionOut(user_id=user_id)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(response: Response, cookie: EncryptedCookie = Depends(session_cookie)) -> None:
    cookie.unset(response)
