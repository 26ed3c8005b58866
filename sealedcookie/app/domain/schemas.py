"""API I/O schemas."""
from pydantic import BaseModel, Field

from .models import DecodeResult, TokenStatus


class LoginIn(BaseModel):
    user_id: str = Field(min_length=1)


class SessionOut(BaseModel):
    user_id: str


class CookieDiagnosticsOut(BaseModel):
    present: bool
    expired: bool
    forged: bool
    status: TokenStatus

    @classmethod
    def from_result(cls, result: DecodeResult, present: bool) -> "CookieDiagnosticsOut":
        return cls(
            present=present,
            expired=result.expired,
            forged=result.forged,
            status=result.status,
        )
