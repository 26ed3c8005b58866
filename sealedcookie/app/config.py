"""Environment driven settings and construction of the cookie stack."""
import os
from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field

from .domain.errors import ConfigurationError
from .infra.clock import Clock
from .services.cookies import CookieTransport
from .services.encrypted import EncryptedCookie
from .services.signed import SignedCookie

ENV_PREFIX = "SEALEDCOOKIE_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


def _env_bool(name: str, default: str) -> bool:
    return (_env(name, default) or default).lower() in {"1", "true", "yes", "on"}


class CookieSettings(BaseModel):
    name: str = "session"
    domain: Optional[str] = None
    secure: bool = True
    valid_for_seconds: int = Field(default=3600, gt=0)
    max_age_seconds: Optional[int] = Field(default=None, ge=0)
    aes_key: Optional[str] = None
    hmac_secret: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CookieSettings":
        max_age = _env("MAX_AGE_SECONDS")
        try:
            return cls(
                name=_env("NAME", "session"),
                domain=_env("DOMAIN") or None,
                secure=_env_bool("SECURE", "true"),
                valid_for_seconds=int(_env("VALID_FOR_SECONDS", "3600")),
                max_age_seconds=int(max_age) if max_age else None,
                aes_key=_env("AES_KEY"),
                hmac_secret=_env("HMAC_SECRET"),
            )
        except ValueError as exc:
            raise ConfigurationError(f"invalid {ENV_PREFIX}* setting: {exc}") from exc

    @property
    def valid_for(self) -> timedelta:
        return timedelta(seconds=self.valid_for_seconds)

    @property
    def max_age(self) -> Optional[timedelta]:
        if self.max_age_seconds is None:
            return None
        return timedelta(seconds=self.max_age_seconds)


def build_session_cookie(settings: CookieSettings, clock: Optional[Clock] = None) -> EncryptedCookie:
    """Assemble transport -> signer -> encryption; raises ConfigurationError on bad keys."""
    if not settings.aes_key or not settings.hmac_secret:
        raise ConfigurationError(f"{ENV_PREFIX}AES_KEY and {ENV_PREFIX}HMAC_SECRET must both be set")
    transport = CookieTransport(
        settings.name,
        max_age=settings.max_age,
        domain=settings.domain,
        secure=settings.secure,
    )
    signed = SignedCookie(transport, settings.hmac_secret, settings.valid_for, clock=clock)
    return EncryptedCookie(settings.aes_key, signed)
