"""Decode results shared between the cookie layers and the API."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenStatus(str, Enum):
    ABSENT = "absent"
    VALID = "valid"
    EXPIRED = "expired"
    FORGED = "forged"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one signed cookie value.

    ``expired`` and ``forged`` are computed independently, so a value can be
    both. ``data`` is whatever sat left of the timestamp, trusted or not; use
    ``good_data`` to read it only when it passed both checks.
    """

    data: Optional[str]
    expired: bool = False
    forged: bool = False

    @property
    def good(self) -> bool:
        return self.data is not None and not self.expired and not self.forged

    @property
    def good_data(self) -> Optional[str]:
        return self.data if self.good else None

    @property
    def status(self) -> TokenStatus:
        # forged wins over expired: a bad signature means the timestamp is untrusted too
        if self.forged:
            return TokenStatus.FORGED
        if self.expired:
            return TokenStatus.EXPIRED
        if self.data is None:
            return TokenStatus.ABSENT
        return TokenStatus.VALID


ABSENT = DecodeResult(data=None)
UNPARSEABLE = DecodeResult(data=None, forged=True)
