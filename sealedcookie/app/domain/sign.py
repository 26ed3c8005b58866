"""HMAC signing helpers for the signed cookie layer."""
import base64
import binascii
import os
from typing import Callable, Optional, Tuple

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from .errors import ConfigurationError

KEY_BYTES = 32

MacFunction = Callable[[bytes, bytes], bytes]


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    mac = hmac.HMAC(key, hashes.SHA256())
    mac.update(data)
    return mac.finalize()


def sign_to_base64(secret: bytes, time: str, data: str, mac: MacFunction = hmac_sha256) -> str:
    """Sign ``time`` + ``data`` with a subkey derived from ``secret`` and ``time``.

    The master secret only ever keys the HMAC over the expiration time; the
    attacker-influenced payload is authenticated with the derived subkey.
    """
    subkey = mac(secret, time.encode("utf-8"))
    signature = mac(subkey, (time + data).encode("utf-8"))
    return base64.b64encode(signature).decode("ascii")


def signatures_match(supplied: str, expected: str) -> bool:
    return constant_time.bytes_eq(supplied.encode("utf-8"), expected.encode("utf-8"))


def decode_key(value: Optional[str], name: str, length: Optional[int] = None) -> bytes:
    """Strictly decode base64 key material, failing with ConfigurationError."""
    if not value:
        raise ConfigurationError(f"{name} is required")
    try:
        key = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError(f"{name} is not valid base64") from exc
    if length is not None and len(key) != length:
        raise ConfigurationError(f"{name} must contain a {length * 8} bit key, got {len(key) * 8} bits")
    if not key:
        raise ConfigurationError(f"{name} must not be empty")
    return key


def generate_keys() -> Tuple[str, str]:
    """Return independent base64 encoded (AES key, HMAC secret)."""
    return (
        base64.b64encode(os.urandom(KEY_BYTES)).decode("ascii"),
        base64.b64encode(os.urandom(KEY_BYTES)).decode("ascii"),
    )
