#!/usr/bin/env python3
"""
Print a fresh AES key and HMAC secret for sealedcookie.

Usage:
    python scripts/keygen.py
"""
from __future__ import annotations

from sealedcookie.app.domain.sign import generate_keys


def main() -> int:
    aes_key, hmac_secret = generate_keys()
    print(f"AES 256 bit key: {aes_key}")
    print(f"HMAC-SHA256 256 bit key: {hmac_secret}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
