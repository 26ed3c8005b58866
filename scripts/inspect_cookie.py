#!/usr/bin/env python3
"""
Check a signed cookie value offline against the HMAC secret.

Prints the decode result as JSON and exits 1 unless the value is good.

Usage:
    python scripts/inspect_cookie.py --value '<data>|<millis>|<signature>'
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import timedelta

from sealedcookie.app.domain.errors import ConfigurationError
from sealedcookie.app.services.cookies import CookieTransport
from sealedcookie.app.services.signed import SignedCookie, describe


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify a signed cookie value.")
    parser.add_argument("--value", required=True, help="Raw cookie value")
    parser.add_argument(
        "--secret",
        default=os.getenv("SEALEDCOOKIE_HMAC_SECRET"),
        help="Base64 HMAC secret (defaults to SEALEDCOOKIE_HMAC_SECRET)",
    )
    parser.add_argument(
        "--name",
        default=os.getenv("SEALEDCOOKIE_NAME", "session"),
        help="Cookie name, used in log messages only",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    try:
        # valid_for only matters when signing; decoding reads the embedded time
        signer = SignedCookie(CookieTransport(args.name), args.secret, timedelta(0))
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    result = signer.decode(args.value)
    print(json.dumps(describe(result), ensure_ascii=False, indent=2))
    return 0 if result.good else 1


if __name__ == "__main__":
    raise SystemExit(main())
