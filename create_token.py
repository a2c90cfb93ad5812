#!/usr/bin/env python3
"""
Issue an API bearer token for manual testing.

The token is signed with ACCESS_TOKEN_SECRET from the environment (or
``.env``), exactly like tokens from ``POST /jwt``.

Usage:
    python create_token.py --email host@example.com
    python create_token.py --email host@example.com --hours 24
"""

import argparse

from aircnc_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue an AirCNC API token.")
    ap.add_argument("--email", required=True, help="Email claim to embed in the token")
    ap.add_argument("--hours", type=int, default=None, help="Lifetime in hours (default: one hour)")
    args = ap.parse_args()

    expires = args.hours * 3600 if args.hours else None
    print(create_access_token({"email": args.email}, expires_delta=expires))


if __name__ == "__main__":
    main()
