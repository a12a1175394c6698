#!/usr/bin/env python3
"""
Print a bearer token for local testing.

Usage:
    python scripts/create_token.py --user-id 1 --minutes 1440
"""

import argparse
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.security import create_access_token


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a PlanIT access token")
    parser.add_argument("--user-id", type=int, required=True, help="Token owner")
    parser.add_argument(
        "--minutes", type=int, default=None, help="Lifetime (defaults to settings)"
    )
    args = parser.parse_args(argv)

    if args.user_id <= 0:
        parser.error("--user-id must be a positive integer")

    print(create_access_token(args.user_id, expires_minutes=args.minutes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
