#!/usr/bin/env python3
# portfolio_api/manage_codes.py
"""
Career Highlights - access code manager.

Usage:
    manage-codes add "Jane Smith" 7d        # 7-day code
    manage-codes add "Conference Lead" 48h  # 48-hour code
    manage-codes list                       # show all codes
    manage-codes revoke ABC123              # remove a code
    manage-codes cleanup                    # remove expired codes
    manage-codes export                     # JSON for CAREER_CODES

Codes are kept in a local JSON file (CAREER_CODES_FILE, keep it out of git).
After changes, copy the export output into the CAREER_CODES setting of the
deployed service.
"""
from __future__ import annotations

import argparse
import json
import shlex
import sys
from pathlib import Path
from typing import Optional, Sequence

from portfolio_api.core.config import settings
from portfolio_api.services.authn.codes import is_expired
from portfolio_api.services.repo.access_codes import (
    CodeNotFound,
    CodeStoreError,
    DurationError,
    add_code,
    cleanup_expired,
    export_codes,
    load_codes,
    revoke_code,
)
from portfolio_api.utils.dt import parse_timestamp

USAGE = """
  Career Highlights - Access Code Manager

  Commands:
    add "Name" <duration>   Create a new code (e.g., 7d, 48h, 30d)
    list                    Show all codes and their status
    revoke <CODE>           Remove a specific code
    cleanup                 Remove all expired codes
    export                  Output JSON for the CAREER_CODES setting

  Examples:
    manage-codes add "Jane Smith" 7d
    manage-codes add "Recruiter Inc" 30d
    manage-codes list
    manage-codes export
"""


def _fmt(ts: str) -> str:
    dt = parse_timestamp(ts)
    return dt.strftime("%Y-%m-%d %H:%M UTC") if dt else ts


def cmd_add(path: Path, args) -> int:
    entry = add_code(path, args.name, args.duration)
    link = f"{settings.site_url.rstrip('/')}/career-highlights.html?code={entry.code}"
    print("\n  Code created successfully:\n")
    print(f"  Code:     {entry.code}")
    print(f"  For:      {entry.name}")
    print(f"  Expires:  {_fmt(entry.expires)}")
    print(f"\n  Direct link: {link}")
    print('\n  Run "manage-codes export" to get the CAREER_CODES value.\n')
    return 0


def cmd_list(path: Path, args) -> int:
    codes = load_codes(path)
    if not codes:
        print("\n  No codes found.\n")
        return 0
    print("\n  Active access codes:\n")
    for c in codes:
        status = "  EXPIRED" if is_expired(c.expires) else f"  valid until {_fmt(c.expires)}"
        print(f"  {c.code}  |  {c.name:<20}  |{status}")
    print("")
    return 0


def cmd_revoke(path: Path, args) -> int:
    try:
        entry = revoke_code(path, args.code)
    except CodeNotFound:
        print(f'\n  Code "{args.code.strip().upper()}" not found.\n', file=sys.stderr)
        return 1
    print(f'\n  Code "{entry.code.upper()}" revoked.\n')
    return 0


def cmd_cleanup(path: Path, args) -> int:
    removed, remaining = cleanup_expired(path)
    print(f"\n  Removed {removed} expired codes. {remaining} active.\n")
    return 0


def cmd_export(path: Path, args) -> int:
    value = json.dumps(export_codes(path), separators=(",", ":"))
    print("\n  Copy this value to the CAREER_CODES setting:\n")
    print(value)
    print("\n  Or as a .env line:")
    print(f"  CAREER_CODES={shlex.quote(value)}")
    print("")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manage-codes",
        description="Manage Career Highlights access codes",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="codes file (default: CAREER_CODES_FILE)",
    )
    sub = parser.add_subparsers(dest="command")

    p_add = sub.add_parser("add", help="create a new code")
    p_add.add_argument("name")
    p_add.add_argument("duration", help="e.g. 7d, 48h")
    p_add.set_defaults(func=cmd_add)

    sub.add_parser("list", help="show all codes").set_defaults(func=cmd_list)

    p_revoke = sub.add_parser("revoke", help="remove a code")
    p_revoke.add_argument("code")
    p_revoke.set_defaults(func=cmd_revoke)

    sub.add_parser("cleanup", help="remove expired codes").set_defaults(func=cmd_cleanup)
    sub.add_parser("export", help="print CAREER_CODES JSON").set_defaults(func=cmd_export)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        print(USAGE)
        return 0

    path = args.file or settings.career_codes_file
    try:
        return args.func(path, args)
    except (DurationError, CodeStoreError) as e:
        print(f"  {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
