"""
docsctx rules list command.

SUMMARY: List known rules and whether their documents exist
"""

from __future__ import annotations

import argparse
import sys

from docsctx.cli import OutputFormatter, add_standard_flags, load_project_context
from docsctx.core.exceptions import DocsctxError

SUMMARY = "List known rules and whether their documents exist"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--missing",
        action="store_true",
        help="Only list rules whose documents are missing",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """List rules referenced by the selection tables or found on disk."""
    formatter = OutputFormatter(json_mode=args.json)

    try:
        ctx = load_project_context(args)
    except DocsctxError as e:
        formatter.error(e, error_code="list_failed")
        return 1

    entries = ctx.catalog.entries(ctx.tables)
    if args.missing:
        entries = [e for e in entries if not e.exists]

    if args.json:
        formatter.json_output(
            {
                "rulesDir": ctx.catalog.directory,
                "rules": [e.to_dict() for e in entries],
            }
        )
        return 0

    if not entries:
        formatter.text("No rules found.")
        return 0

    width = max(len(e.id) for e in entries)
    for entry in entries:
        mark = "ok" if entry.exists else "missing"
        formatter.text(f"{entry.id:<{width}}  {entry.path}  [{mark}]")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
