"""
docsctx config show command.

SUMMARY: Show the merged configuration
"""

from __future__ import annotations

import argparse
import sys

import yaml

from docsctx.cli import OutputFormatter, add_standard_flags, get_repo_root
from docsctx.core.config import ConfigManager
from docsctx.core.exceptions import DocsctxError

SUMMARY = "Show the merged configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "section",
        nargs="?",
        help="Only show this top-level section (e.g. rules, metadata)",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip schema validation",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        cfg = ConfigManager(get_repo_root(args)).load_config(validate=not args.no_validate)
    except DocsctxError as e:
        formatter.error(e, error_code="config_invalid")
        return 1

    data = cfg
    if args.section:
        if args.section not in cfg:
            formatter.error(KeyError(args.section), f"Unknown config section: {args.section}", error_code="not_found")
            return 1
        data = {args.section: cfg[args.section]}

    if args.json:
        formatter.json_output(data)
    else:
        formatter.text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n"))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
