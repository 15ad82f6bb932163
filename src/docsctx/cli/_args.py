"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for repository root override."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override repository root path",
    )


def add_dry_run_flag(parser: argparse.ArgumentParser) -> None:
    """Add --dry-run flag."""
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Show what would be done without making changes",
    )


def add_metadata_args(parser: argparse.ArgumentParser) -> None:
    """Add --type/--context/--stack/--description/--priority overrides.

    Values given on the command line win over those read from a task file.
    """
    group = parser.add_argument_group("task metadata")
    group.add_argument("--type", dest="task_type", help="Task type (feature, bug, deploy, ...)")
    group.add_argument("--context", dest="task_context", help="Task context (api, web, mobile, ...)")
    group.add_argument("--stack", help="Stack identifier (e.g. nestjs, react)")
    group.add_argument("--description", help="Task description")
    group.add_argument("--priority", help="Task priority (low, medium, high, critical)")


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json and --repo-root."""
    add_json_flag(parser)
    add_repo_root_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_dry_run_flag",
    "add_metadata_args",
    "add_standard_flags",
]
