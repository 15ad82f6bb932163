"""
Auto-discovery CLI dispatcher for docsctx.

Scans subfolders for commands and automatically registers them.
Adding new commands = just add a .py file to the appropriate subfolder
exposing ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """
    Discover all CLI domain subfolders (rules, task, config).

    Returns:
        Dict mapping domain name to directory path
    """
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.is_dir() and not item.name.startswith("_"):
            # Must have at least one non-init .py file
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """
    Discover all commands in a domain subfolder.

    Args:
        domain: Name of the domain (e.g., "rules", "task")

    Returns:
        Dict mapping command name to command info dict
    """
    domain_dir = Path(__file__).parent / domain
    commands: dict[str, dict[str, Any]] = {}

    for item in domain_dir.glob("*.py"):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"docsctx.cli.{domain}.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import {domain}.{cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", f"{domain} {cmd_name}"),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered domains and commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="docsctx",
        description="docsctx - select the rule documents that apply to a task",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="domains",
        description="Available command domains",
        metavar="<domain>",
    )

    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue

        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )

        for cmd_name, cmd_info in sorted(domain_commands.items()):
            primary_name = cmd_name.replace("_", "-")
            aliases = [cmd_name] if primary_name != cmd_name else []
            cmd_parser = cmd_subparsers.add_parser(
                primary_name,
                aliases=aliases,
                help=cmd_info["summary"],
            )

            # Let module register its own arguments
            if cmd_info["register_args"]:
                cmd_info["register_args"](cmd_parser)

            if cmd_info["main"]:
                cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from docsctx import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    """Install file logging when the project enables it.

    Invalid configuration is left for the command to report.
    """
    from docsctx.cli._utils import get_repo_root
    from docsctx.core.config import ConfigManager
    from docsctx.core.exceptions import DocsctxError
    from docsctx.core.utils.stdlib_logging import configure_from_config

    try:
        repo_root = get_repo_root(args)
        cfg = ConfigManager(repo_root).load_config(validate=False)
    except DocsctxError as exc:
        logger.debug("Skipping logging setup: %s", exc)
        return
    configure_from_config(cfg, repo_root=repo_root)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for docsctx CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    # If no domain specified, show help
    if not args.domain:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    json_mode = bool(getattr(args, "json", False))
    if json_mode:
        # JSON mode must remain machine-readable on stdout/stderr.
        from docsctx.core.utils.stdlib_logging import suppress_lastresort_in_json_mode

        suppress_lastresort_in_json_mode()

    _configure_logging(args)

    command_name = f"{args.domain} {args.command}"
    logger.info("Running %s", command_name)
    try:
        result = func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("%s failed", command_name, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("%s exited with %d", command_name, result)
    return result


if __name__ == "__main__":
    sys.exit(main())
