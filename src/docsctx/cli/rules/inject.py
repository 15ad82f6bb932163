"""
docsctx rules inject command.

SUMMARY: Write the "Rules to apply" section into a task document
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docsctx.cli import (
    OutputFormatter,
    add_dry_run_flag,
    add_json_flag,
    add_repo_root_flag,
    load_project_context,
    report_gaps,
)
from docsctx.core.exceptions import DocsctxError
from docsctx.core.rules import explain_rules, inject_rules_section, render_rules_section
from docsctx.core.task import load_task_file
from docsctx.core.utils.io import write_text

SUMMARY = 'Write the "Rules to apply" section into a task document'


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("task_file", help="Task document to update")
    parser.add_argument(
        "--ids",
        action="store_true",
        help="List rule ids instead of rule document paths",
    )
    add_dry_run_flag(parser)
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Select rules for the task and replace (or append) its rules section."""
    formatter = OutputFormatter(json_mode=args.json)
    task_path = Path(args.task_file)

    try:
        ctx = load_project_context(args)
        parsed = load_task_file(task_path, ctx.tables.vocabulary)
        selection = explain_rules(parsed.raw, ctx.tables)
        section = render_rules_section(
            selection,
            None if args.ids else ctx.catalog,
            heading=ctx.catalog.heading,
        )
        updated = inject_rules_section(parsed.content, section, heading=ctx.catalog.heading)
        changed = updated != parsed.content
        if changed and not args.dry_run:
            write_text(task_path, updated)
    except DocsctxError as e:
        formatter.error(e, error_code="inject_failed")
        return 1
    except OSError as e:
        formatter.error(e, error_code="write_failed")
        return 1

    report_gaps(formatter, selection.gaps)

    if args.json:
        formatter.json_output(
            {
                "path": str(task_path),
                "rules": selection.ordered,
                "changed": changed,
                "dryRun": bool(args.dry_run),
            }
        )
        return 0

    if args.dry_run:
        formatter.text(updated.rstrip("\n"))
    elif changed:
        formatter.text(f"Updated {task_path} ({len(selection.ordered)} rules)")
    else:
        formatter.text(f"{task_path} already up to date")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
