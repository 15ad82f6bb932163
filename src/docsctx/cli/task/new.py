"""
docsctx task new command.

SUMMARY: Create a task document with its rules section filled in
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docsctx.cli import (
    OutputFormatter,
    add_dry_run_flag,
    add_json_flag,
    add_metadata_args,
    add_repo_root_flag,
    load_project_context,
    metadata_overrides,
    report_gaps,
)
from docsctx.core.exceptions import DocsctxError
from docsctx.core.rules import explain_rules
from docsctx.core.task.templates import load_task_template, render_task_template, slugify
from docsctx.core.utils.io import write_text

SUMMARY = "Create a task document with its rules section filled in"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("title", help="Task title")
    parser.add_argument("--id", dest="task_id", help="Task identifier")
    add_metadata_args(parser)
    parser.add_argument(
        "--output",
        "-o",
        help="Where to write the task (default: <tasks_dir>/<slug>.md under the repo root)",
    )
    parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite an existing file",
    )
    add_dry_run_flag(parser)
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        ctx = load_project_context(args)
    except DocsctxError as e:
        formatter.error(e, error_code="new_failed")
        return 1

    raw = {"title": args.title, "id": args.task_id, **metadata_overrides(args)}
    selection = explain_rules(raw, ctx.tables)
    document = render_task_template(selection, ctx.catalog, template=load_task_template(ctx.repo_root))

    if args.output:
        target = Path(args.output)
    else:
        paths = ctx.config.get("paths") if isinstance(ctx.config.get("paths"), dict) else {}
        target = ctx.repo_root / str(paths.get("tasks_dir") or "tasks") / f"{slugify(args.title)}.md"

    report_gaps(formatter, (g for g in selection.gaps if g.field != "description"))

    if args.dry_run:
        if args.json:
            formatter.json_output({"path": str(target), "rules": selection.ordered, "content": document})
        else:
            formatter.text(document.rstrip("\n"))
        return 0

    if target.exists() and not args.force:
        formatter.error(FileExistsError(f"{target} already exists (use --force to overwrite)"), error_code="exists")
        return 1

    try:
        write_text(target, document)
    except OSError as e:
        formatter.error(e, error_code="write_failed")
        return 1

    formatter.success(
        {"path": str(target), "rules": selection.ordered},
        f"Created {target} ({len(selection.ordered)} rules)",
        status="created",
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
