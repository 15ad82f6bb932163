"""
docsctx rules select command.

SUMMARY: Show the rules that apply to a task
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from docsctx.cli import (
    OutputFormatter,
    add_json_flag,
    add_metadata_args,
    add_repo_root_flag,
    load_project_context,
    metadata_overrides,
    report_gaps,
)
from docsctx.core.exceptions import DocsctxError
from docsctx.core.rules import explain_rules, render_rules_section
from docsctx.core.task import load_task_file

SUMMARY = "Show the rules that apply to a task"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "task_file",
        nargs="?",
        help="Task document to read metadata from (flags override its values)",
    )
    add_metadata_args(parser)
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Show rule document paths instead of rule ids",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show why each rule was selected",
    )
    parser.add_argument(
        "--format",
        choices=["short", "markdown", "json"],
        default="short",
        help="Output format (default: short)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Select rules for a task file and/or metadata flags."""
    json_mode = bool(args.json) or args.format == "json"
    formatter = OutputFormatter(json_mode=json_mode)

    try:
        ctx = load_project_context(args)
        raw: Dict[str, Any] = {}
        if args.task_file:
            parsed = load_task_file(Path(args.task_file), ctx.tables.vocabulary)
            raw.update(parsed.raw)
        raw.update(metadata_overrides(args))
        selection = explain_rules(raw, ctx.tables)
    except DocsctxError as e:
        formatter.error(e, error_code="select_failed")
        return 1

    report_gaps(formatter, selection.gaps)
    catalog = ctx.catalog

    if json_mode:
        payload = selection.to_dict()
        payload["paths"] = {rid: str(catalog.relative_path(rid)) for rid in selection.ordered}
        payload["missing"] = catalog.missing(selection.ordered)
        formatter.json_output(payload)
        return 0

    if args.paths:
        for rid in catalog.missing(selection.ordered):
            formatter.warning(f"rule document not found: {catalog.relative_path(rid)}")

    if args.format == "markdown":
        formatter.text(
            render_rules_section(
                selection,
                catalog if args.paths else None,
                with_reasons=args.explain,
            ).rstrip("\n")
        )
        return 0

    for rid in selection.ordered:
        label = str(catalog.relative_path(rid)) if args.paths else rid
        if args.explain:
            label = f"{label}  ({', '.join(selection.reasons[rid])})"
        formatter.text(label)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
