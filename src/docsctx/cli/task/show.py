"""
docsctx task show command.

SUMMARY: Show a task's normalised metadata and any gaps
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docsctx.cli import OutputFormatter, add_standard_flags, load_project_context
from docsctx.core.exceptions import DocsctxError
from docsctx.core.task import load_task_file

SUMMARY = "Show a task's normalised metadata and any gaps"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("task_file", help="Task document to inspect")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        ctx = load_project_context(args)
        parsed = load_task_file(Path(args.task_file), ctx.tables.vocabulary)
    except DocsctxError as e:
        formatter.error(e, error_code="show_failed")
        return 1

    if args.json:
        formatter.json_output(parsed.to_dict())
        return 0

    meta = parsed.metadata
    formatter.text(f"Task: {meta.title or parsed.path}")
    for key in ("id", "type", "context", "stack", "priority"):
        value = getattr(meta, key)
        if value is not None:
            formatter.text_kv(key, value)
    if meta.description:
        first_line = meta.description.splitlines()[0]
        formatter.text_kv("description", first_line)

    if parsed.gaps:
        formatter.text("\nGaps (fill these in to make rule selection explicit):")
        for gap in parsed.gaps:
            formatter.text(f"  - {gap.describe()}")
    if parsed.schema_errors:
        formatter.text("\nSchema problems:")
        for message in parsed.schema_errors:
            formatter.text(f"  - {message}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    args = parser.parse_args()
    sys.exit(main(args))
