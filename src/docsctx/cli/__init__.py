"""
docsctx CLI package.

Provides the command-line interface with auto-discovery of commands
from subfolders (rules/, task/, config/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_repo_root_flag,
    add_dry_run_flag,
    add_metadata_args,
    add_standard_flags,
)
from ._utils import (
    ProjectContext,
    get_repo_root,
    load_project_context,
    metadata_overrides,
    report_gaps,
)

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_dry_run_flag",
    "add_metadata_args",
    "add_standard_flags",
    # Utilities
    "ProjectContext",
    "get_repo_root",
    "load_project_context",
    "metadata_overrides",
    "report_gaps",
]
