"""Unified CLI output formatting utilities.

Provides consistent output for all docsctx CLI commands, supporting both
JSON and text output modes.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from docsctx.core.exceptions import DocsctxError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
            status: Status string for JSON output
        """
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        docsctx errors carry their own code and context into the JSON payload.
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {"error": error_code, "message": msg}
            if isinstance(error, DocsctxError):
                payload = error.to_json_error()
                output["code"] = payload["code"]
                if payload["context"]:
                    output["context"] = payload["context"]
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def warning(self, message: str) -> None:
        """Output a warning to stderr (text mode only)."""
        if not self.json_mode:
            print(f"Warning: {message}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Output key-value pair in text mode."""
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")


__all__ = [
    "OutputFormatter",
]
