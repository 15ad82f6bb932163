from __future__ import annotations

from typing import Any, Dict, Mapping


class DocsctxError(Exception):
    """Base exception for docsctx."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(DocsctxError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DocsctxError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class TaskFileError(DocsctxError, OSError):
    """Raised when a task document cannot be read or its front-matter is malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DocsctxError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class SchemaValidationError(DocsctxError, ValueError):
    """Raised when a payload fails JSON Schema validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DocsctxError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "DocsctxError",
    "ConfigError",
    "TaskFileError",
    "SchemaValidationError",
]
