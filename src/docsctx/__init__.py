"""
docsctx - docs-as-context rule selection

docsctx maps task metadata (type, context, stack, description) to the set of
rule documents a human or AI coding assistant should follow for that task.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
