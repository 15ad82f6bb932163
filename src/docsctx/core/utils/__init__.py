"""Shared utilities for docsctx core modules."""
