"""Incremental scene-tree loader."""
