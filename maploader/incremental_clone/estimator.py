"""Dry-run count of the atomic units a load will perform."""
from __future__ import annotations

from maploader.incremental_clone.classifier import is_atomic
from maploader.incremental_clone.models import LoaderConfig
from maploader.scene_graph.models import SceneInstance


def estimate_units(node: SceneInstance, config: LoaderConfig) -> int:
    """Count atomic clones below `node`; `node` itself is always decomposed."""
    total = 0
    stack = node.get_children()
    while stack:
        child = stack.pop()
        if is_atomic(child, config):
            total += 1
        else:
            stack.extend(child.get_children())
    return total
