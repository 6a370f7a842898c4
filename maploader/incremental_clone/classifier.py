"""Atomic/composite classification shared by the estimator and the cloner."""
from __future__ import annotations

from maploader.incremental_clone.models import AtomicityPolicy, LoaderConfig
from maploader.scene_graph.models import NodeKind, SceneInstance


def is_grouping(node: SceneInstance) -> bool:
    return node.is_a(NodeKind.MODEL)


def has_primary(node: SceneInstance) -> bool:
    return is_grouping(node) and node.primary is not None


def is_atomic(node: SceneInstance, config: LoaderConfig) -> bool:
    """Return True when `node` must be cloned in a single step."""
    if not node.has_children():
        return True
    if config.policy == AtomicityPolicy.THRESHOLD:
        return node.descendant_count() <= config.descendant_threshold
    # Models with a primary are consumed whole by observers; never split them.
    if has_primary(node):
        return True
    return config.atomic_base_parts and node.is_a(NodeKind.BASE_PART)
