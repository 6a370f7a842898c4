"""Conversion between SceneNodeSpec documents and live SceneInstance trees."""
from __future__ import annotations

from typing import Dict, List, Tuple

from maploader.scene_graph.models import SceneInstance
from maploader.scene_graph.schemas import SceneNodeSpec


class SceneSpecError(ValueError):
    """Raised when a scene document cannot be turned into a tree."""


def spec_to_instance(spec: SceneNodeSpec) -> SceneInstance:
    """Build a SceneInstance tree from a document.

    Ids are kept when given. A `primary_id` must name a descendant of the node
    that carries it.
    """
    by_id: Dict[str, SceneInstance] = {}
    pending: List[Tuple[SceneInstance, str]] = []

    def _build(node_spec: SceneNodeSpec) -> SceneInstance:
        node = SceneInstance(
            class_name=node_spec.class_name,
            name=node_spec.name,
            properties=dict(node_spec.properties),
        )
        if node_spec.id:
            if node_spec.id in by_id:
                raise SceneSpecError(f"duplicate node id {node_spec.id}")
            node.id = node_spec.id
        by_id[node.id] = node
        for child_spec in node_spec.children:
            _build(child_spec).set_parent(node)
        if node_spec.primary_id:
            pending.append((node, node_spec.primary_id))
        return node

    root = _build(spec)

    for node, primary_id in pending:
        target = by_id.get(primary_id)
        if target is None:
            raise SceneSpecError(f"primary_id {primary_id} on {node.name} does not exist")
        if not target.is_descendant_of(node):
            raise SceneSpecError(f"primary_id {primary_id} is not a descendant of {node.name}")
        node.primary = target
    return root


def instance_to_spec(node: SceneInstance) -> SceneNodeSpec:
    return SceneNodeSpec(
        id=node.id,
        class_name=node.class_name,
        name=node.name,
        properties=dict(node.properties),
        children=[instance_to_spec(child) for child in node.get_children()],
        primary_id=node.primary.id if node.primary is not None else None,
    )
