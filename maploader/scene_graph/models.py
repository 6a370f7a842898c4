"""In-memory scene graph used as the host hierarchy for the map loader."""
from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class NodeKind(str, Enum):
    INSTANCE = "Instance"
    PV_INSTANCE = "PVInstance"
    MODEL = "Model"
    FOLDER = "Folder"
    BASE_PART = "BasePart"
    PART = "Part"
    MESH_PART = "MeshPart"
    WEDGE_PART = "WedgePart"
    UNION_OPERATION = "UnionOperation"
    ATTACHMENT = "Attachment"
    DECAL = "Decal"
    SCRIPT = "Script"


# class name -> ancestor kinds, nearest first. Unknown names are plain Instances.
KIND_ANCESTRY: Dict[str, Tuple[str, ...]] = {
    NodeKind.INSTANCE.value: (),
    NodeKind.PV_INSTANCE.value: (NodeKind.INSTANCE.value,),
    NodeKind.MODEL.value: (NodeKind.PV_INSTANCE.value, NodeKind.INSTANCE.value),
    NodeKind.FOLDER.value: (NodeKind.INSTANCE.value,),
    NodeKind.BASE_PART.value: (NodeKind.PV_INSTANCE.value, NodeKind.INSTANCE.value),
    NodeKind.PART.value: (
        NodeKind.BASE_PART.value,
        NodeKind.PV_INSTANCE.value,
        NodeKind.INSTANCE.value,
    ),
    NodeKind.MESH_PART.value: (
        NodeKind.BASE_PART.value,
        NodeKind.PV_INSTANCE.value,
        NodeKind.INSTANCE.value,
    ),
    NodeKind.WEDGE_PART.value: (
        NodeKind.BASE_PART.value,
        NodeKind.PV_INSTANCE.value,
        NodeKind.INSTANCE.value,
    ),
    NodeKind.UNION_OPERATION.value: (
        NodeKind.BASE_PART.value,
        NodeKind.PV_INSTANCE.value,
        NodeKind.INSTANCE.value,
    ),
    NodeKind.ATTACHMENT.value: (NodeKind.INSTANCE.value,),
    NodeKind.DECAL.value: (NodeKind.INSTANCE.value,),
    NodeKind.SCRIPT.value: (NodeKind.INSTANCE.value,),
}


def _kind_value(kind: Any) -> str:
    return kind.value if isinstance(kind, NodeKind) else str(kind)


@dataclass(eq=False)
class SceneInstance:
    """A node in the host hierarchy.

    Children are kept in insertion order; `primary` may point at one of the
    node's own descendants (only grouping kinds make use of it).
    """

    class_name: str
    name: str = ""
    properties: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    primary: Optional[SceneInstance] = field(default=None, repr=False)
    parent: Optional[SceneInstance] = field(default=None, repr=False, init=False)
    _children: List[SceneInstance] = field(default_factory=list, repr=False, init=False)
    _destroyed: bool = field(default=False, repr=False, init=False)

    def __post_init__(self) -> None:
        self.class_name = _kind_value(self.class_name)
        if not self.name:
            self.name = self.class_name

    # -- hierarchy -----------------------------------------------------

    def set_parent(self, parent: Optional[SceneInstance]) -> None:
        if self._destroyed:
            raise RuntimeError(f"{self.name} has been destroyed")
        if parent is self or (parent is not None and parent.is_descendant_of(self)):
            raise ValueError(f"Cannot parent {self.name} under itself or its descendant")
        if self.parent is parent:
            return
        if self.parent is not None:
            self.parent._children.remove(self)
        self.parent = parent
        if parent is not None:
            parent._children.append(self)

    def add_child(self, child: SceneInstance) -> SceneInstance:
        child.set_parent(self)
        return child

    def get_children(self) -> List[SceneInstance]:
        return list(self._children)

    def has_children(self) -> bool:
        return bool(self._children)

    def iter_descendants(self) -> Iterator[SceneInstance]:
        """Yield descendants depth first, each node before its children."""
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def get_descendants(self) -> List[SceneInstance]:
        return list(self.iter_descendants())

    def descendant_count(self) -> int:
        return sum(1 for _ in self.iter_descendants())

    def is_descendant_of(self, ancestor: Optional[SceneInstance]) -> bool:
        if ancestor is None:
            return False
        node = self.parent
        while node is not None:
            if node is ancestor:
                return True
            node = node.parent
        return False

    def find_first_child(self, name: str) -> Optional[SceneInstance]:
        for child in self._children:
            if child.name == name:
                return child
        return None

    # -- type checks ---------------------------------------------------

    def is_a(self, kind: Any) -> bool:
        wanted = _kind_value(kind)
        if self.class_name == wanted:
            return True
        return wanted in KIND_ANCESTRY.get(self.class_name, (NodeKind.INSTANCE.value,))

    # -- lifecycle -----------------------------------------------------

    def clone(self) -> SceneInstance:
        """Duplicate this node and its whole subtree in one step.

        Primary references that point inside the subtree are remapped to the
        copies; references outside it are kept as-is. The copy is unparented.
        """
        mapping: Dict[int, SceneInstance] = {}
        root: Optional[SceneInstance] = None
        stack: List[Tuple[SceneInstance, Optional[SceneInstance]]] = [(self, None)]
        while stack:
            node, dup_parent = stack.pop()
            dup = SceneInstance(
                class_name=node.class_name,
                name=node.name,
                properties=copy.deepcopy(node.properties),
            )
            mapping[id(node)] = dup
            if dup_parent is None:
                root = dup
            else:
                # Fresh copies cannot form cycles.
                dup.parent = dup_parent
                dup_parent._children.append(dup)
            stack.extend((child, dup) for child in reversed(node._children))

        for node in [self, *self.iter_descendants()]:
            if node.primary is not None:
                mapping[id(node)].primary = mapping.get(id(node.primary), node.primary)
        return root

    def destroy(self) -> None:
        """Detach from the parent and release the whole subtree."""
        if self._destroyed:
            return
        if self.parent is not None:
            self.set_parent(None)
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(node._children)
            for child in node._children:
                child.parent = None
            node._children = []
            node.primary = None
            node._destroyed = True

    @property
    def destroyed(self) -> bool:
        return self._destroyed
