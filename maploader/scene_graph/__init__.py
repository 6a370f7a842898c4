"""Scene graph hierarchy used by the map loader."""
from .models import KIND_ANCESTRY, NodeKind, SceneInstance
from .schemas import SceneNodeSpec
from .adapter import SceneSpecError, instance_to_spec, spec_to_instance

__all__ = [
    "KIND_ANCESTRY", "NodeKind", "SceneInstance", "SceneNodeSpec",
    "SceneSpecError", "instance_to_spec", "spec_to_instance",
]
