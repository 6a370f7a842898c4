"""Wire schema for scene trees exchanged with the map loader."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SceneNodeSpec(BaseModel):
    id: Optional[str] = None
    class_name: str = Field(..., min_length=1)
    name: str = ""
    properties: Dict[str, Any] = Field(default_factory=dict)
    children: List[SceneNodeSpec] = Field(default_factory=list)
    primary_id: Optional[str] = Field(
        default=None, description="id of one of this node's descendants"
    )


# Resolve forward references for recursive SceneNodeSpec
SceneNodeSpec.model_rebuild()
