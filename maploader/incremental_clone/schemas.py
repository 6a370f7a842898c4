"""Request and response schemas for the map loader HTTP surface."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from maploader.incremental_clone.models import LoaderConfig, LoadStats
from maploader.scene_graph.schemas import SceneNodeSpec


class EstimateRequest(BaseModel):
    root: SceneNodeSpec
    config: Optional[LoaderConfig] = None


class EstimateResponse(BaseModel):
    units: int


class LoadMapRequest(BaseModel):
    root: SceneNodeSpec
    config: Optional[LoaderConfig] = None


class LoadMapResponse(BaseModel):
    root: SceneNodeSpec
    stats: LoadStats
