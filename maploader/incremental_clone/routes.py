"""HTTP routes for the map loader."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from maploader.common.error_envelope import error_response
from maploader.config import runtime_config
from maploader.heartbeat.service import AsyncioHeartbeat, Heartbeat
from maploader.incremental_clone.estimator import estimate_units
from maploader.incremental_clone.models import LoaderConfig
from maploader.incremental_clone.schemas import (
    EstimateRequest,
    EstimateResponse,
    LoadMapRequest,
    LoadMapResponse,
)
from maploader.incremental_clone.service import InvariantViolationError, MapLoaderService
from maploader.scene_graph.adapter import SceneSpecError, instance_to_spec, spec_to_instance
from maploader.scene_graph.models import SceneInstance
from maploader.scene_graph.schemas import SceneNodeSpec

router = APIRouter(prefix="/map-loader", tags=["map_loader"])


def get_heartbeat() -> Heartbeat:
    return AsyncioHeartbeat(runtime_config.get_frame_rate())


def resolve_config(overrides: Optional[LoaderConfig]) -> LoaderConfig:
    """Layer the fields a request set explicitly over the env config."""
    config = LoaderConfig.from_env()
    if overrides is None:
        return config
    return config.model_copy(update=overrides.model_dump(exclude_unset=True))


def _to_instance(spec: SceneNodeSpec) -> SceneInstance:
    try:
        return spec_to_instance(spec)
    except SceneSpecError as exc:
        error_response(
            code="map_loader.invalid_scene",
            message=str(exc),
            status_code=400,
            resource_kind="scene",
        )


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.post("/estimate", response_model=EstimateResponse)
def estimate(request: EstimateRequest) -> EstimateResponse:
    root = _to_instance(request.root)
    config = resolve_config(request.config)
    return EstimateResponse(units=estimate_units(root, config))


@router.post("/load", response_model=LoadMapResponse)
async def load_map(
    request: LoadMapRequest,
    heartbeat: Heartbeat = Depends(get_heartbeat),
) -> LoadMapResponse:
    root = _to_instance(request.root)
    service = MapLoaderService(config=resolve_config(request.config), heartbeat=heartbeat)
    try:
        report = await service.load_with_report(root)
    except InvariantViolationError as exc:
        error_response(
            code="map_loader.invariant_violation",
            message=str(exc),
            status_code=500,
            resource_kind="scene",
        )
    return LoadMapResponse(root=instance_to_spec(report.root), stats=report.stats)
