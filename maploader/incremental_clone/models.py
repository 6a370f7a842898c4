"""Configuration and result models for the incremental clone engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from maploader.config import runtime_config
from maploader.scene_graph.models import SceneInstance


class AtomicityPolicy(str, Enum):
    GROUPING_AWARE = "grouping_aware"
    THRESHOLD = "threshold"


class LoaderConfig(BaseModel):
    interval: int = Field(
        default=runtime_config.DEFAULT_INTERVAL,
        ge=1,
        description="Atomic units cloned between two yields",
    )
    resume_time: float = Field(
        default=runtime_config.DEFAULT_RESUME_TIME,
        ge=0.0,
        description="Minimum seconds spent in each yield",
    )
    policy: AtomicityPolicy = AtomicityPolicy.THRESHOLD
    descendant_threshold: int = Field(
        default=runtime_config.DEFAULT_DESCENDANT_THRESHOLD,
        ge=0,
        description="threshold policy: subtrees up to this many descendants are atomic",
    )
    atomic_base_parts: bool = Field(
        default=False,
        description="grouping_aware policy: never split parts that carry children",
    )
    strict_invariants: bool = Field(
        default=True,
        description="Raise instead of logging when estimate and clone disagree",
    )

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_env(cls) -> LoaderConfig:
        cfg = runtime_config.config_snapshot()
        return cls(
            interval=cfg["interval"],
            resume_time=cfg["resume_time"],
            policy=cfg["policy"],
            descendant_threshold=cfg["descendant_threshold"],
            atomic_base_parts=cfg["atomic_base_parts"],
            strict_invariants=cfg["strict_invariants"],
        )


class LoadStats(BaseModel):
    units: int = 0
    estimated_units: int = 0
    yields: int = 0
    waited_seconds: float = 0.0
    primary_synced: bool = False


@dataclass
class LoadReport:
    root: SceneInstance
    stats: LoadStats
