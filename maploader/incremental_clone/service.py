"""Map loader service: paced cloning of whole scene trees."""
from __future__ import annotations

import logging
from typing import Optional

from maploader.config import runtime_config
from maploader.heartbeat.service import AsyncioHeartbeat, Heartbeat
from maploader.incremental_clone.cancellation import CancellationToken
from maploader.incremental_clone.classifier import has_primary, is_grouping
from maploader.incremental_clone.cloner import WorkCounter, clone_children, new_holder
from maploader.incremental_clone.estimator import estimate_units
from maploader.incremental_clone.models import LoaderConfig, LoadReport, LoadStats
from maploader.incremental_clone.primary import sync_primary
from maploader.scene_graph.models import SceneInstance

logger = logging.getLogger(__name__)


class MapLoaderArgumentError(ValueError):
    """Raised when a load is requested with an unusable root or parent."""


class InvariantViolationError(RuntimeError):
    """Raised when the estimator and the cloner disagree on the unit count."""


class MapLoaderService:
    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        heartbeat: Optional[Heartbeat] = None,
    ) -> None:
        self.config = config or LoaderConfig.from_env()
        self.heartbeat = heartbeat or AsyncioHeartbeat(runtime_config.get_frame_rate())

    def _validate(self, node: Optional[SceneInstance], parent: Optional[SceneInstance]) -> SceneInstance:
        if node is None or not isinstance(node, SceneInstance):
            raise MapLoaderArgumentError("node to load is missing or not a SceneInstance")
        if node.destroyed:
            raise MapLoaderArgumentError(f"{node.name} has been destroyed")
        if parent is not None:
            if not isinstance(parent, SceneInstance) or parent.destroyed:
                raise MapLoaderArgumentError("destination parent is not a live SceneInstance")
            if parent is node or parent.is_descendant_of(node):
                raise MapLoaderArgumentError(
                    f"destination parent {parent.name} lies inside {node.name}"
                )
        return node

    async def load(
        self,
        node: Optional[SceneInstance],
        parent: Optional[SceneInstance] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SceneInstance:
        report = await self.load_with_report(node, parent, cancel_token)
        return report.root

    async def load_with_report(
        self,
        node: Optional[SceneInstance],
        parent: Optional[SceneInstance] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> LoadReport:
        """
        Clone `node` (and everything below it) under `parent`.

        The root is always decomposed; its children are cloned as atomic units
        or recursed into, with a heartbeat pause every `config.interval` units.
        On failure or cancellation the partially built tree is destroyed.
        """
        node = self._validate(node, parent)
        config = self.config

        if not is_grouping(node):
            logger.info(f"{node.name} is not a Model")
        logger.info(f"Loading {node.name} ({config.policy.value} policy)")

        counter = WorkCounter()
        holder = new_holder(node, parent)
        try:
            await clone_children(node, holder, counter, config, self.heartbeat, cancel_token)
        except BaseException:
            holder.destroy()
            raise

        stats = LoadStats(
            units=counter.value,
            yields=counter.yields,
            waited_seconds=counter.waited,
        )

        # Interior Models with a primary were cloned whole; only the root needs syncing.
        if has_primary(node):
            stats.primary_synced = sync_primary(node, holder)
            if not stats.primary_synced:
                logger.warning(f"Unable to sync the primary reference of {node.name}")

        stats.estimated_units = estimate_units(node, config)
        if stats.estimated_units != counter.value:
            message = (
                f"estimate_units() counted {stats.estimated_units} units for {node.name} "
                f"but the cloner performed {counter.value}"
            )
            if config.strict_invariants:
                holder.destroy()
                raise InvariantViolationError(message)
            logger.error(message)

        logger.info(
            f"Finished loading {node.name}: {counter.value} units, "
            f"{counter.yields} yields, {counter.waited:.3f}s waited"
        )
        return LoadReport(root=holder, stats=stats)


async def load(
    node: Optional[SceneInstance],
    parent: Optional[SceneInstance] = None,
    *,
    config: Optional[LoaderConfig] = None,
    heartbeat: Optional[Heartbeat] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> SceneInstance:
    service = MapLoaderService(config=config, heartbeat=heartbeat)
    return await service.load(node, parent, cancel_token)
