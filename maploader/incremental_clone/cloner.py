"""Paced cloner: rebuilds a tree while yielding to the heartbeat."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from maploader.heartbeat.service import Heartbeat, custom_wait
from maploader.incremental_clone.cancellation import CancellationToken
from maploader.incremental_clone.classifier import is_atomic
from maploader.incremental_clone.models import LoaderConfig
from maploader.scene_graph.models import SceneInstance

logger = logging.getLogger(__name__)


@dataclass
class WorkCounter:
    """Running totals for one load call."""
    value: int = 0
    yields: int = 0
    waited: float = 0.0


def new_holder(node: SceneInstance, parent: Optional[SceneInstance] = None) -> SceneInstance:
    """Create an empty node of the same kind and name as `node`."""
    holder = SceneInstance(
        class_name=node.class_name,
        name=node.name,
        properties=copy.deepcopy(node.properties),
    )
    if parent is not None:
        holder.set_parent(parent)
    return holder


async def _pause(
    counter: WorkCounter,
    config: LoaderConfig,
    heartbeat: Heartbeat,
    cancel_token: Optional[CancellationToken],
) -> None:
    if cancel_token is not None:
        cancel_token.raise_if_cancelled()
    elapsed = await custom_wait(heartbeat, config.resume_time)
    counter.yields += 1
    counter.waited += elapsed
    logger.debug(f"Yielded after {counter.value} units ({elapsed:.3f}s)")
    if cancel_token is not None:
        cancel_token.raise_if_cancelled()


async def clone_children(
    node: SceneInstance,
    holder: SceneInstance,
    counter: WorkCounter,
    config: LoaderConfig,
    heartbeat: Heartbeat,
    cancel_token: Optional[CancellationToken] = None,
) -> WorkCounter:
    """Clone the children of `node` into `holder`, in order.

    Composite children get their own holder and are walked depth first from an
    explicit stack, so tree depth is not bounded by the recursion limit.
    """
    frames: List[Tuple[Iterator[SceneInstance], SceneInstance]] = [
        (iter(node.get_children()), holder)
    ]
    while frames:
        children, target = frames[-1]
        child = next(children, None)
        if child is None:
            frames.pop()
            continue
        if is_atomic(child, config):
            counter.value += 1
            if counter.value % config.interval == 0:
                await _pause(counter, config, heartbeat, cancel_token)
            child.clone().set_parent(target)
        else:
            frames.append((iter(child.get_children()), new_holder(child, target)))
    return counter


async def clone_subtree(
    node: SceneInstance,
    parent: Optional[SceneInstance],
    counter: WorkCounter,
    config: LoaderConfig,
    heartbeat: Heartbeat,
    cancel_token: Optional[CancellationToken] = None,
) -> WorkCounter:
    """Decompose `node` under `parent` and return the updated counter."""
    holder = new_holder(node, parent)
    return await clone_children(node, holder, counter, config, heartbeat, cancel_token)
