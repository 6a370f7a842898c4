"""Primary-reference synchronisation between a source tree and its clone."""
from __future__ import annotations

import logging
from typing import Optional

from maploader.scene_graph.models import SceneInstance

logger = logging.getLogger(__name__)


def get_index_of(node: Optional[SceneInstance], ancestor: Optional[SceneInstance]) -> Optional[int]:
    """Return the 1-based position of `node` among `ancestor`'s descendants."""
    if node is None or ancestor is None:
        logger.warning("get_index_of called with missing arguments")
        return None
    if not node.is_descendant_of(ancestor):
        logger.warning(f"{node.name} is not a descendant of {ancestor.name}")
        return None
    for index, descendant in enumerate(ancestor.iter_descendants(), start=1):
        if descendant is node:
            return index
    return None


def sync_primary(source: Optional[SceneInstance], clone: Optional[SceneInstance]) -> bool:
    """Point `clone.primary` at the descendant matching `source.primary`.

    Matching is by structural position, so both trees must have the same
    shape. Leaves `clone` untouched and returns False when they do not.
    """
    if source is None or clone is None:
        logger.warning("sync_primary called with missing arguments")
        return False
    if source.primary is None:
        logger.warning(f"{source.name} has no primary reference to sync")
        return False

    source_count = source.descendant_count()
    clone_count = clone.descendant_count()
    if source_count != clone_count:
        logger.warning(
            f"{source.name} has {source_count} descendants but {clone.name} has {clone_count}"
        )
        return False

    index = get_index_of(source.primary, source)
    if index is None:
        return False

    clone.primary = clone.get_descendants()[index - 1]
    return True
