"""Cooperative cancellation for map loads."""
from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class LoadCancelledError(RuntimeError):
    """Raised at a yield boundary once the load has been cancelled."""


class CancellationToken:
    def __init__(self) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        self._cancelled = True
        self._reason = reason
        logger.info(f"Cancellation requested for map load: {reason or 'no reason given'}")

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise LoadCancelledError(self._reason or "map load cancelled")
