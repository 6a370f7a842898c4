"""Incremental clone engine: paced duplication of scene trees."""
from .models import AtomicityPolicy, LoaderConfig, LoadReport, LoadStats
from .cancellation import CancellationToken, LoadCancelledError
from .classifier import is_atomic
from .estimator import estimate_units
from .cloner import WorkCounter, clone_children, clone_subtree
from .primary import get_index_of, sync_primary
from .service import InvariantViolationError, MapLoaderArgumentError, MapLoaderService, load

__all__ = [
    "AtomicityPolicy", "LoaderConfig", "LoadReport", "LoadStats",
    "CancellationToken", "LoadCancelledError", "is_atomic", "estimate_units",
    "WorkCounter", "clone_children", "clone_subtree", "get_index_of", "sync_primary",
    "InvariantViolationError", "MapLoaderArgumentError", "MapLoaderService", "load",
]
