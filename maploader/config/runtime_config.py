"""Runtime configuration helpers for the map loader."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_INTERVAL = 50
DEFAULT_RESUME_TIME = 0.1
DEFAULT_POLICY = "threshold"
DEFAULT_DESCENDANT_THRESHOLD = 40
DEFAULT_FRAME_RATE = 60.0

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _get_bool(name: str) -> Optional[bool]:
    raw = (_get_env(name) or "").strip().lower()
    if not raw:
        return None
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def get_env() -> Optional[str]:
    return _get_env("ENV") or _get_env("APP_ENV")


def _is_dev_env() -> bool:
    env = (get_env() or "dev").lower()
    return env in {"dev", "local"}


def get_interval() -> int:
    """Atomic units cloned between two cooperative yields."""
    return _get_int("MAP_LOADER_INTERVAL", DEFAULT_INTERVAL)


def get_resume_time() -> float:
    return _get_float("MAP_LOADER_RESUME_TIME", DEFAULT_RESUME_TIME)


def get_policy() -> str:
    return (_get_env("MAP_LOADER_POLICY") or DEFAULT_POLICY).strip().lower()


def get_descendant_threshold() -> int:
    return _get_int("MAP_LOADER_DESCENDANT_THRESHOLD", DEFAULT_DESCENDANT_THRESHOLD)


def get_atomic_base_parts() -> bool:
    return bool(_get_bool("MAP_LOADER_ATOMIC_BASE_PARTS"))


def get_strict_invariants() -> bool:
    """Unit-count mismatches are fatal in dev/local unless overridden."""
    flag = _get_bool("MAP_LOADER_STRICT_INVARIANTS")
    if flag is None:
        return _is_dev_env()
    return flag


def get_frame_rate() -> float:
    return _get_float("MAP_LOADER_FRAME_RATE", DEFAULT_FRAME_RATE)


def config_snapshot() -> dict:
    """Return a snapshot of relevant env-driven config."""
    return {
        "env": get_env(),
        "interval": get_interval(),
        "resume_time": get_resume_time(),
        "policy": get_policy(),
        "descendant_threshold": get_descendant_threshold(),
        "atomic_base_parts": get_atomic_base_parts(),
        "strict_invariants": get_strict_invariants(),
        "frame_rate": get_frame_rate(),
    }
