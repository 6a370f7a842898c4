from .service import (
    DEFAULT_WAIT,
    MIN_RESUME_TIME,
    AsyncioHeartbeat,
    FixedStepHeartbeat,
    Heartbeat,
    custom_wait,
)

__all__ = [
    "DEFAULT_WAIT", "MIN_RESUME_TIME", "AsyncioHeartbeat",
    "FixedStepHeartbeat", "Heartbeat", "custom_wait",
]
