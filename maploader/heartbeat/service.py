"""Frame heartbeat and the cooperative wait built on top of it."""
from __future__ import annotations

import asyncio
import time
from typing import Optional, Protocol

DEFAULT_WAIT = 0.03
# Shortest pause the host frame loop can honour.
MIN_RESUME_TIME = 0.029


class Heartbeat(Protocol):
    async def wait(self) -> float:
        """Suspend until the next frame and return the elapsed seconds.

        The returned value must be positive; custom_wait rejects anything else.
        """
        ...


class AsyncioHeartbeat:
    """Heartbeat driven by the running asyncio loop at a fixed frame rate."""

    def __init__(self, frame_rate: float = 60.0) -> None:
        if frame_rate <= 0:
            raise ValueError("frame_rate must be positive")
        self.frame_rate = frame_rate
        self.ticks = 0

    async def wait(self) -> float:
        started = time.perf_counter()
        await asyncio.sleep(1.0 / self.frame_rate)
        self.ticks += 1
        return time.perf_counter() - started


class FixedStepHeartbeat:
    """Heartbeat that advances simulated time by a constant step per tick.

    Still hands control back to the event loop on every tick, so other tasks
    progress, but never blocks on wall-clock time.
    """

    def __init__(self, step: float = 1.0 / 60.0) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self.step = step
        self.ticks = 0
        self.elapsed = 0.0

    async def wait(self) -> float:
        await asyncio.sleep(0)
        self.ticks += 1
        self.elapsed += self.step
        return self.step


async def custom_wait(heartbeat: Heartbeat, seconds: Optional[float] = None) -> float:
    """Wait at least `seconds` worth of heartbeat ticks.

    The request is floored at MIN_RESUME_TIME, so at least one tick is always
    consumed. Returns the total elapsed time reported by the heartbeat.
    Raises ValueError if a tick reports a non-positive frame time.
    """
    target = max(DEFAULT_WAIT if seconds is None else seconds, MIN_RESUME_TIME)
    remaining = target
    while remaining > 0:
        elapsed = await heartbeat.wait()
        if elapsed <= 0:
            raise ValueError(f"Heartbeat reported a non-positive frame time: {elapsed!r}")
        remaining -= elapsed
    return target - remaining
