"""
One-shot timer scheduling.

Single-threaded, cooperative: callbacks run on the scheduler's own
thread (the asyncio loop, or whoever advances a VirtualScheduler) and
never concurrently with each other.
"""
from .scheduler import (
    AsyncioScheduler,
    ScheduledCall,
    Scheduler,
    VirtualScheduler,
)

__all__ = ["AsyncioScheduler", "ScheduledCall", "Scheduler", "VirtualScheduler"]
