"""
Countdown tick source.

One asyncio task per timer; arming always cancels the previous task first,
so two decrement streams can never overlap.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from loguru import logger


class CountdownTimer:
    """
    Repeating tick source with two states: armed and disarmed.

    Usage:
        timer = CountdownTimer(session_tick, interval=1.0)
        timer.arm()      # must be called with a running event loop
        ...
        timer.disarm()   # idempotent, safe from inside on_tick
    """

    def __init__(self, on_tick: Callable[[], None], interval: float = 1.0):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._on_tick = on_tick
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def armed(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self) -> None:
        """Start ticking, replacing any previous tick stream."""
        self.disarm()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Timer armed (interval={self.interval}s)")

    def disarm(self) -> None:
        """Cancel outstanding ticks. Safe to call repeatedly."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Timer disarmed")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        me = asyncio.current_task()
        # Tick n is due at arm time + n * interval
        deadline = loop.time() + self.interval
        while self._task is me:
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            # A disarm racing with the sleep wins
            if self._task is not me:
                return
            deadline += self.interval
            try:
                self._on_tick()
            except Exception:
                logger.exception("Timer tick handler failed")
