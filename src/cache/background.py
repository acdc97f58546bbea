# src/cache/background.py — v1
"""Detached fire-and-forget tasks for cache population and invalidation.

Tasks are independent of the task that spawned them: cancelling the
caller does not cancel them, and nothing awaits their outcome. Failures
are logged at DEBUG and discarded.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class BackgroundTasks:
    """Owner of in-flight detached tasks.

    Strong references are kept until each task finishes so the event loop
    cannot garbage-collect a pending cache write.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], description: str) -> asyncio.Task[None]:
        """Schedule coro on the running loop without awaiting it."""
        task = asyncio.get_running_loop().create_task(self._run(coro, description))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every spawned task (including ones spawned meanwhile) is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    @staticmethod
    async def _run(coro: Coroutine[Any, Any, Any], description: str) -> None:
        try:
            await coro
        except Exception as e:
            logger.debug("Background %s failed: %s", description, e)
