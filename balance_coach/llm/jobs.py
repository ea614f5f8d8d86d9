"""Background feedback job: one asyncio task plus its last result."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

logger = logging.getLogger(__name__)


class FeedbackJob:
    """Tracks a single feedback request.

    Each job wraps exactly one request. Starting a new job for a board replaces
    the old one in the session; the old task is left to finish on its own and
    its result is simply not shown.
    """

    def __init__(self) -> None:
        self._task: asyncio.Future[str] | None = None
        self.result: str | None = None

    @property
    def analyzing(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, request: Awaitable[str]) -> asyncio.Future[str]:
        self.result = None
        self._task = asyncio.ensure_future(request)
        self._task.add_done_callback(self._store_result)
        return self._task

    def _store_result(self, task: asyncio.Future[str]) -> None:
        if not task.cancelled() and task.exception() is None:
            self.result = task.result()

    async def wait(self) -> str | None:
        if self._task is None:
            return self.result
        try:
            return await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
            return None

    def cancel(self) -> None:
        if self.analyzing:
            logger.debug("Cancelling in-flight feedback job")
            self._task.cancel()
