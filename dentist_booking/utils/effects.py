"""
Cancellable async effects owned by one flow instance.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Set

from .logging import get_logger

logger = get_logger("dentist.effects")


class EffectScope:
    """
    Track the asyncio tasks a flow starts so they can be cancelled together.

    Closing the scope cancels every pending task; cancelling a task that is
    awaiting an httpx request aborts that request. Flows check ``active``
    before writing state, so late results are dropped after close.
    """

    def __init__(self, name: str = "flow"):
        self.name = name
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def active(self) -> bool:
        return not self._closed

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Awaitable[Any]) -> asyncio.Task:
        """Start ``coro`` as a tracked task."""
        if self._closed:
            coro.close()
            raise RuntimeError(f"effect scope {self.name} is closed")
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run(self, coro: Awaitable[Any]) -> Optional[Any]:
        """
        Await ``coro`` as a tracked task.

        Returns None instead of raising when the scope was closed while the
        task was pending.
        """
        task = self.spawn(coro)
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if self._closed and (current is None or not current.cancelling()):
                logger.info(f"{self.name}: dropped result of cancelled effect")
                return None
            raise

    def later(self, delay: float, callback: Callable[[], Any]) -> asyncio.Task:
        """Run ``callback`` after ``delay`` seconds unless the scope closes first."""

        async def _delayed() -> None:
            await asyncio.sleep(delay)
            if self._closed:
                return
            result = callback()
            if asyncio.iscoroutine(result):
                await result

        return self.spawn(_delayed())

    def close(self) -> None:
        """Cancel everything still pending; further spawns raise."""
        self._closed = True
        for task in list(self._tasks):
            if not task.done():
                task.cancel()

    async def drain(self) -> None:
        """Wait for all tracked tasks to finish (used by tests and shutdown)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


class ScopedFlow:
    """Base for flows whose backend calls are owned by an EffectScope."""

    def __init__(self, scope: Optional[EffectScope] = None, name: str = "flow"):
        self.scope = scope or EffectScope(name)

    async def _call(self, coro: Awaitable[Any]) -> Optional[Any]:
        """Run a backend call inside the scope; None once the flow is closed."""
        return await self.scope.run(coro)

    @property
    def closed(self) -> bool:
        return not self.scope.active

    def close(self) -> None:
        """Abort pending calls; later results are ignored."""
        self.scope.close()
